"""Domain Types: enums and identity types shared by models, schemas and the contact gate.

Invariants:
    - Every enumerated DB column has exactly one Enum here; no raw string matching elsewhere
    - Enum values are the exact strings stored in the DB and sent on the wire

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProjectId = NewType("ProjectId", UUID)
SkillId = NewType("SkillId", UUID)
ContactId = NewType("ContactId", UUID)

EpochMillis = NewType("EpochMillis", int)


# ─── Enums ───────────────────────────────────────────────────────

class ContactStatus(str, Enum):
    """Admin triage state of a contact submission."""
    NEW = "new"
    READ = "read"
    REPLIED = "replied"


class ProjectCategory(str, Enum):
    WEB = "web"
    MOBILE = "mobile"
    DESKTOP = "desktop"
    AI = "ai"
    OTHER = "other"


class ProjectStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNED = "planned"


class SkillCategory(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    TOOLS = "tools"
    OTHER = "other"


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class RejectionReason(str, Enum):
    """Why the contact gate refused a submission, in chain order."""
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_CAPTCHA = "INVALID_CAPTCHA"
    SPAM_DETECTED = "SPAM_DETECTED"
    RATE_LIMITED = "RATE_LIMITED"
    TOO_FAST = "TOO_FAST"
    SUSPICIOUS_CONTENT = "SUSPICIOUS_CONTENT"
    INPUT_TOO_LONG = "INPUT_TOO_LONG"
    MESSAGE_TOO_SHORT = "MESSAGE_TOO_SHORT"
