"""ORM Models: SQLAlchemy declarative models for projects, skills and contact submissions.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete once the package loads
"""

from portfolio_api.models.project import Project  # noqa: F401
from portfolio_api.models.skill import Skill  # noqa: F401
from portfolio_api.models.contact_submission import ContactSubmission  # noqa: F401
