"""ContactSubmission ORM: a contact-form message that passed the gate.

Invariants:
    - Rows exist only for submissions that passed every gate check
    - After insert only `status` (admin triage) and `notified` change
    - notified=False means the owner email was never confirmed sent
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.core.domain_types import ContactStatus
from portfolio_api.db.base import Base
from portfolio_api.models.timestamps import TimestampMixin, UTCDateTime, utcnow


class ContactSubmission(TimestampMixin, Base):
    __tablename__ = "contact_submissions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    subject: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    ip_address: Mapped[str] = mapped_column(String(64), nullable=False)
    user_agent: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    submission_time: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow,
    )
    form_duration_ms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ContactStatus.NEW.value, index=True,
    )
    notified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
