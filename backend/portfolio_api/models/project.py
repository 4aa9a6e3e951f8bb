"""Project ORM: one portfolio project card.

Invariants:
    - category and status hold ProjectCategory / ProjectStatus values
    - technologies and images are JSON lists of strings
    - Listing order: `order` ascending, then newest first
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.core.domain_types import ProjectCategory, ProjectStatus
from portfolio_api.db.base import Base
from portfolio_api.models.timestamps import TimestampMixin, UTCDateTime, utcnow


class Project(TimestampMixin, Base):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str] = mapped_column(Text, nullable=False)
    technologies: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    live_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    github_url: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True,
    )
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProjectCategory.WEB.value, index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProjectStatus.COMPLETED.value,
    )
    start_date: Mapped[datetime] = mapped_column(
        UTCDateTime, nullable=False, default=utcnow,
    )
    end_date: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
