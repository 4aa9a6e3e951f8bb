"""Skill ORM: one entry of the skills grid."""

import uuid

from sqlalchemy import Float, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.core.domain_types import SkillLevel
from portfolio_api.db.base import Base
from portfolio_api.models.timestamps import TimestampMixin


class Skill(TimestampMixin, Base):
    __tablename__ = "skills"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    level: Mapped[str] = mapped_column(
        String(20), nullable=False, default=SkillLevel.INTERMEDIATE.value,
    )
    percentage: Mapped[int] = mapped_column(Integer, nullable=False, default=50)
    icon: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(20), nullable=False, default="#6366f1")
    years_of_experience: Mapped[float] = mapped_column(
        Float, nullable=False, default=0,
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
