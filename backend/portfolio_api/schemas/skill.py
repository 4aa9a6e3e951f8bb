"""Skill Schemas: request/response bodies for /api/skills."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import Field, StringConstraints

from portfolio_api.core.domain_types import SkillCategory, SkillLevel
from portfolio_api.schemas.common import CamelModel, PartialUpdate, WriteModel

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
HexColor = Annotated[str, StringConstraints(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class SkillCreate(WriteModel):
    name: SkillName
    category: SkillCategory
    level: SkillLevel = SkillLevel.INTERMEDIATE
    percentage: int = Field(50, ge=0, le=100)
    icon: str = Field("", max_length=200)
    color: HexColor = "#6366f1"
    years_of_experience: float = Field(0, ge=0)
    order: int = 0


class SkillUpdate(PartialUpdate):
    name: SkillName | None = None
    category: SkillCategory | None = None
    level: SkillLevel | None = None
    percentage: int | None = Field(None, ge=0, le=100)
    icon: str | None = Field(None, max_length=200)
    color: HexColor | None = None
    years_of_experience: float | None = Field(None, ge=0)
    order: int | None = None


class SkillResponse(CamelModel):
    id: UUID
    name: str
    category: SkillCategory
    level: SkillLevel
    percentage: int
    icon: str
    color: str
    years_of_experience: float
    order: int
    created_at: datetime
    updated_at: datetime
