"""Project Schemas: request/response bodies for /api/projects.

Invariants:
    - title, description, shortDescription required and non-blank on create
    - technologies / images entries are non-blank strings
    - PUT is a partial update; only endDate may be set back to null
"""

from datetime import datetime
from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import Field, StringConstraints

from portfolio_api.core.domain_types import ProjectCategory, ProjectStatus
from portfolio_api.schemas.common import CamelModel, NonEmptyStr, PartialUpdate, WriteModel

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Url = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class ProjectCreate(WriteModel):
    title: Title
    description: NonEmptyStr
    short_description: NonEmptyStr
    technologies: list[NonEmptyStr] = Field(default_factory=list)
    images: list[NonEmptyStr] = Field(default_factory=list)
    live_url: Url = ""
    github_url: Url = ""
    featured: bool = False
    category: ProjectCategory = ProjectCategory.WEB
    status: ProjectStatus = ProjectStatus.COMPLETED
    start_date: datetime | None = None
    end_date: datetime | None = None
    order: int = 0


class ProjectUpdate(PartialUpdate):
    NULLABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"end_date"})

    title: Title | None = None
    description: NonEmptyStr | None = None
    short_description: NonEmptyStr | None = None
    technologies: list[NonEmptyStr] | None = None
    images: list[NonEmptyStr] | None = None
    live_url: Url | None = None
    github_url: Url | None = None
    featured: bool | None = None
    category: ProjectCategory | None = None
    status: ProjectStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    order: int | None = None


class ProjectResponse(CamelModel):
    id: UUID
    title: str
    description: str
    short_description: str
    technologies: list[str]
    images: list[str]
    live_url: str
    github_url: str
    featured: bool
    category: ProjectCategory
    status: ProjectStatus
    start_date: datetime
    end_date: datetime | None
    order: int
    created_at: datetime
    updated_at: datetime
