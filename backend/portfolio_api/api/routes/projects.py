"""Project Routes: CRUD over portfolio projects.

Invariants:
    - List order: `order` ascending, newest first, id as final tie-breaker
    - Unknown id → 404; body failing validation → 400
    - Writes require the admin key when one is configured
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.api.dependencies import require_admin
from portfolio_api.core.domain_types import ProjectCategory
from portfolio_api.core.errors import ResourceNotFoundError
from portfolio_api.core.pagination import build_pagination
from portfolio_api.infrastructure.database import get_db
from portfolio_api.models.project import Project
from portfolio_api.schemas.common import MessageResponse
from portfolio_api.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from portfolio_api.services.listing import fetch_page

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])


async def get_project_or_404(project_id: UUID, db: AsyncSession) -> Project:
    project = await db.get(Project, project_id)
    if not project:
        raise ResourceNotFoundError("Project", str(project_id))
    return project


@router.get("")
async def list_projects(
    category: ProjectCategory | None = Query(None),
    featured: bool | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    query = select(Project).order_by(
        Project.order.asc(), Project.created_at.desc(), Project.id,
    )
    if category:
        query = query.where(Project.category == category.value)
    if featured is not None:
        query = query.where(Project.featured == featured)
    projects, total = await fetch_page(db, query, page, limit)
    return {
        "projects": [
            ProjectResponse.model_validate(p).model_dump(mode="json", by_alias=True)
            for p in projects
        ],
        "pagination": build_pagination(page, limit, total, "Projects"),
    }


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    project = await get_project_or_404(project_id, db)
    return ProjectResponse.model_validate(project)


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_project(body: ProjectCreate, db: AsyncSession = Depends(get_db)):
    project = Project(**body.model_dump(exclude_none=True))
    db.add(project)
    await db.commit()
    await db.refresh(project)
    logger.info(f"Project created: {project.title}")
    return ProjectResponse.model_validate(project)


@router.put(
    "/{project_id}", response_model=ProjectResponse,
    dependencies=[Depends(require_admin)],
)
async def update_project(
    project_id: UUID, body: ProjectUpdate, db: AsyncSession = Depends(get_db),
):
    project = await get_project_or_404(project_id, db)
    for field, value in body.changes().items():
        setattr(project, field, value)
    await db.commit()
    await db.refresh(project)
    return ProjectResponse.model_validate(project)


@router.delete(
    "/{project_id}", response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_project(project_id: UUID, db: AsyncSession = Depends(get_db)):
    project = await get_project_or_404(project_id, db)
    await db.delete(project)
    await db.commit()
    logger.info(f"Project deleted: {project_id}")
    return MessageResponse(message="Project deleted successfully")
