"""Skill Routes: CRUD over the skills grid, same conventions as projects."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.api.dependencies import require_admin
from portfolio_api.core.domain_types import SkillCategory
from portfolio_api.core.errors import ResourceNotFoundError
from portfolio_api.core.pagination import build_pagination
from portfolio_api.infrastructure.database import get_db
from portfolio_api.models.skill import Skill
from portfolio_api.schemas.common import MessageResponse
from portfolio_api.schemas.skill import SkillCreate, SkillResponse, SkillUpdate
from portfolio_api.services.listing import fetch_page

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/skills", tags=["skills"])


async def get_skill_or_404(skill_id: UUID, db: AsyncSession) -> Skill:
    skill = await db.get(Skill, skill_id)
    if not skill:
        raise ResourceNotFoundError("Skill", str(skill_id))
    return skill


@router.get("")
async def list_skills(
    category: SkillCategory | None = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
):
    query = select(Skill).order_by(
        Skill.order.asc(), Skill.created_at.desc(), Skill.id,
    )
    if category:
        query = query.where(Skill.category == category.value)
    skills, total = await fetch_page(db, query, page, limit)
    return {
        "skills": [
            SkillResponse.model_validate(s).model_dump(mode="json", by_alias=True)
            for s in skills
        ],
        "pagination": build_pagination(page, limit, total, "Skills"),
    }


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(skill_id: UUID, db: AsyncSession = Depends(get_db)):
    return SkillResponse.model_validate(await get_skill_or_404(skill_id, db))


@router.post(
    "", response_model=SkillResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_skill(body: SkillCreate, db: AsyncSession = Depends(get_db)):
    skill = Skill(**body.model_dump())
    db.add(skill)
    await db.commit()
    await db.refresh(skill)
    logger.info(f"Skill created: {skill.name}")
    return SkillResponse.model_validate(skill)


@router.put(
    "/{skill_id}", response_model=SkillResponse,
    dependencies=[Depends(require_admin)],
)
async def update_skill(
    skill_id: UUID, body: SkillUpdate, db: AsyncSession = Depends(get_db),
):
    skill = await get_skill_or_404(skill_id, db)
    for field, value in body.changes().items():
        setattr(skill, field, value)
    await db.commit()
    await db.refresh(skill)
    return SkillResponse.model_validate(skill)


@router.delete(
    "/{skill_id}", response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_skill(skill_id: UUID, db: AsyncSession = Depends(get_db)):
    skill = await get_skill_or_404(skill_id, db)
    await db.delete(skill)
    await db.commit()
    return MessageResponse(message="Skill deleted successfully")
