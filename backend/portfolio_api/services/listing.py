"""Paginated listing shared by the project, skill and contact routers."""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.pagination import page_offset


async def fetch_page(
    db: AsyncSession, query: Select, page: int, limit: int,
) -> tuple[list, int]:
    """Return (items on the requested page, total matching rows).

    query must already carry its filters and a deterministic order_by.
    """
    count_query = select(func.count()).select_from(
        query.order_by(None).subquery(),
    )
    total = (await db.execute(count_query)).scalar_one()
    result = await db.execute(
        query.limit(limit).offset(page_offset(page, limit)),
    )
    return list(result.scalars().all()), total
