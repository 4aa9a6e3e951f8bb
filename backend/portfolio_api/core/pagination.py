"""Pagination: page/limit arithmetic shared by every list endpoint.

Invariants:
    - Pages are 1-based
    - total_pages == ceil(total / limit); zero records means zero pages
"""

import math


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def build_pagination(page: int, limit: int, total: int, noun: str) -> dict:
    """Pagination block in the wire shape the frontend expects.

    noun is the capitalized plural, e.g. "Projects" -> totalProjects.
    """
    return {
        "currentPage": page,
        "totalPages": total_pages(total, limit),
        f"total{noun}": total,
    }
