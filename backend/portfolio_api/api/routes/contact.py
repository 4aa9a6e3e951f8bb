"""Contact Routes: public contact-form submission plus admin listing and triage.

Invariants:
    - POST delegates the whole flow to ContactSubmissionHandler
    - Gate rejections: 400 / 429 with the reason's own message
    - Store or mail failure: 500 with a generic message
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.api.dependencies import (
    get_client_key, get_gate_limits, get_notification_sender,
    get_rate_limiter, require_admin,
)
from portfolio_api.core.contact_gate import GateLimits
from portfolio_api.core.domain_types import ContactStatus
from portfolio_api.core.errors import ResourceNotFoundError
from portfolio_api.core.pagination import build_pagination
from portfolio_api.core.repository_protocols import NotificationSender, RateLimiter
from portfolio_api.infrastructure.database import get_db
from portfolio_api.infrastructure.rate_limit_store import epoch_ms
from portfolio_api.models.contact_submission import ContactSubmission
from portfolio_api.schemas.contact import (
    ContactAccepted, ContactResponse, ContactStatusUpdate, ContactSubmitRequest,
)
from portfolio_api.services.contact_submission import ContactSubmissionHandler
from portfolio_api.services.listing import fetch_page

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contact", tags=["contact"])

SUCCESS_MESSAGE = "Message sent successfully! I'll get back to you soon."


@router.post(
    "", response_model=ContactAccepted, status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    body: ContactSubmitRequest,
    user_agent: str | None = Header(None),
    client_key: str = Depends(get_client_key),
    limiter: RateLimiter = Depends(get_rate_limiter),
    sender: NotificationSender = Depends(get_notification_sender),
    limits: GateLimits = Depends(get_gate_limits),
    db: AsyncSession = Depends(get_db),
):
    """Run the anti-abuse gate, store the message and notify the site owner."""
    handler = ContactSubmissionHandler(db, limiter, sender, limits)
    submission = await handler.submit(
        body.to_form(), client_key, user_agent, epoch_ms(),
    )
    return ContactAccepted(message=SUCCESS_MESSAGE, id=submission.id)


@router.get("", dependencies=[Depends(require_admin)])
async def list_contacts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    status_filter: ContactStatus | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """List submissions, newest first."""
    query = select(ContactSubmission).order_by(
        ContactSubmission.created_at.desc(), ContactSubmission.id,
    )
    if status_filter:
        query = query.where(ContactSubmission.status == status_filter.value)
    contacts, total = await fetch_page(db, query, page, limit)
    return {
        "contacts": [
            ContactResponse.model_validate(c).model_dump(mode="json", by_alias=True)
            for c in contacts
        ],
        "pagination": build_pagination(page, limit, total, "Contacts"),
    }


@router.put(
    "/{contact_id}/status", response_model=ContactResponse,
    dependencies=[Depends(require_admin)],
)
async def update_contact_status(
    contact_id: UUID,
    body: ContactStatusUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Move a submission between new / read / replied."""
    contact = await db.get(ContactSubmission, contact_id)
    if not contact:
        raise ResourceNotFoundError("Contact", str(contact_id))
    contact.status = body.status
    await db.commit()
    await db.refresh(contact)
    logger.info(
        f"Contact status set to {contact.status}",
        extra={"contact_id": str(contact_id)},
    )
    return ContactResponse.model_validate(contact)
