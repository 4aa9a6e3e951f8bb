"""Contact Submission Flow: gate, persist, notify.

Invariants:
    - Nothing is written and no email is sent unless evaluate_submission returns None
    - The row is committed before the email is attempted
    - A mail failure leaves the row with notified=False and surfaces as ContactDeliveryError
    - A failure to flip notified after a successful send is logged, not raised
      (the email already left; a 500 would invite a duplicate)

Design Decisions:
    - Handler object built per request with injected limiter and sender, so tests
      drive it without HTTP
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.core.contact_gate import (
    DEFAULT_LIMITS, ContactForm, GateLimits, evaluate_submission, form_duration_ms,
)
from portfolio_api.core.domain_types import EpochMillis
from portfolio_api.core.errors import (
    ContactDeliveryError, ContactRejectedError, ErrorContext, MailDeliveryError,
)
from portfolio_api.core.format_notification import build_notification
from portfolio_api.core.repository_protocols import NotificationSender, RateLimiter
from portfolio_api.models.contact_submission import ContactSubmission

logger = logging.getLogger(__name__)

MAX_USER_AGENT_LENGTH = 500


class ContactSubmissionHandler:
    """Runs one contact-form submission end to end."""

    def __init__(
        self,
        db: AsyncSession,
        limiter: RateLimiter,
        sender: NotificationSender,
        limits: GateLimits = DEFAULT_LIMITS,
    ):
        self.db = db
        self.limiter = limiter
        self.sender = sender
        self.limits = limits

    async def submit(
        self,
        form: ContactForm,
        client_key: str,
        user_agent: str | None,
        now_ms: EpochMillis,
    ) -> ContactSubmission:
        rejection = evaluate_submission(
            form, client_key, now_ms, self.limiter, self.limits,
        )
        if rejection:
            logger.info(
                f"Contact submission rejected: {rejection['error_code']}",
                extra={
                    "client_key": client_key,
                    "error_code": rejection["error_code"],
                    "pattern": rejection.get("pattern"),
                },
            )
            raise ContactRejectedError.from_rejection(rejection, client_key)

        submission = await self._persist(form, client_key, user_agent, now_ms)
        await self._notify(submission)
        return submission

    async def _persist(
        self,
        form: ContactForm,
        client_key: str,
        user_agent: str | None,
        now_ms: EpochMillis,
    ) -> ContactSubmission:
        submission = ContactSubmission(
            name=form.name.strip(),
            email="",
            subject=form.subject.strip(),
            message=form.message.strip(),
            ip_address=client_key,
            user_agent=(user_agent or "")[:MAX_USER_AGENT_LENGTH],
            submission_time=datetime.fromtimestamp(now_ms / 1000, tz=timezone.utc),
            form_duration_ms=form_duration_ms(form, now_ms),
        )
        try:
            self.db.add(submission)
            await self.db.commit()
            await self.db.refresh(submission)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to store contact submission: {e}",
                exc_info=True, extra={"client_key": client_key},
            )
            raise ContactDeliveryError(ErrorContext(client_key=client_key))
        logger.info(
            "Contact submission stored",
            extra={"contact_id": str(submission.id), "client_key": client_key},
        )
        return submission

    async def _notify(self, submission: ContactSubmission) -> None:
        email = build_notification(
            name=submission.name,
            subject=submission.subject,
            message=submission.message,
            form_duration_ms=submission.form_duration_ms,
            ip_address=submission.ip_address,
            user_agent=submission.user_agent,
            submitted_at=submission.submission_time,
        )
        contact_id = str(submission.id)
        try:
            await self.sender.send(email)
        except MailDeliveryError as e:
            logger.error(
                f"Notification email failed for stored submission: {e.message}",
                extra={"contact_id": contact_id, "error_code": e.code},
            )
            raise ContactDeliveryError(ErrorContext(resource_id=contact_id))

        submission.notified = True
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Email sent but notified flag not saved: {e}",
                extra={"contact_id": contact_id},
            )
