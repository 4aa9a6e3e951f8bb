"""ContactSubmissionHandler: the gate/persist/notify flow without HTTP."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from portfolio_api.core.contact_gate import ContactForm, GateLimits
from portfolio_api.core.errors import ContactDeliveryError, ContactRejectedError
from portfolio_api.infrastructure.rate_limit_store import InMemoryRateLimitStore
from portfolio_api.models.contact_submission import ContactSubmission
from portfolio_api.services.contact_submission import ContactSubmissionHandler
from tests.services.fake_mail import FakeMailSender

NOW = 1_700_000_000_000


def _form(**overrides) -> ContactForm:
    fields = dict(
        name="Ada", subject="Hello", message="Lovely work on the site",
        captcha_answer="5", captcha_expected=5,
        form_start_time=NOW - 6_000, honeypot="",
    )
    fields.update(overrides)
    return ContactForm(**fields)


@pytest.fixture
def handler(test_db):
    return ContactSubmissionHandler(
        test_db, InMemoryRateLimitStore(), FakeMailSender(), GateLimits(),
    )


async def test_accepted_submission_is_stored_and_notified(handler, test_db):
    submission = await handler.submit(_form(), "10.0.0.1", "UA/1.0", NOW)
    assert submission.notified is True
    assert submission.form_duration_ms == 6_000
    assert submission.ip_address == "10.0.0.1"
    assert submission.submission_time.timestamp() * 1000 == NOW
    assert len(handler.sender.sent) == 1
    assert "IP Address: 10.0.0.1" in handler.sender.sent[0].text_body


async def test_long_user_agent_is_truncated(handler):
    submission = await handler.submit(_form(), "k", "x" * 800, NOW)
    assert len(submission.user_agent) == 500


async def test_rejection_raises_with_reason(handler, test_db):
    with pytest.raises(ContactRejectedError) as exc_info:
        await handler.submit(_form(captcha_answer="6"), "k", None, NOW)
    assert exc_info.value.reason == "INVALID_CAPTCHA"
    rows = (await test_db.execute(select(ContactSubmission))).scalars().all()
    assert rows == []


async def test_rate_limit_rejection_carries_retry_after(handler):
    await handler.submit(_form(), "k", None, NOW)
    with pytest.raises(ContactRejectedError) as exc_info:
        await handler.submit(_form(), "k", None, NOW + 5_000)
    assert exc_info.value.http_status == 429
    assert exc_info.value.context.retry_after_ms == 25_000


async def test_mail_failure_after_persist(handler, test_db):
    handler.sender.fail = True
    with pytest.raises(ContactDeliveryError):
        await handler.submit(_form(), "k", None, NOW)
    row = (await test_db.execute(select(ContactSubmission))).scalar_one()
    assert row.notified is False


async def test_store_failure_sends_nothing(handler, monkeypatch):
    async def broken_commit():
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(handler.db, "commit", broken_commit)
    with pytest.raises(ContactDeliveryError):
        await handler.submit(_form(), "k", None, NOW)
    assert handler.sender.sent == []
