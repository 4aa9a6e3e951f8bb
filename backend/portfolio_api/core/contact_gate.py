"""Contact Gate: ordered anti-abuse checks for contact-form submissions.

Invariants:
    - Checks return an error dict on violation, None on success
    - evaluate_submission chains all checks in fixed order; first error wins
    - Only check_rate_limit touches state, and only through the RateLimiter protocol
    - A key is recorded by the limiter as soon as it passes the rate-limit step,
      so later content failures still consume the window
    - Missing formStartTime skips the fill-time check (duration recorded as 0)

Design Decisions:
    - Structural checks run before regex scans: cheapest and most decisive first
    - Return dicts (not exceptions): same shape as the JSON the route sends back,
      the service raises ContactRejectedError from it
"""

import re
from dataclasses import dataclass

from portfolio_api.core.content_filters import find_suspicious_pattern
from portfolio_api.core.domain_types import EpochMillis, RejectionReason
from portfolio_api.core.repository_protocols import RateLimiter

_INTEGER = re.compile(r"[+-]?\d+")

REJECTION_MESSAGES = {
    RejectionReason.MISSING_FIELDS: "Name, subject, and message are required",
    RejectionReason.INVALID_CAPTCHA: "Invalid security check answer",
    RejectionReason.SPAM_DETECTED: "Spam detected",
    RejectionReason.RATE_LIMITED: "Please wait before submitting again",
    RejectionReason.TOO_FAST: "Form submitted too quickly",
    RejectionReason.SUSPICIOUS_CONTENT: "Message contains suspicious content",
    RejectionReason.INPUT_TOO_LONG: "Input exceeds maximum length",
    RejectionReason.MESSAGE_TOO_SHORT: "Message is too short",
}


@dataclass(frozen=True)
class ContactForm:
    """Raw contact-form fields as the client sent them."""
    name: str | None = None
    subject: str | None = None
    message: str | None = None
    captcha_answer: str | int | float | None = None
    captcha_expected: int | None = None
    form_start_time: int | None = None
    honeypot: str | None = None


@dataclass(frozen=True)
class GateLimits:
    min_fill_ms: int = 3000
    max_name_length: int = 100
    max_subject_length: int = 200
    max_message_length: int = 2000
    min_message_words: int = 3


DEFAULT_LIMITS = GateLimits()


def _reject(reason: RejectionReason, http_status: int = 400, **extra) -> dict:
    return {
        "status": "error",
        "error_code": reason.value,
        "message": REJECTION_MESSAGES[reason],
        "http_status": http_status,
        **extra,
    }


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_captcha_answer(raw: str | int | float | None) -> int | None:
    """Integer value of the user's answer, or None when it is not a whole number."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    text = str(raw).strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def form_duration_ms(form: ContactForm, now_ms: EpochMillis) -> int:
    """Milliseconds between form render and submission; 0 when render time unknown."""
    if not form.form_start_time:
        return 0
    return now_ms - form.form_start_time


# ─── Individual checks ───────────────────────────────────────────

def check_required_fields(form: ContactForm) -> dict | None:
    if _blank(form.name) or _blank(form.subject) or _blank(form.message):
        return _reject(RejectionReason.MISSING_FIELDS)
    return None


def check_captcha(form: ContactForm) -> dict | None:
    answer = parse_captcha_answer(form.captcha_answer)
    if answer is None or form.captcha_expected is None:
        return _reject(RejectionReason.INVALID_CAPTCHA)
    if answer != form.captcha_expected:
        return _reject(RejectionReason.INVALID_CAPTCHA)
    return None


def check_honeypot(form: ContactForm) -> dict | None:
    if not _blank(form.honeypot):
        return _reject(RejectionReason.SPAM_DETECTED)
    return None


def check_rate_limit(
    limiter: RateLimiter, client_key: str, now_ms: EpochMillis,
) -> dict | None:
    allowed, retry_after_ms = limiter.acquire(client_key, now_ms)
    if not allowed:
        return _reject(
            RejectionReason.RATE_LIMITED, 429, retry_after_ms=retry_after_ms,
        )
    return None


def check_fill_time(
    form: ContactForm, now_ms: EpochMillis, min_fill_ms: int,
) -> dict | None:
    if form.form_start_time and now_ms - form.form_start_time < min_fill_ms:
        return _reject(RejectionReason.TOO_FAST)
    return None


def check_content(form: ContactForm) -> dict | None:
    combined = f"{form.name} {form.subject} {form.message}"
    matched = find_suspicious_pattern(combined)
    if matched:
        return _reject(RejectionReason.SUSPICIOUS_CONTENT, pattern=matched)
    return None


def check_lengths(form: ContactForm, limits: GateLimits) -> dict | None:
    if (
        len(form.name) > limits.max_name_length
        or len(form.subject) > limits.max_subject_length
        or len(form.message) > limits.max_message_length
    ):
        return _reject(RejectionReason.INPUT_TOO_LONG)
    return None


def check_message_words(form: ContactForm, min_words: int) -> dict | None:
    if len(form.message.split()) < min_words:
        return _reject(RejectionReason.MESSAGE_TOO_SHORT)
    return None


def evaluate_submission(
    form: ContactForm,
    client_key: str,
    now_ms: EpochMillis,
    limiter: RateLimiter,
    limits: GateLimits = DEFAULT_LIMITS,
) -> dict | None:
    """Run the whole gate. Returns the first rejection or None when accepted."""
    return (
        check_required_fields(form)
        or check_captcha(form)
        or check_honeypot(form)
        or check_rate_limit(limiter, client_key, now_ms)
        or check_fill_time(form, now_ms, limits.min_fill_ms)
        or check_content(form)
        or check_lengths(form, limits)
        or check_message_words(form, limits.min_message_words)
    )
