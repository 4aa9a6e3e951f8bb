"""Contact Schemas: contact-form submission and admin triage bodies.

Invariants:
    - ContactSubmitRequest is deliberately loose: every field optional, numbers may
      arrive as strings; the gate (core/contact_gate.py) owns all content rules so
      each failure gets its own message instead of a generic validation error
    - `website` is the honeypot field

Design Decisions:
    - to_form() is the only bridge from wire schema to core dataclass
"""

from datetime import datetime
from uuid import UUID

from portfolio_api.core.contact_gate import ContactForm, parse_captcha_answer
from portfolio_api.core.domain_types import ContactStatus
from portfolio_api.schemas.common import CamelModel, WriteModel


class ContactSubmitRequest(CamelModel):
    name: str | None = None
    subject: str | None = None
    message: str | None = None
    captcha_answer: int | float | str | None = None
    captcha_expected: int | float | str | None = None
    form_start_time: int | None = None
    website: str | None = None

    def to_form(self) -> ContactForm:
        return ContactForm(
            name=self.name,
            subject=self.subject,
            message=self.message,
            captcha_answer=self.captcha_answer,
            captcha_expected=parse_captcha_answer(self.captcha_expected),
            form_start_time=self.form_start_time,
            honeypot=self.website,
        )


class ContactAccepted(CamelModel):
    message: str
    id: UUID


class ContactStatusUpdate(WriteModel):
    status: ContactStatus


class ContactResponse(CamelModel):
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    ip_address: str
    user_agent: str
    submission_time: datetime
    form_duration_ms: int
    status: ContactStatus
    notified: bool
    created_at: datetime
    updated_at: datetime
