"""SMTP Mail Sender: delivers owner notifications for accepted contact submissions.

Invariants:
    - send() never blocks the event loop (smtplib runs in a worker thread)
    - Every transport failure surfaces as MailDeliveryError (core/errors.py)
    - Missing credentials or recipient fail at send time, not at construction

Design Decisions:
    - No retry: the submission is already stored with notified=False, admins see it
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from portfolio_api.config import Settings
from portfolio_api.core.errors import MailDeliveryError
from portfolio_api.core.format_notification import NotificationEmail

logger = logging.getLogger(__name__)


class SmtpMailSender:
    """Sends NotificationEmail objects through an SMTP relay (Gmail by default)."""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        recipient: str,
        use_ssl: bool = True,
        timeout_seconds: float = 30,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.recipient = recipient or username
        self.use_ssl = use_ssl
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpMailSender":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_user,
            password=settings.smtp_password,
            sender=settings.email_from,
            recipient=settings.email_to,
            use_ssl=settings.smtp_use_ssl,
            timeout_seconds=settings.smtp_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self.username and self.password and self.recipient)

    def build_message(self, email: NotificationEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = self.recipient
        msg["Subject"] = email.subject
        msg.set_content(email.text_body)
        msg.add_alternative(email.html_body, subtype="html")
        return msg

    def _open(self) -> smtplib.SMTP:
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout_seconds)
        server = smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds)
        try:
            server.starttls()
        except Exception:
            server.close()
            raise
        return server

    def _send_sync(self, msg: EmailMessage) -> None:
        with self._open() as server:
            server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, email: NotificationEmail) -> None:
        if not self.configured:
            logger.error("SMTP credentials not configured")
            raise MailDeliveryError("SMTP credentials not configured")
        # EmailMessage raises ValueError for header values it refuses
        try:
            msg = self.build_message(email)
            await asyncio.to_thread(self._send_sync, msg)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.error(f"SMTP send failed: {e}", exc_info=True)
            raise MailDeliveryError(type(e).__name__)
        logger.info(f"Notification email sent to {self.recipient}")
