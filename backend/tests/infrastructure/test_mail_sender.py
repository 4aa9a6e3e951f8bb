"""SMTP Mail Sender: message assembly and transport failure mapping."""

import smtplib

import pytest

from portfolio_api.core.errors import MailDeliveryError
from portfolio_api.core.format_notification import NotificationEmail
from portfolio_api.infrastructure.mail_sender import SmtpMailSender

EMAIL = NotificationEmail(
    subject="Portfolio Contact: Hi",
    text_body="plain body",
    html_body="<p>html body</p>",
)


class FakeSMTP:
    instances: list["FakeSMTP"] = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.logged_in = None
        self.sent = []
        self.tls = False
        self.closed = False
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.tls = True

    def close(self):
        self.closed = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg):
        self.sent.append(msg)


class BrokenSMTP(FakeSMTP):
    def login(self, user, password):
        raise smtplib.SMTPAuthenticationError(535, b"bad credentials")


class NoTlsSMTP(FakeSMTP):
    def starttls(self):
        raise smtplib.SMTPNotSupportedError("STARTTLS extension not supported")


@pytest.fixture(autouse=True)
def _reset_fake():
    FakeSMTP.instances.clear()


def _sender(**overrides) -> SmtpMailSender:
    fields = dict(
        host="smtp.example.com", port=465, username="owner@example.com",
        password="app-password", sender="", recipient="",
    )
    fields.update(overrides)
    return SmtpMailSender(**fields)


def test_sender_and_recipient_default_to_username():
    sender = _sender()
    assert sender.sender == "owner@example.com"
    assert sender.recipient == "owner@example.com"
    assert sender.configured


def test_missing_password_is_not_configured():
    assert not _sender(password="").configured


def test_build_message_has_text_and_html_parts():
    msg = _sender(recipient="inbox@example.com").build_message(EMAIL)
    assert msg["To"] == "inbox@example.com"
    assert msg["Subject"] == "Portfolio Contact: Hi"
    types = [part.get_content_type() for part in msg.iter_parts()]
    assert types == ["text/plain", "text/html"]


async def test_send_over_ssl(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTP)
    await _sender().send(EMAIL)
    server = FakeSMTP.instances[0]
    assert server.logged_in == ("owner@example.com", "app-password")
    assert len(server.sent) == 1
    assert not server.tls


async def test_send_with_starttls(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    await _sender(port=587, use_ssl=False).send(EMAIL)
    assert FakeSMTP.instances[0].tls


async def test_unconfigured_sender_raises():
    with pytest.raises(MailDeliveryError, match="not configured"):
        await _sender(username="", password="").send(EMAIL)


async def test_transport_failure_is_mapped(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP_SSL", BrokenSMTP)
    with pytest.raises(MailDeliveryError) as exc_info:
        await _sender().send(EMAIL)
    assert "SMTPAuthenticationError" in exc_info.value.message
    assert exc_info.value.http_status == 502


async def test_connection_error_is_mapped(monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr(smtplib, "SMTP_SSL", refuse)
    with pytest.raises(MailDeliveryError):
        await _sender().send(EMAIL)


async def test_failed_starttls_closes_connection(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP", NoTlsSMTP)
    with pytest.raises(MailDeliveryError, match="SMTPNotSupportedError"):
        await _sender(port=587, use_ssl=False).send(EMAIL)
    assert FakeSMTP.instances[0].closed


async def test_rejected_header_is_mapped(monkeypatch):
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTP)
    email = NotificationEmail(
        subject="Portfolio Contact: Hello\nBcc: victim@example.com",
        text_body="plain", html_body="<p>html</p>",
    )
    with pytest.raises(MailDeliveryError, match="ValueError"):
        await _sender().send(email)
    assert FakeSMTP.instances == []
