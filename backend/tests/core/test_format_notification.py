"""Notification Formatting: owner email content and escaping."""

from datetime import datetime, timezone

from portfolio_api.core.format_notification import build_notification, format_duration


def _build(**overrides):
    fields = dict(
        name="Ada",
        subject="Hello there",
        message="line one\nline two",
        form_duration_ms=12_400,
        ip_address="203.0.113.9",
        user_agent="Mozilla/5.0",
        submitted_at=datetime(2026, 5, 1, 12, 30, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return build_notification(**fields)


def test_subject_is_prefixed():
    assert _build().subject == "Portfolio Contact: Hello there"


def test_text_body_carries_all_fields():
    body = _build().text_body
    assert "Name: Ada" in body
    assert "Form Duration: 12s" in body
    assert "IP Address: 203.0.113.9" in body
    assert "User Agent: Mozilla/5.0" in body
    assert "line one\nline two" in body


def test_html_body_converts_newlines():
    assert "line one<br>line two" in _build().html_body


def test_html_body_escapes_user_input():
    html = _build(name="<Ada & co>").html_body
    assert "&lt;Ada &amp; co&gt;" in html
    assert "<Ada & co>" not in html


def test_missing_user_agent_reads_unknown():
    assert "User Agent: Unknown" in _build(user_agent=None).text_body


def test_format_duration_rounds_to_seconds():
    assert format_duration(0) == "0s"
    assert format_duration(2_600) == "3s"


def test_subject_line_breaks_are_flattened():
    email = _build(subject="Hello\r\nthere\nfriend")
    assert email.subject == "Portfolio Contact: Hello there friend"
    assert "Subject: Hello\r\nthere\nfriend" in email.text_body
