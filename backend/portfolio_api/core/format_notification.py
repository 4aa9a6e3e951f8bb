"""Notification Formatting: builds the owner-facing email for an accepted contact submission.

Invariants:
    - All user-supplied values are HTML-escaped before interpolation
    - Plain-text and HTML bodies carry the same fields
    - The email subject is a single line (header values cannot hold CR/LF)
"""

from dataclasses import dataclass
from datetime import datetime
from html import escape


@dataclass(frozen=True)
class NotificationEmail:
    subject: str
    text_body: str
    html_body: str


def single_line(text: str) -> str:
    return " ".join(text.splitlines())


def format_duration(form_duration_ms: int) -> str:
    return f"{round(form_duration_ms / 1000)}s"


def build_notification(
    *,
    name: str,
    subject: str,
    message: str,
    form_duration_ms: int,
    ip_address: str,
    user_agent: str | None,
    submitted_at: datetime,
) -> NotificationEmail:
    """Render the email sent to the site owner for one submission."""
    agent = user_agent or "Unknown"
    when = submitted_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    duration = format_duration(form_duration_ms)

    text_body = (
        "New contact form submission\n\n"
        f"Name: {name}\n"
        f"Subject: {subject}\n"
        f"Form Duration: {duration}\n\n"
        f"Message:\n{message}\n\n"
        "Security Information:\n"
        f"IP Address: {ip_address}\n"
        f"User Agent: {agent}\n"
        f"Submission Time: {when}\n\n"
        "Sent from your portfolio website with spam protection active\n"
    )

    message_html = escape(message).replace("\n", "<br>")
    html_body = f"""\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h2 style="color: #344e41;">New Contact Form Submission</h2>
  <table style="width: 100%; border-collapse: collapse;">
    <tr><td><strong>Name:</strong></td><td>{escape(name)}</td></tr>
    <tr><td><strong>Subject:</strong></td><td>{escape(subject)}</td></tr>
    <tr><td><strong>Form Duration:</strong></td><td>{duration}</td></tr>
  </table>
  <h3 style="color: #3a5a40;">Message:</h3>
  <div style="background-color: #f8f7f5; padding: 15px; border-left: 4px solid #588157;">
    <p style="margin: 0; line-height: 1.6;">{message_html}</p>
  </div>
  <div style="margin: 20px 0; font-size: 12px; color: #666;">
    <h4>Security Information:</h4>
    <p>IP Address: {escape(ip_address)}</p>
    <p>User Agent: {escape(agent)}</p>
    <p>Submission Time: {escape(when)}</p>
  </div>
  <p style="font-size: 12px; color: #666; text-align: center;">
    <em>Sent from your portfolio website with spam protection active</em>
  </p>
</div>
"""

    return NotificationEmail(
        subject=f"Portfolio Contact: {single_line(subject)}",
        text_body=text_body,
        html_body=html_body,
    )
