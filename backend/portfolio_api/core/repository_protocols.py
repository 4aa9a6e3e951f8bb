"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - RateLimiter is synchronous: the in-memory store does no IO, so the gate
      can call it from a pure function
"""

from typing import Protocol

from portfolio_api.core.domain_types import EpochMillis
from portfolio_api.core.format_notification import NotificationEmail


class RateLimiter(Protocol):
    """Per-key throttle consulted by the contact gate."""

    def acquire(self, key: str, now_ms: EpochMillis) -> tuple[bool, int]:
        """Return (allowed, retry_after_ms). Records now_ms when allowed."""
        ...


class NotificationSender(Protocol):
    """Outbound mail transport, implemented by infrastructure/mail_sender.py."""

    async def send(self, email: NotificationEmail) -> None: ...
