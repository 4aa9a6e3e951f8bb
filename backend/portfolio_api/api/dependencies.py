"""Request Dependencies: app-owned collaborators and request-derived values for routes.

Invariants:
    - Rate-limit store and mail sender come from app.state (created by the lifespan);
      tests replace them through app.dependency_overrides
    - X-Forwarded-For is honoured only when settings.trust_forwarded_for is set,
      and then only the entry written by the outermost trusted proxy
"""

import hmac

from fastapi import Depends, Header, Request

from portfolio_api.config import Settings, get_settings
from portfolio_api.core.contact_gate import GateLimits
from portfolio_api.core.errors import AdminAuthError
from portfolio_api.core.repository_protocols import NotificationSender, RateLimiter


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limit_store


def get_notification_sender(request: Request) -> NotificationSender:
    return request.app.state.mail_sender


def get_gate_limits(settings: Settings = Depends(get_settings)) -> GateLimits:
    return GateLimits(min_fill_ms=settings.contact_min_fill_ms)


MAX_CLIENT_KEY_LENGTH = 64


def get_client_key(
    request: Request, settings: Settings = Depends(get_settings),
) -> str:
    """Client network address used as the rate-limit key.

    Each proxy appends the address it saw, so with N trusted proxies the
    client is the Nth entry from the right. Entries left of it are
    client-written and ignored.
    """
    key = request.client.host if request.client else "unknown"
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("X-Forwarded-For", "")
        hops = [h.strip() for h in forwarded.split(",") if h.strip()]
        if hops:
            key = hops[max(len(hops) - settings.forwarded_for_trusted_hops, 0)]
    return key[:MAX_CLIENT_KEY_LENGTH]


def require_admin(
    x_admin_key: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Guard for admin endpoints. Open when no ADMIN_API_KEY is configured."""
    if not settings.admin_api_key:
        return
    if not x_admin_key or not hmac.compare_digest(x_admin_key, settings.admin_api_key):
        raise AdminAuthError()
