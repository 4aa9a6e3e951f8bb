"""Error Hierarchy: typed, categorized exceptions for every Portfolio API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() always carries a top-level "message" (the frontend reads it)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PortfolioError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields travel with the exception
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    ABUSE = "abuse"
    RATE_LIMIT = "rate_limit"
    AUTH = "auth"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    client_key: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_ms: int | None = None


class PortfolioError(Exception):
    """Base exception for all Portfolio API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }

    def response_headers(self) -> dict[str, str]:
        if self.context.retry_after_ms is None:
            return {}
        # Retry-After is whole seconds, rounded up
        seconds = -(-self.context.retry_after_ms // 1000)
        return {"Retry-After": str(max(seconds, 1))}


# ─── Client Errors (400-level) ──────────────────────────────────

class ContactRejectedError(PortfolioError):
    """Contact gate refused a submission."""

    def __init__(
        self, reason: str, message: str, http_status: int = 400,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.RATE_LIMIT if http_status == 429 else ErrorCategory.ABUSE
        )
        super().__init__(
            message, reason, category, ErrorSeverity.WARNING, context, http_status,
        )
        self.reason = reason

    @classmethod
    def from_rejection(
        cls, rejection: dict, client_key: str | None = None,
    ) -> "ContactRejectedError":
        """Build from the dict returned by core.contact_gate.evaluate_submission."""
        ctx = ErrorContext(
            client_key=client_key,
            retry_after_ms=rejection.get("retry_after_ms"),
        )
        return cls(
            rejection["error_code"], rejection["message"],
            rejection["http_status"], ctx,
        )


class ResourceNotFoundError(PortfolioError):
    """Requested resource does not exist."""

    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class AdminAuthError(PortfolioError):
    """Admin-only endpoint called without a valid admin key."""

    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Admin credentials required",
            "ADMIN_AUTH_REQUIRED", ErrorCategory.AUTH,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PortfolioError):
    """Database operation failed."""

    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class MailDeliveryError(PortfolioError):
    """Notification email could not be handed to the SMTP server."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Mail delivery failed: {message}",
            "MAIL_DELIVERY_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )


class ContactDeliveryError(PortfolioError):
    """Accepted submission could not be stored or forwarded.

    User-facing message is generic; the cause stays in the logs.
    """

    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Failed to send message. Please try again.",
            "CONTACT_DELIVERY_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
