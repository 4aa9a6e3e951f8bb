"""Error Hierarchy: response envelopes, statuses and Retry-After."""

from portfolio_api.core.errors import (
    AdminAuthError,
    ContactDeliveryError,
    ContactRejectedError,
    ErrorCategory,
    ErrorContext,
    ResourceNotFoundError,
)


def test_not_found_envelope():
    err = ResourceNotFoundError("Project", "abc")
    body = err.to_response()
    assert err.http_status == 404
    assert body["message"] == "Project not found"
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert err.context.resource_id == "abc"


def test_rejection_from_gate_dict():
    err = ContactRejectedError.from_rejection(
        {
            "error_code": "RATE_LIMITED",
            "message": "Please wait before submitting again",
            "http_status": 429,
            "retry_after_ms": 12_001,
        },
        client_key="10.0.0.1",
    )
    assert err.http_status == 429
    assert err.category == ErrorCategory.RATE_LIMIT
    assert err.response_headers() == {"Retry-After": "13"}
    assert err.context.client_key == "10.0.0.1"


def test_plain_rejection_has_no_retry_header():
    err = ContactRejectedError("SPAM_DETECTED", "Spam detected")
    assert err.http_status == 400
    assert err.category == ErrorCategory.ABUSE
    assert err.response_headers() == {}


def test_retry_after_never_below_one_second():
    err = ContactRejectedError(
        "RATE_LIMITED", "wait", 429, ErrorContext(retry_after_ms=5),
    )
    assert err.response_headers() == {"Retry-After": "1"}


def test_delivery_error_message_is_generic():
    err = ContactDeliveryError()
    assert err.http_status == 500
    assert err.to_response()["message"] == "Failed to send message. Please try again."


def test_admin_auth_error_is_401():
    assert AdminAuthError().http_status == 401
