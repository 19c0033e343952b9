"""Unit tests for the error taxonomy and status dispatch."""

from __future__ import annotations

import pytest
import requests

from elevenlabs_ttd.errors import (
    ApiError,
    AuthenticationError,
    ElevenLabsTTDError,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    ValidationError,
    error_from_response,
)


def test_401_maps_to_authentication_error_and_discards_body() -> None:
    """Auth failures should use the fixed message regardless of body."""

    error = error_from_response(401, '{"detail": "bad key sk_live_123"}')

    assert isinstance(error, AuthenticationError)
    assert error.message == "Invalid API key"
    assert "sk_live_123" not in str(error)
    assert error.status_code == 401


def test_429_maps_to_rate_limit_error_without_retry_after() -> None:
    """Rate limits should carry the fixed message; `Retry-After` is not parsed."""

    error = error_from_response(429, "slow down", {"Retry-After": "30"})

    assert isinstance(error, RateLimitError)
    assert error.message == "Too many requests"
    assert error.retry_after is None
    assert str(error) == "Rate limit exceeded: Too many requests"


def test_402_maps_to_quota_exceeded_error() -> None:
    error = error_from_response(402, "")

    assert isinstance(error, QuotaExceededError)
    assert error.message == "Insufficient credits"


@pytest.mark.parametrize("status_code", [400, 403, 404, 422, 500, 503])
def test_other_statuses_map_to_api_error_with_verbatim_body(status_code: int) -> None:
    """Any other status should fall through to `ApiError` with the raw body."""

    error = error_from_response(status_code, "server exploded")

    assert type(error) is ApiError
    assert error.status_code == status_code
    assert error.message == "server exploded"


def test_every_error_is_a_library_error() -> None:
    """Callers should be able to catch one base class."""

    for status_code in (401, 402, 429, 500):
        assert isinstance(error_from_response(status_code, ""), ElevenLabsTTDError)


@pytest.mark.parametrize(
    ("error", "keyword"),
    [
        (RequestError(requests.ConnectionError("dns failure")), "Request failed"),
        (ApiError(500, "boom"), "API error (500)"),
        (ParseError(ValueError("bad json")), "Failed to parse response"),
        (AuthenticationError(), "Authentication failed"),
        (RateLimitError(), "Rate limit exceeded"),
        (QuotaExceededError(), "Quota exceeded"),
        (ValidationError("Invalid voice ID"), "Validation error"),
    ],
)
def test_display_text_contains_discriminating_keyword(
    error: ElevenLabsTTDError, keyword: str
) -> None:
    assert keyword in str(error)


def test_validation_error_display_includes_message() -> None:
    display = str(ValidationError("Invalid voice ID"))

    assert "Validation error" in display
    assert "Invalid voice ID" in display


def test_rate_limit_display_includes_retry_after_when_known() -> None:
    error = RateLimitError(retry_after=12)

    assert str(error) == "Rate limit exceeded (retry in 12s): Too many requests"


def test_request_error_keeps_cause() -> None:
    cause = requests.Timeout("read timed out")

    error = RequestError(cause)

    assert error.cause is cause
    assert error.failure_kind == "transport"


def test_api_error_json_decodes_structured_body() -> None:
    error = ApiError(422, '{"detail": {"status": "invalid_voice"}}')

    assert error.json() == {"detail": {"status": "invalid_voice"}}


def test_api_error_json_raises_parse_error_for_plain_text() -> None:
    error = ApiError(500, "server exploded")

    with pytest.raises(ParseError, match="Failed to parse response"):
        error.json()
