"""Error taxonomy for Text-to-Dialogue requests.

Responsibilities:
- Define the closed set of failures a dialogue request can surface.
- Map failed HTTP responses to typed errors with a pure, total function.
- Carry stage-scoped diagnostics for CLI rendering.

Key types:
- `ElevenLabsTTDError`: base class for every library failure.
- `error_from_response`: status/body/headers to error dispatch.
"""

from __future__ import annotations

import json
from typing import Any, Mapping


class ElevenLabsTTDError(RuntimeError):
    """Base class for failures raised by the Text-to-Dialogue client."""

    failure_kind = "unknown"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialize error metadata shared by all failure kinds."""

        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RequestError(ElevenLabsTTDError):
    """Raised when no HTTP response was received (DNS, connect, timeout)."""

    failure_kind = "transport"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __str__(self) -> str:
        return f"Request failed: {self.message}"


class ApiError(ElevenLabsTTDError):
    """Raised for a non-success HTTP status without a dedicated error kind."""

    failure_kind = "http_error"

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, status_code=status_code)

    def __str__(self) -> str:
        return f"API error ({self.status_code}): {self.message}"

    def json(self) -> Any:
        """Decode the error body as JSON, raising `ParseError` when malformed."""

        try:
            return json.loads(self.message)
        except json.JSONDecodeError as exc:
            raise ParseError(exc) from exc


class ParseError(ElevenLabsTTDError):
    """Raised when a body expected to be structured data fails to decode."""

    failure_kind = "parse"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __str__(self) -> str:
        return f"Failed to parse response: {self.message}"


class AuthenticationError(ElevenLabsTTDError):
    """Raised when the API rejects the configured API key."""

    failure_kind = "invalid_api_key"

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message, status_code=401)

    def __str__(self) -> str:
        return f"Authentication failed: {self.message}"


class RateLimitError(ElevenLabsTTDError):
    """Raised when the API reports too many concurrent or recent requests.

    Attributes:
        retry_after: Suggested wait in seconds. The `Retry-After` header is not
            parsed, so this is `None` for errors produced by the client.
    """

    failure_kind = "rate_limited"

    def __init__(
        self,
        message: str = "Too many requests",
        *,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after

    def __str__(self) -> str:
        if self.retry_after is not None:
            return f"Rate limit exceeded (retry in {self.retry_after}s): {self.message}"
        return f"Rate limit exceeded: {self.message}"


class QuotaExceededError(ElevenLabsTTDError):
    """Raised when the account has insufficient credits for the request."""

    failure_kind = "insufficient_quota"

    def __init__(self, message: str = "Insufficient credits") -> None:
        super().__init__(message, status_code=402)

    def __str__(self) -> str:
        return f"Quota exceeded: {self.message}"


class ValidationError(ElevenLabsTTDError):
    """Reserved for caller-input validation failures."""

    failure_kind = "validation"

    def __str__(self) -> str:
        return f"Validation error: {self.message}"


def error_from_response(
    status_code: int,
    body: str,
    headers: Mapping[str, str] | None = None,
) -> ElevenLabsTTDError:
    """Map a failed HTTP response description to its error kind.

    Every status maps to an error; `ApiError` is the catch-all. `headers` is
    accepted for `Retry-After` handling but is not interpreted.
    """

    _ = headers
    if status_code == 401:
        return AuthenticationError()
    if status_code == 429:
        return RateLimitError(retry_after=None)
    if status_code == 402:
        return QuotaExceededError()
    return ApiError(status_code, body)


class CommandError(RuntimeError):
    """Raised when a CLI command fails at a specific stage."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
