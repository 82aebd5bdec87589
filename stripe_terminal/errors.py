"""Error types raised by the Stripe Terminal client.

Purpose:
- Provide typed exceptions thrown by `ApiRequestor` and the resource
  namespaces built on top of it.
- Expose HTTP-oriented context (status code, Stripe error code, request id,
  raw body) for diagnosis.

Usage:
- Catch `StripeError` for any failure and inspect `status_code`, `code` or
  `details`.
- Catch `ReaderNotFoundError` when a reader lookup by ID returns 404.
- Catch `ApiConnectionError` for transport failures (DNS, TLS, timeouts).
"""

from __future__ import annotations

from typing import Any, Optional


class StripeError(Exception):
    """Base error for Stripe API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        code: Stripe error code (e.g. ``resource_missing``).
        param: Request parameter the error relates to, if any.
        error_type: Stripe error type (e.g. ``invalid_request_error``).
        decline_code: Issuer decline code for card errors.
        doc_url: Link to Stripe documentation for the error code.
        request_id: Value of the ``Request-Id`` response header.
        details: Raw response body (parsed JSON or text).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        error_type: Optional[str] = None,
        decline_code: Optional[str] = None,
        doc_url: Optional[str] = None,
        request_id: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.param = param
        self.error_type = error_type
        self.decline_code = decline_code
        self.doc_url = doc_url
        self.request_id = request_id
        self.details = details

    def __str__(self) -> str:
        if self.request_id:
            return f"Request {self.request_id}: {self.message}"
        return self.message


class ApiError(StripeError):
    """Generic API failure (5xx, unexpected payloads, unmapped statuses)."""


class ApiConnectionError(StripeError):
    """Raised when the HTTP transport fails before a response is received."""


class AuthenticationError(StripeError):
    """Raised for HTTP 401 or when no API key is configured."""


class PermissionDeniedError(StripeError):
    """Raised for HTTP 403: the key lacks permission for the resource."""


class CardError(StripeError):
    """Raised for HTTP 402 / ``card_error`` responses."""


class IdempotencyError(StripeError):
    """Raised when an idempotency key is reused with different parameters."""


class RateLimitError(StripeError):
    """Raised for HTTP 429."""


class InvalidRequestError(StripeError):
    """Raised for HTTP 400/404 ``invalid_request_error`` responses."""


class ReaderNotFoundError(InvalidRequestError):
    """Raised when the requested Terminal Reader cannot be found (HTTP 404).

    Args:
        reader_id: The reader identifier that was not found.
    """

    def __init__(self, reader_id: str, **kwargs: Any) -> None:
        kwargs.setdefault("status_code", 404)
        super().__init__(f"Terminal reader not found: {reader_id}", **kwargs)
        self.reader_id = reader_id


class InvalidIdentifierError(StripeError, ValueError):
    """Raised when an object id cannot be extracted from an argument."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot extract an id from {type(value).__name__}: {value!r}")
        self.value = value
