"""Shared request/dispatch layer

Overview
--------
Every resource namespace delegates to :class:`ApiRequestor`, which owns the
concerns that are identical across Stripe endpoints:

- URL construction (``{api_base}/v1/{path}``)
- Parameter encoding (query string for GET/DELETE, form body for POST)
- Authentication and account headers (``Authorization``, ``Stripe-Version``,
  ``Stripe-Account``, ``Idempotency-Key``)
- Error-response parsing into the typed exceptions of :mod:`stripe_terminal.errors`

Helpers used by resources to shape parameters before dispatch live here too:
:func:`get_id`, :func:`cast_to_id` and :func:`prefix_expansions`.

There is no retry policy and no caching: one call, one HTTP request.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..errors import (
    ApiConnectionError,
    ApiError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidIdentifierError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    StripeError,
)
from .config import DEFAULT_API_BASE
from .encoding import encode_params

USER_AGENT = "stripe-terminal-client/0.1.0"

_logger = logging.getLogger(__name__)


class RequestOptions(BaseModel):
    """Per-call overrides for a single request.

    Any field left as ``None`` falls back to the client default.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(default=None, description="Secret key overriding the client key.")
    stripe_account: Optional[str] = Field(default=None, description="Connected account to act on behalf of.")
    api_version: Optional[str] = Field(default=None, description="API version overriding the client version.")
    idempotency_key: Optional[str] = Field(default=None, description="Key making a POST safe to replay.")
    expand: Optional[List[str]] = Field(default=None, description="Response fields to expand.")


def get_id(obj: Any) -> str:
    """Return the id of ``obj``: a string id, a mapping with ``id`` or an object with ``.id``.

    Raises:
        InvalidIdentifierError: If no non-empty string id can be extracted.
    """
    if isinstance(obj, str):
        value: Any = obj
    elif isinstance(obj, Mapping):
        value = obj.get("id")
    else:
        value = getattr(obj, "id", None)
    if not isinstance(value, str) or not value:
        raise InvalidIdentifierError(obj)
    return value


def cast_to_id(params: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Return a copy of ``params`` with the values under ``keys`` replaced by their ids."""
    out = dict(params)
    for key in keys:
        if out.get(key) is not None:
            out[key] = get_id(out[key])
    return out


def prefix_expansions(expand: Optional[Iterable[str]]) -> Optional[List[str]]:
    """Prefix expansions with ``data.`` for list endpoints, whose objects live under ``data``."""
    if expand is None:
        return None
    return [e if e.startswith("data.") else f"data.{e}" for e in expand]


def _redact(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: ("<redacted>" if k.lower() == "authorization" else v) for k, v in headers.items()}


def _error_from_response(response: httpx.Response) -> StripeError:
    """Map a non-2xx response to the matching :class:`StripeError` subclass."""
    status = response.status_code
    request_id = response.headers.get("request-id")
    try:
        body: Any = response.json()
    except ValueError:
        body = response.text

    err: Dict[str, Any] = {}
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        err = body["error"]
    error_type = err.get("type")
    message = err.get("message") or f"Stripe API request failed: {status}"
    kwargs: Dict[str, Any] = {
        "status_code": status,
        "code": err.get("code"),
        "param": err.get("param"),
        "error_type": error_type,
        "decline_code": err.get("decline_code"),
        "doc_url": err.get("doc_url"),
        "request_id": request_id,
        "details": body,
    }

    if status == 401:
        return AuthenticationError(message, **kwargs)
    if status == 403:
        return PermissionDeniedError(message, **kwargs)
    if status == 402 or error_type == "card_error":
        return CardError(message, **kwargs)
    if status == 409:
        if error_type == "idempotency_error":
            return IdempotencyError(message, **kwargs)
        return ApiError(message, **kwargs)
    if status == 429:
        return RateLimitError(message, **kwargs)
    if status in (400, 404):
        if error_type == "idempotency_error":
            return IdempotencyError(message, **kwargs)
        return InvalidRequestError(message, **kwargs)
    return ApiError(message, **kwargs)


class ApiRequestor:
    """Dispatch authenticated requests to the Stripe REST API.

    Args:
        api_key: Default secret key. May be overridden per call.
        api_base: Base URL of the API (without the ``/v1`` prefix).
        api_version: Default ``Stripe-Version`` header value.
        stripe_account: Default ``Stripe-Account`` header value.
        timeout: Default HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.Client`` to use.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_base: str = DEFAULT_API_BASE,
        api_version: Optional[str] = None,
        stripe_account: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.api_version = api_version
        self.stripe_account = stripe_account
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def _headers(self, method: str, options: RequestOptions) -> Dict[str, str]:
        api_key = options.api_key or self.api_key
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Set STRIPE_API_KEY or pass api_key to the client."
            )
        headers: Dict[str, str] = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        api_version = options.api_version or self.api_version
        if api_version:
            headers["Stripe-Version"] = api_version
        stripe_account = options.stripe_account or self.stripe_account
        if stripe_account:
            headers["Stripe-Account"] = stripe_account
        if options.idempotency_key:
            headers["Idempotency-Key"] = options.idempotency_key
        if method == "POST":
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> Dict[str, Any]:
        """Send one request and return the decoded JSON object.

        API
        ---
        - URL: ``{api_base}/v1/{path}``
        - GET/DELETE: ``params`` are sent in the query string.
        - POST: ``params`` are sent as a form-encoded body.
        - ``options.expand`` is merged into the params as ``expand[]``.

        Raises:
            AuthenticationError: No API key available, or HTTP 401.
            ApiConnectionError: The transport failed.
            StripeError: Any other non-2xx response (see :func:`_error_from_response`).
        """
        method = method.upper()
        options = options or RequestOptions()
        headers = self._headers(method, options)

        merged: Dict[str, Any] = dict(params or {})
        if options.expand:
            merged["expand"] = list(merged.get("expand") or []) + list(options.expand)
        pairs = encode_params(merged)

        url = f"{self.api_base}/v1/{path.lstrip('/')}"
        _logger.debug("ApiRequestor.request: %s %s params=%s headers=%s", method, url, pairs, _redact(headers))
        try:
            if method == "POST":
                r = self._client.request(method, url, headers=headers, content=urlencode(pairs))
            else:
                r = self._client.request(method, url, headers=headers, params=pairs or None)
        except httpx.TransportError as e:
            raise ApiConnectionError(f"Could not connect to Stripe ({method} {url}): {e}") from e

        _logger.debug("ApiRequestor.request: %s %s -> %d", method, url, r.status_code)
        if not r.is_success:
            error = _error_from_response(r)
            _logger.warning(
                "ApiRequestor.request: %s %s failed status=%d type=%s code=%s request_id=%s",
                method,
                url,
                r.status_code,
                error.error_type,
                error.code,
                error.request_id,
            )
            raise error

        try:
            data = r.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON in response from {method} {url}",
                status_code=r.status_code,
                request_id=r.headers.get("request-id"),
                details=r.text,
            ) from e
        if not isinstance(data, dict):
            raise ApiError(
                f"Unexpected response shape from {method} {url}",
                status_code=r.status_code,
                request_id=r.headers.get("request-id"),
                details=data,
            )
        return data
