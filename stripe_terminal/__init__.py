"""Stripe Terminal client.

Exposes a thin HTTP client for the Terminal Readers API and re-exports the
reader models, parameter DTOs and error types for convenience.
"""

from .client import StripeClient
from .core import RequestOptions, StripeSettings
from .errors import (
    ApiConnectionError,
    ApiError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidIdentifierError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    ReaderNotFoundError,
    StripeError,
)
from .schemas import DeletedObject, ListObject
from .terminal import DeletedReader, Reader, ReaderAction

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "AuthenticationError",
    "CardError",
    "DeletedObject",
    "DeletedReader",
    "IdempotencyError",
    "InvalidIdentifierError",
    "InvalidRequestError",
    "ListObject",
    "PermissionDeniedError",
    "RateLimitError",
    "Reader",
    "ReaderAction",
    "ReaderNotFoundError",
    "RequestOptions",
    "StripeClient",
    "StripeError",
]
