"""Configuration, parameter encoding and request dispatch shared by all resources."""

from .config import StripeSettings, configure_logging
from .encoding import encode_params
from .request import ApiRequestor, RequestOptions, cast_to_id, get_id, prefix_expansions

__all__ = [
    "ApiRequestor",
    "RequestOptions",
    "StripeSettings",
    "cast_to_id",
    "configure_logging",
    "encode_params",
    "get_id",
    "prefix_expansions",
]
