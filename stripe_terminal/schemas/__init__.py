"""Shared response shapes: base schema, list pages and deletion envelopes."""

from .base import BaseSchema
from .list_object import DeletedObject, ListObject

__all__ = [
    "BaseSchema",
    "DeletedObject",
    "ListObject",
]
