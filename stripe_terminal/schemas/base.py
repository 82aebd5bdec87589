"""Pydantic base schema shared by all wire models.

Stripe objects are snake_case on the wire and gain fields over time, so the
base keeps unknown fields instead of rejecting them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all Pydantic models in ``stripe_terminal``.

    - Keeps extra fields returned by newer API versions
    - Enables ``populate_by_name`` for fields that declare an alias
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )
