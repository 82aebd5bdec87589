"""Request parameter DTOs for the Terminal Readers endpoints.

Each DTO validates its fields locally and serializes with ``to_params()``,
which emits only the fields that were set. Resource methods also accept
plain dicts, so these models are optional sugar for callers who want
validation before the request leaves the process.

Examples:
    >>> ReaderListParams(device_type="bbpos_wisepos_e", limit=10).to_params()
    {'device_type': 'bbpos_wisepos_e', 'limit': 10}
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, model_validator

from ..core.request import get_id
from ..schemas.base import BaseSchema
from .models import Reader


class _Params(BaseSchema):
    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class ReaderCreateParams(_Params):
    """Parameters for ``POST /v1/terminal/readers``."""

    registration_code: str = Field(
        ...,
        min_length=1,
        description="Code shown on the reader screen when it is put in registration mode.",
        examples=["simulated-wpe"],
    )
    label: Optional[str] = Field(default=None, description="Custom label shown on the reader.")
    location: Optional[str] = Field(default=None, description="Location (``tml_...``) to assign the reader to.")
    metadata: Optional[Dict[str, str]] = None


class ReaderUpdateParams(_Params):
    """Parameters for ``POST /v1/terminal/readers/{id}``."""

    label: Optional[str] = None
    metadata: Optional[Dict[str, str]] = Field(
        default=None, description="Key/value pairs. An empty dict clears all metadata."
    )


class ReaderListParams(_Params):
    """Query parameters for ``GET /v1/terminal/readers``.

    ``location``, ``starting_after`` and ``ending_before`` accept either an id
    or an object carrying one, and are serialized to the id.
    """

    device_type: Optional[str] = None
    location: Optional[Union[str, Reader]] = None
    serial_number: Optional[str] = None
    status: Optional[Literal["online", "offline"]] = None
    limit: Optional[int] = Field(default=None, ge=1, le=100, description="Page size (1..100).")
    starting_after: Optional[Union[str, Reader]] = None
    ending_before: Optional[Union[str, Reader]] = None

    @model_validator(mode="after")
    def _one_cursor(self) -> "ReaderListParams":
        if self.starting_after is not None and self.ending_before is not None:
            raise ValueError("starting_after and ending_before are mutually exclusive")
        return self

    def to_params(self) -> Dict[str, Any]:
        params = self.model_dump(exclude_none=True, mode="json", exclude={"location", "starting_after", "ending_before"})
        if self.location is not None:
            params["location"] = get_id(self.location)
        if self.starting_after is not None:
            params["starting_after"] = get_id(self.starting_after)
        if self.ending_before is not None:
            params["ending_before"] = get_id(self.ending_before)
        return params


class ProcessPaymentIntentParams(_Params):
    """Parameters for ``POST /v1/terminal/readers/{id}/process_payment_intent``."""

    payment_intent: Optional[str] = Field(default=None, description="PaymentIntent (``pi_...``) to collect.")
    process_config: Optional[Dict[str, Any]] = Field(
        default=None, description="e.g. ``{'skip_tipping': True}``."
    )


class ProcessSetupIntentParams(_Params):
    """Parameters for ``POST /v1/terminal/readers/{id}/process_setup_intent``."""

    setup_intent: str = Field(..., min_length=1)
    customer_consent_collected: bool = False


class RefundPaymentParams(_Params):
    """Parameters for ``POST /v1/terminal/readers/{id}/refund_payment``.

    Exactly one of ``charge`` or ``payment_intent`` identifies what to refund.
    """

    amount: Optional[int] = Field(default=None, gt=0, description="Amount in the smallest currency unit.")
    charge: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    payment_intent: Optional[str] = None
    refund_application_fee: Optional[bool] = None
    reverse_transfer: Optional[bool] = None

    @model_validator(mode="after")
    def _one_target(self) -> "RefundPaymentParams":
        if (self.charge is None) == (self.payment_intent is None):
            raise ValueError("exactly one of charge or payment_intent is required")
        return self


class CartLineItemParams(_Params):
    amount: int
    description: str
    quantity: int = Field(..., ge=1)


class CartParams(_Params):
    currency: str = Field(..., min_length=3, max_length=3)
    line_items: List[CartLineItemParams] = Field(default_factory=list)
    tax: Optional[int] = None
    total: int


class SetReaderDisplayParams(_Params):
    """Parameters for ``POST /v1/terminal/readers/{id}/set_reader_display``."""

    type: Literal["cart"] = "cart"
    cart: CartParams


class PresentedCardParams(_Params):
    number: Optional[str] = None


class PresentPaymentMethodParams(_Params):
    """Parameters for ``POST /v1/test_helpers/terminal/readers/{id}/present_payment_method``.

    Only valid for simulated readers.
    """

    type: Optional[Literal["card_present", "interac_present"]] = None
    card_present: Optional[PresentedCardParams] = None
    interac_present: Optional[PresentedCardParams] = None
    amount_tip: Optional[int] = Field(default=None, ge=0)
