"""Terminal Reader wire models

A Reader represents a physical device for accepting payment details. The
models mirror the JSON returned by ``/v1/terminal/readers`` and keep unknown
fields so newer API versions parse without changes.

Endpoint mapping
----------------
- ``POST /v1/terminal/readers`` → ``Reader``
- ``GET /v1/terminal/readers/{id}`` → ``Reader``
- ``DELETE /v1/terminal/readers/{id}`` → ``DeletedReader``
- ``GET /v1/terminal/readers`` → ``ListObject[Reader]``
- ``POST /v1/terminal/readers/{id}/<action>`` → ``Reader`` with ``action`` populated
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field

from ..schemas.base import BaseSchema
from ..schemas.list_object import DeletedObject


class ReaderStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class ReaderActionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ReaderActionType(str, Enum):
    PROCESS_PAYMENT_INTENT = "process_payment_intent"
    PROCESS_SETUP_INTENT = "process_setup_intent"
    REFUND_PAYMENT = "refund_payment"
    SET_READER_DISPLAY = "set_reader_display"


class ProcessPaymentIntentAction(BaseSchema):
    payment_intent: Optional[Union[str, Dict[str, Any]]] = None
    process_config: Optional[Dict[str, Any]] = None


class ProcessSetupIntentAction(BaseSchema):
    setup_intent: Optional[Union[str, Dict[str, Any]]] = None
    generated_card: Optional[str] = None


class RefundPaymentAction(BaseSchema):
    amount: Optional[int] = None
    charge: Optional[Union[str, Dict[str, Any]]] = None
    metadata: Optional[Dict[str, str]] = None
    payment_intent: Optional[Union[str, Dict[str, Any]]] = None
    reason: Optional[str] = None
    refund: Optional[Union[str, Dict[str, Any]]] = None
    refund_application_fee: Optional[bool] = None
    reverse_transfer: Optional[bool] = None


class CartLineItem(BaseSchema):
    amount: int
    description: str
    quantity: int


class Cart(BaseSchema):
    currency: str
    line_items: List[CartLineItem] = Field(default_factory=list)
    tax: Optional[int] = None
    total: int


class SetReaderDisplayAction(BaseSchema):
    type: Literal["cart"] = "cart"
    cart: Optional[Cart] = None


class ReaderAction(BaseSchema):
    """The action currently running (or last run) on a reader."""

    type: Union[ReaderActionType, str] = Field(
        ..., union_mode="left_to_right", description="Which action the reader is performing."
    )
    status: Union[ReaderActionStatus, str] = Field(
        ..., union_mode="left_to_right", description="Progress of the action."
    )
    failure_code: Optional[str] = Field(default=None, description="Failure code, only set when status is failed.")
    failure_message: Optional[str] = Field(default=None, description="Human-readable failure reason.")
    process_payment_intent: Optional[ProcessPaymentIntentAction] = None
    process_setup_intent: Optional[ProcessSetupIntentAction] = None
    refund_payment: Optional[RefundPaymentAction] = None
    set_reader_display: Optional[SetReaderDisplayAction] = None

    @property
    def is_finished(self) -> bool:
        return self.status != ReaderActionStatus.IN_PROGRESS


class Reader(BaseSchema):
    """A Terminal Reader as returned by the API."""

    id: str = Field(..., description="Reader identifier (``tmr_...``).", examples=["tmr_FDOt2wlRZEdpd7"])
    object: Literal["terminal.reader"] = "terminal.reader"
    action: Optional[ReaderAction] = Field(default=None, description="In-flight or last action on the reader.")
    device_sw_version: Optional[str] = Field(default=None, description="Software version of the reader.")
    device_type: Optional[str] = Field(
        default=None,
        description="Type of reader.",
        examples=["bbpos_wisepos_e", "stripe_m2", "simulated_wisepos_e"],
    )
    ip_address: Optional[str] = Field(default=None, description="Local IP address of the reader.")
    label: Optional[str] = Field(default=None, description="Customer-facing label.")
    last_seen_at: Optional[int] = Field(default=None, description="Unix timestamp of last contact.")
    livemode: bool = Field(default=False, description="True for live-mode objects.")
    location: Optional[Union[str, Dict[str, Any]]] = Field(
        default=None, description="Location id, or the expanded Location object."
    )
    metadata: Dict[str, str] = Field(default_factory=dict, description="Free-form key/value pairs.")
    serial_number: Optional[str] = Field(default=None, description="Hardware serial number.")
    status: Optional[Union[ReaderStatus, str]] = Field(
        default=None, union_mode="left_to_right", description="Networking status of the reader."
    )

    @property
    def location_id(self) -> Optional[str]:
        if isinstance(self.location, dict):
            return self.location.get("id")
        return self.location


class DeletedReader(DeletedObject):
    object: Literal["terminal.reader"] = "terminal.reader"
