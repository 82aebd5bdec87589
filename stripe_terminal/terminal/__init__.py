"""Terminal resources: Reader models, request params and the readers namespace."""

from .models import (
    DeletedReader,
    Reader,
    ReaderAction,
    ReaderActionStatus,
    ReaderActionType,
    ReaderStatus,
)
from .params import (
    PresentPaymentMethodParams,
    ProcessPaymentIntentParams,
    ProcessSetupIntentParams,
    ReaderCreateParams,
    ReaderListParams,
    ReaderUpdateParams,
    RefundPaymentParams,
    SetReaderDisplayParams,
)

__all__ = [
    "DeletedReader",
    "PresentPaymentMethodParams",
    "ProcessPaymentIntentParams",
    "ProcessSetupIntentParams",
    "Reader",
    "ReaderAction",
    "ReaderActionStatus",
    "ReaderActionType",
    "ReaderCreateParams",
    "ReaderListParams",
    "ReaderStatus",
    "ReaderUpdateParams",
    "RefundPaymentParams",
    "SetReaderDisplayParams",
]
