from __future__ import annotations

import pytest
from pydantic import ValidationError

from stripe_terminal.terminal.models import (
    Reader,
    ReaderActionStatus,
    ReaderActionType,
    ReaderStatus,
)
from stripe_terminal.terminal.params import (
    PresentPaymentMethodParams,
    ReaderCreateParams,
    ReaderListParams,
    ReaderUpdateParams,
    RefundPaymentParams,
    SetReaderDisplayParams,
)


def _reader_payload() -> dict:
    return {
        "id": "tmr_FDOt2wlRZEdpd7",
        "object": "terminal.reader",
        "action": {
            "type": "process_payment_intent",
            "status": "in_progress",
            "failure_code": None,
            "failure_message": None,
            "process_payment_intent": {"payment_intent": "pi_123"},
        },
        "device_sw_version": "2.6.2",
        "device_type": "simulated_wisepos_e",
        "ip_address": "0.0.0.0",
        "label": "Blue Rabbit",
        "last_seen_at": 1681320543815,
        "livemode": False,
        "location": "tml_FDOtHwxAAdIJOh",
        "metadata": {"lane": "3"},
        "serial_number": "259cd19c-b902-4730-96a1-09183be6e7f7",
        "status": "online",
        "some_future_field": {"x": 1},
    }


def test_reader_parses_full_payload_and_keeps_unknown_fields() -> None:
    r = Reader.model_validate(_reader_payload())
    assert r.id == "tmr_FDOt2wlRZEdpd7"
    assert r.status is ReaderStatus.ONLINE
    assert r.location_id == "tml_FDOtHwxAAdIJOh"
    assert r.metadata == {"lane": "3"}
    assert r.action is not None
    assert r.action.type is ReaderActionType.PROCESS_PAYMENT_INTENT
    assert r.action.status is ReaderActionStatus.IN_PROGRESS
    assert r.action.is_finished is False
    assert r.action.process_payment_intent is not None
    assert r.action.process_payment_intent.payment_intent == "pi_123"
    assert r.model_dump()["some_future_field"] == {"x": 1}


def test_reader_expanded_location() -> None:
    payload = _reader_payload()
    payload["location"] = {"id": "tml_1", "object": "terminal.location", "display_name": "HQ"}
    assert Reader.model_validate(payload).location_id == "tml_1"


def test_reader_failed_action() -> None:
    payload = _reader_payload()
    payload["action"] = {
        "type": "refund_payment",
        "status": "failed",
        "failure_code": "card_declined",
        "failure_message": "The card was declined.",
        "refund_payment": {"amount": 500, "charge": "ch_1"},
    }
    action = Reader.model_validate(payload).action
    assert action is not None and action.is_finished
    assert action.failure_code == "card_declined"
    assert action.refund_payment is not None and action.refund_payment.amount == 500


def test_create_params_require_registration_code() -> None:
    with pytest.raises(ValidationError):
        ReaderCreateParams()  # type: ignore[call-arg]
    p = ReaderCreateParams(registration_code="simulated-wpe", label="Front")
    assert p.to_params() == {"registration_code": "simulated-wpe", "label": "Front"}


def test_update_params_keep_empty_metadata() -> None:
    assert ReaderUpdateParams(metadata={}).to_params() == {"metadata": {}}


def test_list_params_validate_limit_and_cursor_exclusivity() -> None:
    with pytest.raises(ValidationError):
        ReaderListParams(limit=0)
    with pytest.raises(ValidationError):
        ReaderListParams(limit=101)
    with pytest.raises(ValidationError):
        ReaderListParams(starting_after="tmr_1", ending_before="tmr_2")


def test_list_params_cast_reader_cursor_to_id() -> None:
    p = ReaderListParams(status="online", limit=5, starting_after=Reader(id="tmr_7"))
    assert p.to_params() == {"status": "online", "limit": 5, "starting_after": "tmr_7"}


def test_refund_params_need_exactly_one_target() -> None:
    with pytest.raises(ValidationError):
        RefundPaymentParams(amount=100)
    with pytest.raises(ValidationError):
        RefundPaymentParams(charge="ch_1", payment_intent="pi_1")
    p = RefundPaymentParams(payment_intent="pi_1", amount=100, reverse_transfer=True)
    assert p.to_params() == {"payment_intent": "pi_1", "amount": 100, "reverse_transfer": True}


def test_present_payment_method_params() -> None:
    p = PresentPaymentMethodParams(type="card_present", card_present={"number": "4242424242424242"})
    assert p.to_params() == {"type": "card_present", "card_present": {"number": "4242424242424242"}}
    with pytest.raises(ValidationError):
        PresentPaymentMethodParams(type="wire_transfer")  # type: ignore[arg-type]


def test_set_reader_display_params() -> None:
    p = SetReaderDisplayParams(
        cart={"currency": "usd", "line_items": [{"amount": 500, "description": "Coffee", "quantity": 1}], "total": 500}
    )
    assert p.to_params() == {
        "type": "cart",
        "cart": {
            "currency": "usd",
            "line_items": [{"amount": 500, "description": "Coffee", "quantity": 1}],
            "total": 500,
        },
    }


def test_known_action_values_still_parse_as_enums() -> None:
    r = Reader.model_validate(_reader_payload())
    assert isinstance(r.status, ReaderStatus)
    assert r.action is not None
    assert isinstance(r.action.type, ReaderActionType)
    assert isinstance(r.action.status, ReaderActionStatus)


def test_list_params_location_accepts_object() -> None:
    p = ReaderListParams(location=Reader(id="tml_1"))
    assert p.to_params() == {"location": "tml_1"}


def test_params_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        ReaderUpdateParams(lable="Front")  # type: ignore[call-arg]
    with pytest.raises(ValidationError):
        ReaderCreateParams(registration_code="simulated-wpe", locaton="tml_1")  # type: ignore[call-arg]
