"""Tests for gateway response interpretation."""

import pytest
from pydantic import ValidationError

from flutterwave_standard.integrations.policy.response_wrappers import (
    GENERIC_FAILURE_MESSAGE,
    MALFORMED_RESPONSE,
    STANDARD_INIT_ERROR,
    FlutterwaveInitError,
    interpret,
    parse_gateway_response,
)


def _interpret(raw):
    return interpret(parse_gateway_response(raw))


def test_success_returns_link_unchanged():
    raw = {"status": "success", "message": "ok", "data": {"link": "https://pay.example/abc"}}
    assert _interpret(raw) == "https://pay.example/abc"


def test_error_uses_message_and_code():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error", "message": "Invalid amount", "code": "INVALID_AMOUNT"})
    assert exc.value.message == "Invalid amount"
    assert exc.value.code == "INVALID_AMOUNT"


def test_error_id_used_when_code_missing():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error", "message": "Merchant not found", "error_id": "N/F:MNF"})
    assert exc.value.code == "N/F:MNF"
    assert exc.value.error_id == "N/F:MNF"


def test_code_preferred_over_error_id():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error", "message": "x", "code": "C1", "error_id": "E1"})
    assert exc.value.code == "C1"


def test_error_without_message_or_code_is_generic():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error"})
    assert exc.value.message == GENERIC_FAILURE_MESSAGE
    assert exc.value.code == STANDARD_INIT_ERROR


def test_missing_status_is_failure():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"message": "Hosted Link", "data": {"link": "https://pay.example/abc"}})
    assert exc.value.message == "Hosted Link"
    assert exc.value.code == STANDARD_INIT_ERROR


@pytest.mark.parametrize("data", [None, {}, {"link": ""}, {"link": None}])
def test_success_without_link_is_malformed(data):
    raw = {"status": "success", "message": "ok"}
    if data is not None:
        raw["data"] = data
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret(raw)
    assert exc.value.code == MALFORMED_RESPONSE
    assert exc.value.message == "ok"


def test_field_errors_are_kept_structured():
    raw = {
        "status": "error",
        "message": "Validation error",
        "errors": [
            {"field": "tx_ref", "message": "tx_ref is required"},
            {"field": "amount", "message": "amount must be a number"},
        ],
    }
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret(raw)
    err = exc.value
    assert err.message == "Validation error"
    assert [e.field for e in err.errors] == ["tx_ref", "amount"]
    assert err.field_errors == {"tx_ref": "tx_ref is required", "amount": "amount must be a number"}
    assert "tx_ref: tx_ref is required" in str(err)
    assert err.to_dict()["errors"][1] == {"field": "amount", "message": "amount must be a number"}


def test_str_is_message_without_field_errors():
    err = FlutterwaveInitError("Invalid amount", "INVALID_AMOUNT")
    assert str(err) == "Invalid amount"
    assert err.errors == ()


def test_unknown_keys_are_tolerated():
    raw = {"status": "success", "message": "ok", "data": {"link": "https://l"}, "meta": {"x": 1}}
    assert _interpret(raw) == "https://l"


@pytest.mark.parametrize("raw", [[1, 2], "oops", {"data": "not-an-object"}])
def test_parse_rejects_wrong_shape(raw):
    with pytest.raises(ValidationError):
        parse_gateway_response(raw)


def test_numeric_code_and_error_id_become_text():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error", "message": "Invalid amount", "code": 400, "error_id": 1042})
    assert exc.value.message == "Invalid amount"
    assert exc.value.code == "400"
    assert exc.value.error_id == "1042"


def test_numeric_error_id_used_when_code_missing():
    with pytest.raises(FlutterwaveInitError) as exc:
        _interpret({"status": "error", "message": "Merchant not found", "error_id": 1042})
    assert exc.value.message == "Merchant not found"
    assert exc.value.code == "1042"
