"""Tests for payment result invariants and failure descriptions."""

import pydantic
import pytest
from payflow.errors import GENERIC_FAILURE, CheckoutError, TransportError, describe_failure
from payflow.models import CheckoutState, PaymentResult


class TestPaymentResult:
    def test_initial_value(self):
        result = PaymentResult()
        assert result.status == "idle"
        assert result.message == ""
        assert result.payment_id is None
        assert result.status_detail is None
        assert not result.is_terminal

    @pytest.mark.parametrize("status", ["idle", "processing"])
    def test_round_trip_fields_rejected_before_terminal(self, status):
        with pytest.raises(pydantic.ValidationError):
            PaymentResult(status=status, payment_id="1")
        with pytest.raises(pydantic.ValidationError):
            PaymentResult(status=status, status_detail="approved")

    @pytest.mark.parametrize("status", ["success", "error", "pending"])
    def test_round_trip_fields_allowed_when_terminal(self, status):
        result = PaymentResult(status=status, message="x", payment_id="1", status_detail="approved")
        assert result.is_terminal

    def test_unknown_status_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PaymentResult(status="cancelled")

    def test_state_starts_empty(self):
        state = CheckoutState()
        assert (state.amount, state.payer_email, state.status) == ("", "", "idle")
        assert state.request_token is None


class TestDescribeFailure:
    def test_own_message(self):
        assert describe_failure(CheckoutError("provider down")) == "provider down"
        assert describe_failure(RuntimeError("boom")) == "boom"

    def test_falls_back_to_cause(self):
        try:
            try:
                raise ValueError("socket closed")
            except ValueError as e:
                raise TransportError("") from e
        except TransportError as exc:
            assert describe_failure(exc) == "socket closed"

    def test_generic(self):
        assert describe_failure(RuntimeError()) == GENERIC_FAILURE
