"""Tests for the payment page transition function."""

import pytest
from payflow.errors import TransitionRejected
from payflow.machine import PROCESSING_MESSAGE, CheckoutFailed, Edit, Reset, ReturnReceived, Submit, transition
from payflow.models import CheckoutState, PaymentResult, ReturnParameters
from payflow.validator import INVALID_AMOUNT, INVALID_EMAIL


def filled(amount="10", payer_email="payer@example.com"):
    return transition(CheckoutState(), Edit(amount=amount, payer_email=payer_email))


def processing(token="t1"):
    return transition(filled(), Submit(token=token))


class TestEdit:
    def test_updates_only_given_fields(self):
        state = transition(filled(), Edit(amount="20"))
        assert state.amount == "20"
        assert state.payer_email == "payer@example.com"

    def test_keeps_result(self):
        state = transition(filled(amount="0"), Submit(token="t"))
        state = transition(state, Edit(amount="5"))
        assert state.result.message == INVALID_AMOUNT

    def test_refused_while_processing(self):
        with pytest.raises(TransitionRejected):
            transition(processing(), Edit(amount="99"))


class TestSubmit:
    def test_valid_input_enters_processing(self):
        state = processing("abc")
        assert state.status == "processing"
        assert state.result.message == PROCESSING_MESSAGE
        assert state.request_token == "abc"

    def test_invalid_amount(self):
        state = transition(filled(amount="-1"), Submit(token="t"))
        assert state.result == PaymentResult(status="error", message=INVALID_AMOUNT)
        assert state.request_token is None

    def test_invalid_email(self):
        state = transition(filled(payer_email="payer"), Submit(token="t"))
        assert state.result == PaymentResult(status="error", message=INVALID_EMAIL)

    def test_refused_while_processing(self):
        with pytest.raises(TransitionRejected) as exc:
            transition(processing("first"), Submit(token="second"))
        assert exc.value.status == "processing"

    def test_resubmit_after_error(self):
        state = transition(filled(amount="0"), Submit(token="t1"))
        state = transition(state, Edit(amount="15"))
        state = transition(state, Submit(token="t2"))
        assert state.status == "processing"


class TestCheckoutFailed:
    def test_matching_token_ends_in_error(self):
        state = transition(processing("t1"), CheckoutFailed(token="t1", message="Erro HTTP: 500"))
        assert state.result == PaymentResult(status="error", message="❌ Erro HTTP: 500")
        assert state.request_token is None
        assert state.amount == "10"

    def test_stale_token_ignored(self):
        before = processing("t2")
        assert transition(before, CheckoutFailed(token="t1", message="late")) == before

    def test_ignored_when_not_processing(self):
        before = filled()
        assert transition(before, CheckoutFailed(token="t1", message="late")) == before


class TestReturnAndReset:
    def test_return_sets_terminal_result(self):
        params = ReturnParameters(status="approved", payment_id="123")
        state = transition(CheckoutState(), ReturnReceived(params=params))
        assert state.status == "success"
        assert state.result.payment_id == "123"
        assert state.result.status_detail == "approved"

    def test_return_refused_while_processing(self):
        params = ReturnParameters(status="approved", payment_id="123")
        with pytest.raises(TransitionRejected):
            transition(processing(), ReturnReceived(params=params))

    @pytest.mark.parametrize("status", ["approved", "pending", "rejected"])
    def test_reset_from_terminal(self, status):
        params = ReturnParameters(status=status, payment_id="1")
        state = transition(filled(), ReturnReceived(params=params))
        assert transition(state, Reset()) == CheckoutState()

    def test_reset_refused_while_processing(self):
        with pytest.raises(TransitionRejected):
            transition(processing(), Reset())

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            transition(CheckoutState(), object())
