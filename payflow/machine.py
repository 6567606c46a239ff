"""
Payment page state machine.

    idle/terminal --Submit--> processing --CheckoutFailed--> error
    idle/terminal --Submit (bad input)--> error
    idle/terminal --ReturnReceived--> success | pending | error
    idle/terminal --Reset--> idle

A successful checkout has no event: the page navigates away to the
provider and its state is dropped. Nothing but a matching CheckoutFailed
leaves processing.
"""

import logging
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict
from .errors import InputValidationError, TransitionRejected
from .models import CheckoutState, PaymentResult, ReturnParameters
from .reconciler import result_for_return
from .validator import validate_input

logger = logging.getLogger(__name__)

PROCESSING_MESSAGE = "Criando preferência de pagamento..."


class Edit(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Optional[str] = None
    payer_email: Optional[str] = None


class Submit(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str


class CheckoutFailed(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    message: str


class ReturnReceived(BaseModel):
    model_config = ConfigDict(frozen=True)

    params: ReturnParameters


class Reset(BaseModel):
    model_config = ConfigDict(frozen=True)


Event = Union[Edit, Submit, CheckoutFailed, ReturnReceived, Reset]


def transition(state: CheckoutState, event: Event) -> CheckoutState:
    name = type(event).__name__

    if isinstance(event, CheckoutFailed):
        if state.status != "processing" or event.token != state.request_token:
            logger.debug(f"Ignoring stale CheckoutFailed for token {event.token}")
            return state
        return state.model_copy(update={
            "result": PaymentResult(status="error", message=f"❌ {event.message}"),
            "request_token": None,
        })

    if state.status == "processing":
        raise TransitionRejected(name, state.status)

    if isinstance(event, Edit):
        update = {}
        if event.amount is not None:
            update["amount"] = event.amount
        if event.payer_email is not None:
            update["payer_email"] = event.payer_email
        return state.model_copy(update=update)

    if isinstance(event, Submit):
        try:
            validate_input(state.amount, state.payer_email)
        except InputValidationError as e:
            return state.model_copy(update={
                "result": PaymentResult(status="error", message=e.message),
            })
        return state.model_copy(update={
            "result": PaymentResult(status="processing", message=PROCESSING_MESSAGE),
            "request_token": event.token,
        })

    if isinstance(event, ReturnReceived):
        return state.model_copy(update={"result": result_for_return(event.params)})

    if isinstance(event, Reset):
        return CheckoutState()

    raise TypeError(f"Unknown event {event!r}")
