from typing import Optional


class CheckoutError(Exception):
    """Base for every failure of a checkout submission.

    ``message`` is the human readable reason shown to the payer.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InputValidationError(CheckoutError):
    """Amount or payer email rejected before any network activity."""


class ConstructionError(CheckoutError):
    """The callback URL can't be used to build a checkout request."""


class TransportError(CheckoutError):
    """Network failure while talking to the provider."""


class ProviderError(CheckoutError):
    """Non-success HTTP response from the provider."""

    def __init__(self, message: str, status_code: int, body: Optional[dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseShapeError(CheckoutError):
    """Success response without a checkout URL."""


class TransitionRejected(Exception):
    """Event not allowed in the current payment status."""

    def __init__(self, event: str, status: str):
        super().__init__(f"{event} not allowed while {status}")
        self.event = event
        self.status = status


GENERIC_FAILURE = "Erro ao criar preferência de pagamento."


def describe_failure(exc: BaseException) -> str:
    """Best available message for a failed submission.

    Prefers the exception's own message, then the message of the exception
    it was raised from, then a generic text.
    """
    message = getattr(exc, "message", None) or str(exc)
    if message:
        return message
    cause = exc.__cause__
    if cause is not None and str(cause):
        return str(cause)
    return GENERIC_FAILURE
