import logging
import uuid
from typing import Awaitable, Callable, Optional
from .builder import build_checkout_request
from .errors import GENERIC_FAILURE, CheckoutError, describe_failure
from .machine import CheckoutFailed, Edit, Event, Reset, ReturnReceived, Submit, transition
from .models import CheckoutState
from .reconciler import parse_return_parameters
from .schemas import CheckoutRequest
from .services.mercadopago import create_preference
from .utils import strip_query
from .validator import validate_input

logger = logging.getLogger(__name__)

Gateway = Callable[[CheckoutRequest], Awaitable[str]]
Navigate = Callable[[str], None]


class CheckoutSession:
    """
    One payment page for as long as it is open.

    UI layers call the methods below and render from ``state``; nothing
    else mutates it.
    """

    def __init__(self, gateway: Optional[Gateway] = None, navigate: Optional[Navigate] = None):
        self.gateway = gateway or create_preference
        self.navigate = navigate
        self.state = CheckoutState()

    def dispatch(self, event: Event) -> CheckoutState:
        before = self.state.status
        self.state = transition(self.state, event)
        logger.debug(f"{type(event).__name__}: {before} -> {self.state.status}")
        return self.state

    def edit(self, amount: Optional[str] = None, payer_email: Optional[str] = None) -> CheckoutState:
        return self.dispatch(Edit(amount=amount, payer_email=payer_email))

    def load(self, url: str) -> str:
        """Reconcile a return redirect, if any. Returns the url to keep showing."""
        params = parse_return_parameters(url)
        if params is None:
            return url
        self.dispatch(ReturnReceived(params=params))
        return strip_query(url)

    def reset(self) -> CheckoutState:
        return self.dispatch(Reset())

    async def submit(self, page_url: str) -> Optional[str]:
        """
        Run one checkout attempt. Returns the provider URL the page navigated
        to, or None when the attempt ended in an error state.
        """
        token = uuid.uuid4().hex
        self.dispatch(Submit(token=token))
        if self.state.status != "processing":
            return None

        try:
            amount, payer_email = validate_input(self.state.amount, self.state.payer_email)
            request = build_checkout_request(amount, payer_email, page_url)
            checkout_url = await self.gateway(request)
        except CheckoutError as e:
            logger.error(f"Checkout failed ({type(e).__name__}): {describe_failure(e)}")
            self.dispatch(CheckoutFailed(token=token, message=describe_failure(e)))
            return None
        except Exception as e:
            logger.exception("Unexpected error creating checkout preference")
            self.dispatch(CheckoutFailed(token=token, message=describe_failure(e)))
            return None
        except BaseException:
            # cancelled mid-call; leave processing before propagating
            logger.warning("Checkout preference call cancelled")
            self.dispatch(CheckoutFailed(token=token, message=GENERIC_FAILURE))
            raise

        logger.info(f"Redirecting payer to {checkout_url}")
        if self.navigate is not None:
            self.navigate(checkout_url)
        return checkout_url
