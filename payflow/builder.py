import logging
import time
from typing import Optional
from urllib.parse import urlsplit
from .config import settings
from .errors import ConstructionError
from .schemas import BackUrls, CheckoutRequest, Payer, PreferenceItem
from .utils import is_local_host, strip_query

logger = logging.getLogger(__name__)

INVALID_RETURN_URL = "URL inválida para retorno do pagamento"


def build_checkout_request(amount: float,
                           payer_email: str,
                           page_url: str,
                           now: Optional[float] = None,
                           ) -> CheckoutRequest:
    """
    Build the preference body for one submission.

    All three back_urls point at the page itself. auto_return is left out
    for localhost callbacks since Mercado Pago refuses it with a
    non-public back_url.
    """
    callback_url = strip_query(page_url or "")
    if urlsplit(callback_url).scheme not in ("http", "https"):
        raise ConstructionError(INVALID_RETURN_URL)

    millis = int((time.time() if now is None else now) * 1000)

    request = CheckoutRequest(
        items=[
            PreferenceItem(
                id=settings.item_id,
                title=settings.item_title,
                description=settings.item_description,
                quantity=1,
                currency_id=settings.currency_id,
                unit_price=amount,
            )
        ],
        payer=Payer(email=payer_email),
        back_urls=BackUrls(success=callback_url, failure=callback_url, pending=callback_url),
        # time based, two submits in the same millisecond share it
        external_reference=f"ext_ref_{millis}",
    )
    if is_local_host(callback_url):
        logger.debug(f"Local callback {callback_url}, auto_return disabled")
    else:
        request.auto_return = "approved"
    return request
