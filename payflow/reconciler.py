"""Turn the provider's return redirect into a final payment result.

Mercado Pago sends the payer back to the page with ``status`` and
``payment_id`` in the query string. The ``status`` value is trusted as
given: nothing here asks the provider whether the payment really happened.
"""

import logging
from typing import Optional, Tuple
from urllib.parse import parse_qs, urlsplit
from .models import PaymentResult, ReturnParameters
from .utils import strip_query

logger = logging.getLogger(__name__)

APPROVED_MESSAGE = "✅ Pagamento AUTORIZADO com sucesso!"
PENDING_MESSAGE = "⏳ Pagamento PENDENTE de aprovação."
REJECTED_MESSAGE = "❌ Pagamento NÃO AUTORIZADO."


def parse_return_parameters(url: str) -> Optional[ReturnParameters]:
    query = parse_qs(urlsplit(url).query)
    status = query.get("status", [""])[0]
    payment_id = query.get("payment_id", [""])[0]
    if not status or not payment_id:
        return None
    return ReturnParameters(status=status, payment_id=payment_id)


def result_for_return(params: ReturnParameters) -> PaymentResult:
    if params.status == "approved":
        status, message = "success", APPROVED_MESSAGE
    elif params.status == "pending":
        status, message = "pending", PENDING_MESSAGE
    else:
        status, message = "error", REJECTED_MESSAGE
    return PaymentResult(
        status=status,
        message=message,
        payment_id=params.payment_id,
        status_detail=params.status,
    )


def reconcile(url: str) -> Tuple[str, Optional[PaymentResult]]:
    """
    Returns (url to show, result). When the return parameters are present the
    url comes back without its query so that loading it again is a no-op.
    """
    params = parse_return_parameters(url)
    if params is None:
        return url, None
    logger.info(f"Return from checkout: payment {params.payment_id} status={params.status}")
    return strip_query(url), result_for_return(params)
