import logging
from fastapi import APIRouter, Depends, HTTPException
from ..builder import build_checkout_request
from ..errors import ConstructionError, InputValidationError, CheckoutError, describe_failure
from ..schemas import CreateCheckoutIn, CreateCheckoutOut
from ..services.mercadopago import get_gateway
from ..utils import require_service_api_key
from ..validator import validate_input

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/checkout", tags=["checkout"])

@router.post("/preferences", response_model=CreateCheckoutOut, dependencies=[Depends(require_service_api_key)])
async def create_checkout(payload: CreateCheckoutIn, gateway=Depends(get_gateway)):
    """Create a Mercado Pago preference and hand back the checkout URL.

    The provider credential never leaves this service; the browser only
    receives the URL to redirect to.
    """
    try:
        amount, payer_email = validate_input(payload.amount, payload.payer_email)
        request = build_checkout_request(amount, payer_email, payload.return_url)
    except (InputValidationError, ConstructionError) as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        checkout_url = await gateway(request)
    except CheckoutError as e:
        logger.error(f"Preference creation failed: {describe_failure(e)}")
        raise HTTPException(status_code=502, detail=describe_failure(e))

    return CreateCheckoutOut(checkout_url=checkout_url)
