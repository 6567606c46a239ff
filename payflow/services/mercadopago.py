import logging
import httpx
from typing import Optional
from ..config import settings
from ..errors import ProviderError, ResponseShapeError, TransportError
from ..schemas import CheckoutRequest

logger = logging.getLogger(__name__)

MP_BASE = settings.mercadopago_api_base
ACCESS_TOKEN = settings.mercadopago_access_token
HEADERS = {
    "Authorization": f"Bearer {ACCESS_TOKEN}",
    "Content-Type": "application/json",
}

MISSING_CHECKOUT_URL = "URL de checkout não encontrada na resposta"


def provider_error_message(status_code: int, body: Optional[dict]) -> str:
    """
    Compose "<message> - <cause>, <cause>" from a Mercado Pago error body.
    """
    body = body or {}
    message = body.get("message") or f"Erro HTTP: {status_code}"
    causes = body.get("cause")
    if isinstance(causes, list):
        details = ", ".join(
            str(c.get("description") or c.get("message"))
            for c in causes
            if isinstance(c, dict) and (c.get("description") or c.get("message"))
        )
        if details:
            message += f" - {details}"
    return message


async def create_preference(request: CheckoutRequest,
                            transport: Optional[httpx.AsyncBaseTransport] = None,
                            ) -> str:
    """
    Create a checkout preference and return the URL to send the payer to.
    """
    try:
        async with httpx.AsyncClient(timeout=settings.provider_timeout, transport=transport) as client:
            resp = await client.post(
                f"{MP_BASE}/checkout/preferences",
                json=request.to_payload(),
                headers=HEADERS.copy(),
            )
    except httpx.RequestError as e:
        logger.error(f"Mercado Pago unreachable: {e!r}")
        raise TransportError(str(e)) from e

    if resp.is_error:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = None
        logger.error(f"Mercado Pago API error {resp.status_code}: {body or resp.text}")
        raise ProviderError(provider_error_message(resp.status_code, body), resp.status_code, body)

    try:
        data = resp.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}

    # sandbox_init_point is what test credentials get
    checkout_url = data.get("init_point") or data.get("sandbox_init_point")
    if not checkout_url:
        logger.error(f"Mercado Pago response without checkout URL: {data}")
        raise ResponseShapeError(MISSING_CHECKOUT_URL)
    logger.info(f"Created preference {data.get('id')} -> {checkout_url}")
    return checkout_url


def get_gateway():
    """FastAPI dependency resolving the preference gateway."""
    return create_preference
