import logging
from fastapi import APIRouter, Cookie, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from typing import Optional
from ..config import settings
from ..errors import TransitionRejected
from ..models import CheckoutState
from ..reconciler import parse_return_parameters
from ..render import render_page
from ..services.mercadopago import get_gateway
from ..sessions import SESSION_COOKIE, store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

def page_url(request: Request) -> str:
    """Absolute URL of the payment page, as Mercado Pago should see it."""
    url = request.url_for("checkout_page")
    if settings.public_base_url:
        return settings.public_base_url.rstrip("/") + url.path
    return str(url)

def _back_to_page(request: Request, session_id: Optional[str] = None):
    response = RedirectResponse(request.url_for("checkout_page").path, status_code=303)
    if session_id:
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response

@router.get("/", response_class=HTMLResponse, name="checkout_page")
async def checkout_page(request: Request, page_session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE)):
    """Payment form and result panel; also where Mercado Pago sends the payer back.

    State handed over by a redirect is shown once; a reload starts from a
    fresh idle page.
    """
    url = str(request.url)
    if parse_return_parameters(url) is not None:
        session_id, session = store.create()
        # strip status/payment_id so a reload doesn't reconcile again
        shown_url = session.load(url)
        response = RedirectResponse(shown_url, status_code=303)
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    session = store.pop(page_session)
    state = session.state if session is not None else CheckoutState()
    html = render_page(
        state,
        pay_action=request.url_for("pay").path,
        reset_action=request.url_for("reset").path,
    )
    response = HTMLResponse(html)
    if page_session:
        response.delete_cookie(SESSION_COOKIE)
    return response

@router.post("/pay", name="pay")
async def pay(request: Request,
              amount: str = Form(default=""),
              payer_email: str = Form(default=""),
              page_session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
              gateway=Depends(get_gateway)):
    session = store.get(page_session)
    if session is None:
        session_id, session = store.create(gateway=gateway)
    else:
        session_id = page_session
        session.gateway = gateway

    try:
        session.edit(amount=amount, payer_email=payer_email)
        checkout_url = await session.submit(page_url(request))
    except TransitionRejected as e:
        # a submission for this page is still in flight; show it again
        logger.warning(f"POST /pay refused: {e}")
        return _back_to_page(request, session_id)

    if checkout_url:
        # full navigation to the provider, this page is gone
        store.discard(session_id)
        return RedirectResponse(checkout_url, status_code=303)
    # a reload may have dropped the page meanwhile; keep it for the redirect
    store.put(session_id, session)
    return _back_to_page(request, session_id)

@router.post("/reset", name="reset")
async def reset(request: Request, page_session: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE)):
    session = store.get(page_session)
    if session is not None:
        try:
            session.reset()
        except TransitionRejected as e:
            logger.warning(f"POST /reset refused: {e}")
            return _back_to_page(request, page_session)
        store.discard(page_session)
    response = _back_to_page(request)
    if page_session:
        response.delete_cookie(SESSION_COOKIE)
    return response
