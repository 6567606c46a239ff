import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from .routers import checkout, pages
from .config import settings
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.mercadopago_access_token.startswith("TEST-"):
        logger.info("Using Mercado Pago test credentials (sandbox checkout)")
    if not settings.public_base_url:
        logger.warning("PUBLIC_BASE_URL not set, back_urls follow the request host")
    yield

app = FastAPI(title="Mercado Pago Checkout", lifespan=lifespan)

# CORS - allow your app domain(s)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(checkout.router)
app.include_router(pages.router)

@app.get("/health")
def health():
    return {"ok": True}

if __name__ == "__main__":
    uvicorn.run("payflow.main:app", host=settings.app_host, port=settings.app_port, reload=(settings.env != "production"))
