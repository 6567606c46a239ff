from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    env: str = "development"
    log_level: str = "INFO"

    mercadopago_access_token: str
    mercadopago_api_base: str = "https://api.mercadopago.com"
    provider_timeout: Optional[float] = None  # no timeout unless configured

    # the single line item sent with every preference
    currency_id: str = "BRL"
    item_id: str = "item_001"
    item_title: str = "Produto"
    item_description: str = "Pagamento de teste"

    public_base_url: Optional[str] = None  # e.g. https://pay.example.com, used for back_urls
    service_api_key: Optional[str] = None
    cors_origins: List[str] = ["*"]

    # page sessions only bridge one redirect; these bound the in-memory store
    page_session_ttl: float = 900.0
    page_session_limit: int = 10000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
