from pydantic import BaseModel, Field
from typing import List, Literal, Optional

# Mercado Pago preference body

class PreferenceItem(BaseModel):
    id: str
    title: str
    description: str
    quantity: int = 1
    currency_id: str
    unit_price: float

class Payer(BaseModel):
    email: str

class BackUrls(BaseModel):
    success: str
    failure: str
    pending: str

class CheckoutRequest(BaseModel):
    items: List[PreferenceItem]
    payer: Payer
    back_urls: BackUrls
    external_reference: str
    auto_return: Optional[Literal["approved"]] = None  # omitted for local callback hosts

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)

# internal endpoint

class CreateCheckoutIn(BaseModel):
    amount: str = Field(..., description="Amount as typed by the payer e.g. '10.50'")
    payer_email: str
    return_url: str = Field(..., description="Page the provider redirects back to")

class CreateCheckoutOut(BaseModel):
    checkout_url: str
