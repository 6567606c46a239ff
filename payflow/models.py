from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, model_validator

PaymentStatus = Literal["idle", "processing", "success", "error", "pending"]

TERMINAL_STATUSES = frozenset({"success", "error", "pending"})


class PaymentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: PaymentStatus = "idle"
    message: str = ""
    payment_id: Optional[str] = None
    status_detail: Optional[str] = None  # provider's raw outcome token

    @model_validator(mode="after")
    def _round_trip_fields_only_when_terminal(self):
        if self.status not in TERMINAL_STATUSES and (self.payment_id or self.status_detail):
            raise ValueError(f"payment_id/status_detail not allowed while {self.status}")
        return self

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class ReturnParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    payment_id: str


class CheckoutState(BaseModel):
    """Everything a payment page holds: the form fields and the last result."""

    model_config = ConfigDict(frozen=True)

    amount: str = ""
    payer_email: str = ""
    result: PaymentResult = PaymentResult()
    request_token: Optional[str] = None  # set only while processing

    @property
    def status(self) -> str:
        return self.result.status
