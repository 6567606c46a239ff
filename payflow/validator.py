import math
import re
from typing import Tuple
from .errors import InputValidationError

INVALID_AMOUNT = "Informe um valor válido para pagamento."
INVALID_EMAIL = "Informe um email válido."

# plain decimal, optional exponent; no "_" separators, "nan" or "inf"
AMOUNT_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


def validate_input(amount: str, payer_email: str) -> Tuple[float, str]:
    """
    Check the form fields and return the parsed amount with the email.

    The email check is only the presence of an "@"; anything stricter is
    left to the provider.
    """
    if not isinstance(amount, str) or not AMOUNT_RE.match(amount):
        raise InputValidationError(INVALID_AMOUNT)
    value = float(amount)
    if not math.isfinite(value) or value <= 0:
        raise InputValidationError(INVALID_AMOUNT)

    if not payer_email or "@" not in payer_email:
        raise InputValidationError(INVALID_EMAIL)

    return value, payer_email
