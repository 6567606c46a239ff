"""Shared fixtures; environment is fixed before payflow reads its settings."""

import os

os.environ["MERCADOPAGO_ACCESS_TOKEN"] = "TEST-access-token"
for name in ("MERCADOPAGO_API_BASE", "PUBLIC_BASE_URL", "SERVICE_API_KEY", "PROVIDER_TIMEOUT"):
    os.environ.pop(name, None)

import pytest


class FakeGateway:
    """Records preference requests and answers with a fixed URL or error."""

    def __init__(self, checkout_url="https://www.mercadopago.com.br/checkout/v1/redirect?pref_id=123", error=None):
        self.checkout_url = checkout_url
        self.error = error
        self.requests = []

    async def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.checkout_url


@pytest.fixture
def gateway():
    return FakeGateway()
