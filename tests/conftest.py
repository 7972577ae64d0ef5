"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables before settings are loaded
os.environ.setdefault("PAGSEGURO_ENV", "production")
os.environ.setdefault("PAGSEGURO_EMAIL", "merchant@example.com")
os.environ.setdefault("PAGSEGURO_TOKEN", "TESTTOKEN")
os.environ.setdefault("PAGSEGURO_CURRENCY", "BRL")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from pagseguro_connect.gateway.entities import Item, Sender
from pagseguro_connect.gateway.payment import Payment
from pagseguro_connect.gateway.transport import GatewayResponse

SUCCESS_BODY = (
    '<?xml version="1.0" encoding="ISO-8859-1" standalone="yes"?>'
    "<checkout><code>ABC123</code><date>2011-02-05T15:14:50.000-03:00</date></checkout>"
)


class FakeTransport:
    """Records every post and answers with a fixed response."""

    def __init__(self, status_code: int = 200, body: str = SUCCESS_BODY):
        self.response = GatewayResponse(status_code, body)
        self.calls = []

    async def post(self, url, body, *, headers, params):
        self.calls.append({"url": url, "body": body, "headers": headers, "params": params})
        return self.response


@pytest.fixture
def fake_transport():
    def factory(status_code: int = 200, body: str = SUCCESS_BODY) -> FakeTransport:
        return FakeTransport(status_code, body)
    return factory


@pytest.fixture
def item():
    return Item(id="1", description="Ruby book", amount="10.50", quantity=1, weight=300)


@pytest.fixture
def payment(item):
    return Payment(
        "merchant@example.com",
        "TESTTOKEN",
        reference="REF-42",
        items=[item],
        sender=Sender(name="Maria Silva", email="maria@example.com"),
    )
