"""Tests for the checkout round-trip on Payment"""
from datetime import datetime, timedelta, timezone

import pytest

from pagseguro_connect.gateway.entities import Sender
from pagseguro_connect.gateway.errors import InvalidData, Unauthorized, UnknownError
from pagseguro_connect.gateway.payment import Payment
from pagseguro_connect.gateway.response import CheckoutSuccess


def test_defaults():
    payment = Payment()

    assert isinstance(payment.sender, Sender)
    assert payment.items == []
    assert payment.response is None
    assert payment.shipping is None
    assert payment.extra_amount is None


def test_reference_is_an_alias_for_id():
    payment = Payment(id="A1")
    assert payment.reference == "A1"

    payment.reference = "B2"
    assert payment.id == "B2"

    assert Payment(reference="C3").id == "C3"


def test_extra_amount_reads_as_two_decimals():
    payment = Payment(extra_amount=3)
    assert payment.extra_amount == "3.00"

    payment.extra_amount = "1.005"
    assert payment.extra_amount == "1.01"
    assert payment.raw_extra_amount == "1.005"


def test_checkout_urls():
    assert Payment.checkout_url() == "https://ws.pagseguro.uol.com.br/v2/checkout"
    assert Payment.checkout_payment_url("ABC123") == (
        "https://pagseguro.uol.com.br/v2/checkout/payment.html?code=ABC123"
    )


@pytest.mark.asyncio
async def test_code_and_date(payment, fake_transport):
    transport = fake_transport()
    payment.transport = transport

    assert await payment.code() == "ABC123"
    assert await payment.date() == datetime(2011, 2, 5, 15, 14, 50, tzinfo=timezone(timedelta(hours=-3)))
    assert (await payment.date()).isoformat() == "2011-02-05T15:14:50-03:00"
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_request_sent_to_gateway(payment, fake_transport):
    transport = fake_transport()
    payment.transport = transport

    await payment.code()

    call = transport.calls[0]
    assert call["url"] == "https://ws.pagseguro.uol.com.br/v2/checkout"
    assert call["params"] == {"email": "merchant@example.com", "token": "TESTTOKEN"}
    assert call["headers"]["Content-Type"].startswith("application/xml")
    assert call["body"] == payment.checkout_xml()


@pytest.mark.asyncio
async def test_date_then_code_reuses_response(payment, fake_transport):
    transport = fake_transport()
    payment.transport = transport

    await payment.date()
    await payment.code()

    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_reset_forces_new_submission(payment, fake_transport):
    transport = fake_transport()
    payment.transport = transport

    await payment.code()
    payment.reset()
    assert payment.response is None
    await payment.code()

    assert len(transport.calls) == 2


def test_reset_keeps_validation_errors(fake_transport):
    payment = Payment(transport=fake_transport())
    payment.validate()

    payment.reset()

    assert payment.errors


@pytest.mark.asyncio
async def test_unauthorized(payment, fake_transport):
    payment.transport = fake_transport(401, "Unauthorized")

    with pytest.raises(Unauthorized):
        await payment.code()
    assert payment.response is None


@pytest.mark.asyncio
async def test_invalid_data(payment, fake_transport):
    payment.transport = fake_transport(400, "bad field X")

    with pytest.raises(InvalidData) as exc_info:
        await payment.code()

    assert exc_info.value.detail == "bad field X"
    assert payment.response is None


@pytest.mark.asyncio
async def test_unknown_error(payment, fake_transport):
    payment.transport = fake_transport(500, "boom")

    with pytest.raises(UnknownError) as exc_info:
        await payment.date()

    assert exc_info.value.response.status_code == 500
    assert payment.response is None


@pytest.mark.asyncio
async def test_failed_checkout_is_retried_on_next_access(payment, fake_transport):
    transport = fake_transport(500, "boom")
    payment.transport = transport

    with pytest.raises(UnknownError):
        await payment.code()
    with pytest.raises(UnknownError):
        await payment.code()

    assert len(transport.calls) == 2


@pytest.mark.asyncio
async def test_checkout_returns_result_without_raising(payment, fake_transport):
    payment.transport = fake_transport(400, "bad field X")
    result = await payment.checkout()
    assert isinstance(result, InvalidData)

    payment.transport = fake_transport()
    result = await payment.checkout()
    assert isinstance(result, CheckoutSuccess)
    assert result.code == "ABC123"
    assert payment.response is result.response


@pytest.mark.asyncio
async def test_invalid_payment_is_still_submitted(fake_transport):
    transport = fake_transport()
    payment = Payment(transport=transport)

    assert payment.is_valid() is False
    assert await payment.code() == "ABC123"
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_payment_url(payment, fake_transport):
    payment.transport = fake_transport()

    assert await payment.payment_url() == (
        "https://pagseguro.uol.com.br/v2/checkout/payment.html?code=ABC123"
    )
