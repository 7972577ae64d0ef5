import logging
from fastapi import APIRouter, HTTPException, status

from ..settings import settings
from ..gateway.errors import InvalidData, Unauthorized
from ..gateway.payment import Payment
from ..gateway.response import CheckoutSuccess
from ..gateway.transport import Transport
from ..schemas.checkout import CheckoutRequest, CheckoutResponse, FieldErrorOut

logger = logging.getLogger(__name__)

router = APIRouter()

# Replaced in tests; None means the default httpx transport
_TRANSPORT: Transport | None = None


def _build_payment(body: CheckoutRequest) -> Payment:
    return Payment(
        body.email or settings.PAGSEGURO_EMAIL,
        body.token or settings.PAGSEGURO_TOKEN,
        reference=body.reference,
        sender=body.sender,
        shipping=body.shipping,
        items=body.items,
        extra_amount=body.extra_amount,
        redirect_url=body.redirect_url,
        notification_url=body.notification_url,
        max_uses=body.max_uses,
        max_age=body.max_age,
        pre_approval=body.pre_approval,
        transport=_TRANSPORT,
    )


@router.post("/checkout", response_model=CheckoutResponse)
async def create_checkout(body: CheckoutRequest):
    payment = _build_payment(body)

    # The HTTP surface never submits a payment that fails validation
    errors = payment.validate()
    if errors:
        raise HTTPException(
            status_code=422,
            detail=[FieldErrorOut(field=e.field, message=e.message).model_dump() for e in errors],
        )

    result = await payment.checkout()
    if isinstance(result, CheckoutSuccess):
        return CheckoutResponse(
            code=result.code,
            date=result.date,
            payment_url=Payment.checkout_payment_url(result.code),
        )
    if isinstance(result, Unauthorized):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(result))
    if isinstance(result, InvalidData):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.detail)
    logger.error("Unexpected gateway answer for reference=%s: %s", payment.reference, result)
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Unexpected gateway response")
