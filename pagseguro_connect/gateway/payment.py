import logging
from datetime import datetime
from typing import Any, List, Optional, Sequence

from ..utils.digits import to_digit
from .checkout_xml import render
from .entities import Sender
from .response import CheckoutResult, CheckoutSuccess, classify_response, parse_code, parse_date
from .transport import GatewayResponse, HttpxTransport, Transport
from .urls import api_url, site_url
from .validation import FieldError, Validatable, validate_payment

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/xml; charset=UTF-8"


class Payment:
    """
    A checkout request for PagSeguro.

    The gateway response is fetched lazily by code()/date() and cached in
    ``response`` until reset(). Validation is separate from submission:
    call validate()/is_valid() before checking out if invalid payments must
    not reach the gateway.
    """

    def __init__(
        self,
        email: Optional[str] = None,
        token: Optional[str] = None,
        *,
        id: Optional[str] = None,
        reference: Optional[str] = None,
        sender: Optional[Validatable] = None,
        shipping: Optional[Validatable] = None,
        items: Optional[Sequence[Validatable]] = None,
        extra_amount: Any = None,
        redirect_url: Optional[str] = None,
        notification_url: Optional[str] = None,
        max_uses: Any = None,
        max_age: Any = None,
        pre_approval: Optional[Validatable] = None,
        transport: Optional[Transport] = None,
    ):
        self.email = email
        self.token = token
        self.id = id if id is not None else reference
        self.sender = sender if sender is not None else Sender()
        self.shipping = shipping
        self.items = list(items) if items is not None else []
        self.extra_amount = extra_amount
        self.redirect_url = redirect_url
        self.notification_url = notification_url
        self.max_uses = max_uses
        self.max_age = max_age
        self.pre_approval = pre_approval
        self.transport = transport
        self.response: Optional[GatewayResponse] = None
        self.errors: List[FieldError] = []

    # ---- accessors ----
    @property
    def reference(self) -> Optional[str]:
        return self.id

    @reference.setter
    def reference(self, value: Optional[str]) -> None:
        self.id = value

    @property
    def extra_amount(self) -> Optional[str]:
        return to_digit(self._extra_amount)

    @extra_amount.setter
    def extra_amount(self, value: Any) -> None:
        self._extra_amount = value

    @property
    def raw_extra_amount(self) -> Any:
        return self._extra_amount

    # ---- urls ----
    @classmethod
    def checkout_url(cls) -> str:
        return api_url("/checkout")

    @classmethod
    def checkout_payment_url(cls, code: str) -> str:
        return site_url(f"/checkout/payment.html?code={code}")

    async def payment_url(self) -> str:
        return self.checkout_payment_url(await self.code())

    # ---- validation ----
    def validate(self) -> List[FieldError]:
        self.errors = validate_payment(self)
        return self.errors

    def is_valid(self) -> bool:
        return not self.validate()

    # ---- checkout ----
    def checkout_xml(self) -> str:
        return render(self)

    async def send_checkout(self) -> GatewayResponse:
        transport = self.transport or HttpxTransport()
        logger.info("Submitting checkout for %s (reference=%s)", self.email, self.reference)
        return await transport.post(
            self.checkout_url(),
            self.checkout_xml(),
            headers={"Content-Type": CONTENT_TYPE},
            params={"email": self.email or "", "token": self.token or ""},
        )

    async def checkout(self) -> CheckoutResult:
        """
        Submits the payment and classifies the answer. Gateway errors come
        back as values; only a successful response is cached.
        """
        response = await self.send_checkout()
        result = classify_response(response)
        if isinstance(result, CheckoutSuccess):
            self.response = response
            logger.info("Checkout %s registered for reference=%s", result.code, self.reference)
        else:
            logger.warning(
                "Checkout rejected with HTTP %s for reference=%s", response.status_code, self.reference
            )
        return result

    async def ensure_response(self) -> GatewayResponse:
        if self.response is None:
            result = await self.checkout()
            if not isinstance(result, CheckoutSuccess):
                raise result
        return self.response

    async def code(self) -> str:
        response = await self.ensure_response()
        return parse_code(response.body)

    async def date(self) -> datetime:
        response = await self.ensure_response()
        return parse_date(response.body)

    def reset(self) -> None:
        self.response = None
