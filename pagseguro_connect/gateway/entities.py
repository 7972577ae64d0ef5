import re
from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import BaseModel

from ..utils.digits import to_integer
from .validation import is_blank, is_decimal

# Sub-entities referenced by a Payment. The gateway checks most of their
# content itself; is_valid() only rejects what would never be accepted.

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_DIGITS_RE = re.compile(r"^\d+$")

SHIPPING_TYPES = {1: "PAC", 2: "SEDEX", 3: "NOT_SPECIFIED"}
PRE_APPROVAL_CHARGES = {"auto", "manual"}
PRE_APPROVAL_PERIODS = {"weekly", "monthly", "bimonthly", "trimonthly", "semiannually", "yearly"}


def _digits_only(value: Any) -> bool:
    return is_blank(value) or bool(_DIGITS_RE.match(str(value).strip()))


class Item(BaseModel):
    id: Optional[str] = None
    description: Optional[str] = None
    amount: Any = None
    quantity: Any = 1
    shipping_cost: Any = None
    weight: Any = None  # grams

    def is_valid(self) -> bool:
        if is_blank(self.id) or is_blank(self.description):
            return False
        if not is_decimal(self.amount):
            return False
        quantity = to_integer(self.quantity)
        if quantity is None or not 1 <= quantity <= 999:
            return False
        if not is_blank(self.shipping_cost) and not is_decimal(self.shipping_cost):
            return False
        if not is_blank(self.weight):
            weight = to_integer(self.weight)
            if weight is None or weight < 0:
                return False
        return True


class Sender(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone_area_code: Optional[str] = None
    phone_number: Optional[str] = None

    def has_phone(self) -> bool:
        return not is_blank(self.phone_area_code) and not is_blank(self.phone_number)

    def is_valid(self) -> bool:
        if not is_blank(self.email) and not _EMAIL_RE.match(self.email.strip()):
            return False
        return _digits_only(self.phone_area_code) and _digits_only(self.phone_number)


class Shipping(BaseModel):
    type: int = 3
    state: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    district: Optional[str] = None
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    cost: Any = None

    def is_valid(self) -> bool:
        if self.type not in SHIPPING_TYPES:
            return False
        if not is_blank(self.postal_code):
            postal_code = str(self.postal_code).replace("-", "").strip()
            if len(postal_code) != 8 or not postal_code.isdigit():
                return False
        if not is_blank(self.cost) and not is_decimal(self.cost):
            return False
        return True


class PreApproval(BaseModel):
    """Recurring-payment authorization attached to a checkout."""

    charge: Optional[str] = None
    name: Optional[str] = None
    details: Optional[str] = None
    amount_per_payment: Any = None
    period: Optional[str] = None
    final_date: Optional[Union[datetime, date, str]] = None
    max_total_amount: Any = None

    def is_valid(self) -> bool:
        if (self.charge or "").lower() not in PRE_APPROVAL_CHARGES:
            return False
        if is_blank(self.name) or is_blank(self.final_date):
            return False
        if (self.period or "").lower() not in PRE_APPROVAL_PERIODS:
            return False
        if not is_decimal(self.max_total_amount):
            return False
        if not is_blank(self.amount_per_payment) and not is_decimal(self.amount_per_payment):
            return False
        return True
