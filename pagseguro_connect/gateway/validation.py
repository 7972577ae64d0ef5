import re
from decimal import Decimal, InvalidOperation
from typing import Any, List, NamedTuple, Optional, Protocol

from pydantic import HttpUrl, TypeAdapter, ValidationError

from ..utils.digits import to_integer

_DECIMAL_RE = re.compile(r"^\d+(\.\d{1,2})?$")
_http_url = TypeAdapter(HttpUrl)


class Validatable(Protocol):
    def is_valid(self) -> bool:
        ...


class FieldError(NamedTuple):
    field: str
    message: str


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_decimal(value: Any) -> bool:
    """Non-negative decimal with at most two fractional digits."""
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, float):
        try:
            value = Decimal(repr(value))
        except InvalidOperation:
            return False
    if isinstance(value, Decimal):
        if not value.is_finite():
            return False
        value = format(value, "f")
    return bool(_DECIMAL_RE.match(str(value).strip()))


def is_http_url(value: Any) -> bool:
    try:
        _http_url.validate_python(str(value).strip())
    except ValidationError:
        return False
    return True


def _integer_at_least(value: Any, minimum: int) -> bool:
    number = to_integer(value)
    return number is not None and number >= minimum


# ---- field checks ----
# Each check returns a FieldError or None; validate_payment runs all of them.

def _check_presence(field: str):
    def check(payment) -> Optional[FieldError]:
        if is_blank(getattr(payment, field)):
            return FieldError(field, "can't be blank")
        return None
    return check


def _check_extra_amount(payment) -> Optional[FieldError]:
    raw = payment.raw_extra_amount
    if not is_blank(raw) and not is_decimal(raw):
        return FieldError("extra_amount", "must be a valid decimal")
    return None


def _check_url(field: str, purpose: str):
    def check(payment) -> Optional[FieldError]:
        value = getattr(payment, field)
        if not is_blank(value) and not is_http_url(value):
            return FieldError(field, f"must give a correct url for {purpose}")
        return None
    return check


def _check_max_uses(payment) -> Optional[FieldError]:
    if not is_blank(payment.max_uses) and not _integer_at_least(payment.max_uses, 1):
        return FieldError("max_uses", "must be an integer greater than 0")
    return None


def _check_max_age(payment) -> Optional[FieldError]:
    if not is_blank(payment.max_age) and not _integer_at_least(payment.max_age, 30):
        return FieldError("max_age", "must be an integer greater or equal to 30")
    return None


def _check_pre_approval(payment) -> Optional[FieldError]:
    if payment.pre_approval is not None and not payment.pre_approval.is_valid():
        return FieldError("pre_approval", "must be valid")
    return None


def _check_items(payment) -> Optional[FieldError]:
    items = payment.items
    if is_blank(items) or not all([item.is_valid() for item in items]):
        return FieldError("items", "must be all valid")
    return None


CHECKS = (
    _check_presence("email"),
    _check_presence("token"),
    _check_extra_amount,
    _check_url("redirect_url", "redirection"),
    _check_url("notification_url", "notification"),
    _check_max_uses,
    _check_max_age,
    _check_pre_approval,
    _check_items,
)


def validate_payment(payment) -> List[FieldError]:
    """Runs every check and collects the violations; empty means valid."""
    errors = []
    for check in CHECKS:
        error = check(payment)
        if error is not None:
            errors.append(error)
    return errors
