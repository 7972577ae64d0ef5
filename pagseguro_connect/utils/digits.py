from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

TWO_PLACES = Decimal("0.01")


def to_digit(value: Any) -> Optional[str]:
    """
    Renders a monetary value as a string with exactly two decimal digits.
    Blank values give None; values that are not numbers come back untouched
    so the validators can report them.
    """
    if value is None:
        return None
    raw = str(value).strip()
    if not raw:
        return None
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return raw
    if not amount.is_finite():
        return raw
    return str(amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def to_integer(value: Any) -> Optional[int]:
    """Integer value of ``value`` or None when it does not hold an integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None
