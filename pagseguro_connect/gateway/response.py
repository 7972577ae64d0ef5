import xml.etree.ElementTree as ET
from datetime import datetime
from typing import NamedTuple, Union

from .errors import GatewayContractError, InvalidData, PagSeguroError, Unauthorized, UnknownError
from .transport import GatewayResponse


class CheckoutSuccess(NamedTuple):
    code: str
    date: datetime
    response: GatewayResponse


CheckoutError = PagSeguroError
CheckoutResult = Union[CheckoutSuccess, CheckoutError]


def _checkout_field(body: str, tag: str) -> str:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        raise GatewayContractError(f"Checkout response is not XML: {e}") from e
    node = root if root.tag == "checkout" else root.find(".//checkout")
    if node is None:
        raise GatewayContractError("Checkout response has no <checkout> element")
    child = node.find(tag)
    if child is None or not (child.text or "").strip():
        raise GatewayContractError(f"Checkout response has no <{tag}> element")
    return child.text.strip()


def parse_code(body: str) -> str:
    return _checkout_field(body, "code")


def parse_date(body: str) -> datetime:
    raw = _checkout_field(body, "date")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise GatewayContractError(f"Checkout date is not ISO-8601: {raw!r}") from e


def classify_response(response: GatewayResponse) -> CheckoutResult:
    """
    Maps a gateway response to CheckoutSuccess or to one of the
    PagSeguroError variants. The error is returned, not raised.
    """
    if response.status_code == 200:
        return CheckoutSuccess(parse_code(response.body), parse_date(response.body), response)
    if response.status_code == 401:
        return Unauthorized()
    if response.status_code == 400:
        return InvalidData(response.body)
    return UnknownError(response)
