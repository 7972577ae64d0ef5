import xml.etree.ElementTree as ET
from datetime import date, datetime
from typing import Any, Optional

from ..settings import settings
from ..utils.digits import to_digit, to_integer
from .validation import is_blank

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def _text(value: Any) -> Optional[str]:
    if is_blank(value):
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value).strip()


def _add(parent: ET.Element, tag: str, value: Any) -> Optional[ET.Element]:
    """Appends <tag>value</tag> unless value is blank."""
    text = _text(value)
    if text is None:
        return None
    child = ET.SubElement(parent, tag)
    child.text = text
    return child


def _add_integer(parent: ET.Element, tag: str, value: Any) -> None:
    number = to_integer(value)
    _add(parent, tag, number if number is not None else value)


def _sender(root: ET.Element, sender) -> None:
    node = ET.Element("sender")
    _add(node, "name", sender.name)
    _add(node, "email", sender.email)
    if sender.has_phone():
        phone = ET.SubElement(node, "phone")
        _add(phone, "areaCode", sender.phone_area_code)
        _add(phone, "number", sender.phone_number)
    if len(node):
        root.append(node)


def _items(root: ET.Element, items) -> None:
    node = ET.SubElement(root, "items")
    for item in items:
        entry = ET.SubElement(node, "item")
        _add(entry, "id", item.id)
        _add(entry, "description", item.description)
        _add(entry, "amount", to_digit(item.amount))
        _add_integer(entry, "quantity", item.quantity)
        _add(entry, "shippingCost", to_digit(item.shipping_cost))
        _add_integer(entry, "weight", item.weight)


def _shipping(root: ET.Element, shipping) -> None:
    node = ET.SubElement(root, "shipping")
    _add(node, "type", shipping.type)
    address = ET.Element("address")
    parts = (
        ("street", shipping.street),
        ("number", shipping.number),
        ("complement", shipping.complement),
        ("district", shipping.district),
        ("city", shipping.city),
        ("state", shipping.state),
        ("postalCode", str(shipping.postal_code).replace("-", "") if shipping.postal_code else None),
    )
    for tag, value in parts:
        _add(address, tag, value)
    if len(address):
        _add(address, "country", "BRA")
        node.append(address)
    _add(node, "cost", to_digit(shipping.cost))


def _pre_approval(root: ET.Element, pre_approval) -> None:
    node = ET.SubElement(root, "preApproval")
    _add(node, "charge", (pre_approval.charge or "").lower())
    _add(node, "name", pre_approval.name)
    _add(node, "details", pre_approval.details)
    _add(node, "amountPerPayment", to_digit(pre_approval.amount_per_payment))
    _add(node, "period", (pre_approval.period or "").lower())
    _add(node, "finalDate", pre_approval.final_date)
    _add(node, "maxTotalAmount", to_digit(pre_approval.max_total_amount))


def render(payment) -> str:
    """
    Renders the checkout request document for ``payment``.
    Output depends only on the payment's current field values.
    """
    root = ET.Element("checkout")
    if payment.sender is not None:
        _sender(root, payment.sender)
    _add(root, "currency", settings.PAGSEGURO_CURRENCY)
    _items(root, payment.items or [])
    _add(root, "reference", payment.reference)
    if payment.shipping is not None:
        _shipping(root, payment.shipping)
    _add(root, "extraAmount", payment.extra_amount)
    _add(root, "redirectURL", payment.redirect_url)
    _add(root, "notificationURL", payment.notification_url)
    _add_integer(root, "maxUses", payment.max_uses)
    _add_integer(root, "maxAge", payment.max_age)
    if payment.pre_approval is not None:
        _pre_approval(root, payment.pre_approval)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")
