from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, Any, List

from ..gateway.entities import Item, PreApproval, Sender, Shipping


# ====== INPUT ======

class CheckoutRequest(BaseModel):
    # merchant credentials; settings.PAGSEGURO_EMAIL / PAGSEGURO_TOKEN when omitted
    email: Optional[str] = None
    token: Optional[str] = None
    reference: Optional[str] = None
    items: List[Item] = Field(default_factory=list)
    sender: Optional[Sender] = None
    shipping: Optional[Shipping] = None
    extra_amount: Optional[Any] = None
    redirect_url: Optional[str] = None
    notification_url: Optional[str] = None
    max_uses: Optional[Any] = None
    max_age: Optional[Any] = None
    pre_approval: Optional[PreApproval] = None


# ====== OUTPUT ======

class CheckoutResponse(BaseModel):
    code: str
    date: datetime
    payment_url: str


class FieldErrorOut(BaseModel):
    field: str
    message: str
