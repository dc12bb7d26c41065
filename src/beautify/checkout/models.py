from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class PaymentMethod(str, Enum):
    CARD = "card"
    PAYPAL = "paypal"
    APPLE = "apple"

    @property
    def label(self) -> str:
        return PAYMENT_LABELS[self]


PAYMENT_LABELS = {
    PaymentMethod.CARD: "Credit/Debit Card",
    PaymentMethod.PAYPAL: "PayPal",
    PaymentMethod.APPLE: "Apple Pay",
}


@dataclass(slots=True)
class ShippingDetails:
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    zip_code: str


@dataclass(slots=True)
class CardDetails:
    number: str
    expiry: str
    cvv: str

    @property
    def masked_number(self) -> str:
        digits = "".join(ch for ch in self.number if ch.isdigit())
        return f"**** {digits[-4:]}" if digits else ""


@dataclass(frozen=True, slots=True)
class OrderLine:
    product_id: int
    title: str
    quantity: int
    unit_price: float
    total_price: float


@dataclass(frozen=True, slots=True)
class OrderSummary:
    lines: tuple[OrderLine, ...]
    subtotal: float
    shipping_fee: float
    total_items: int
    shipping: ShippingDetails
    payment_method: PaymentMethod
    card: CardDetails | None = None

    @property
    def total(self) -> float:
        return self.subtotal + self.shipping_fee

    @property
    def free_shipping(self) -> bool:
        return self.shipping_fee == 0


@dataclass(frozen=True, slots=True)
class OrderConfirmation:
    order_id: str
    placed_at: datetime
    summary: OrderSummary
    message: str = "Thank you for your order! You will receive a confirmation email shortly."
