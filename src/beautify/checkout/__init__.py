from .flow import CheckoutFlow, CheckoutStep
from .models import (
    CardDetails,
    OrderConfirmation,
    OrderLine,
    OrderSummary,
    PaymentMethod,
    ShippingDetails,
)

__all__ = [
    "CardDetails",
    "CheckoutFlow",
    "CheckoutStep",
    "OrderConfirmation",
    "OrderLine",
    "OrderSummary",
    "PaymentMethod",
    "ShippingDetails",
]
