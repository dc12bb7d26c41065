from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from beautify.cart.store import CartStore
from beautify.exceptions import CheckoutError

from .models import (
    CardDetails,
    OrderConfirmation,
    OrderLine,
    OrderSummary,
    PaymentMethod,
    ShippingDetails,
)


class CheckoutStep(str, Enum):
    SHIPPING = "shipping"
    PAYMENT = "payment"
    REVIEW = "review"
    COMPLETED = "completed"


_STEP_ORDER = [CheckoutStep.SHIPPING, CheckoutStep.PAYMENT, CheckoutStep.REVIEW, CheckoutStep.COMPLETED]


class CheckoutFlow:
    """
    Linear checkout: shipping -> payment -> review -> completed.

    Placing the order waits `processing_delay_sec` through the injected `sleep`,
    then clears the cart. There is no payment gateway and no failure path.
    """

    def __init__(
        self,
        cart: CartStore,
        *,
        processing_delay_sec: float = 2.0,
        free_shipping_threshold: float = 50.0,
        shipping_fee: float = 5.99,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self.cart = cart
        self.processing_delay_sec = processing_delay_sec
        self.free_shipping_threshold = free_shipping_threshold
        self.shipping_fee = shipping_fee
        self._sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

        self.step = CheckoutStep.SHIPPING
        self.shipping: ShippingDetails | None = None
        self.payment_method = PaymentMethod.CARD
        self.card: CardDetails | None = None
        self.confirmation: OrderConfirmation | None = None

    def _require_step(self, *allowed: CheckoutStep) -> None:
        if self.step not in allowed:
            expected = ", ".join(step.value for step in allowed)
            raise CheckoutError(f"Checkout is at step '{self.step.value}', expected: {expected}")

    def _require_items(self) -> None:
        if len(self.cart) == 0:
            raise CheckoutError("Cart is empty")

    def shipping_fee_for(self, subtotal: float) -> float:
        return 0.0 if subtotal > self.free_shipping_threshold else self.shipping_fee

    def submit_shipping(self, details: ShippingDetails) -> CheckoutStep:
        self._require_step(CheckoutStep.SHIPPING)
        self.shipping = details
        self.step = CheckoutStep.PAYMENT
        return self.step

    def select_payment(self, method: PaymentMethod, card: CardDetails | None = None) -> CheckoutStep:
        self._require_step(CheckoutStep.PAYMENT)
        try:
            self.payment_method = PaymentMethod(method)
        except ValueError as exc:
            raise CheckoutError(f"Unknown payment method: {method!r}") from exc
        self.card = card if self.payment_method is PaymentMethod.CARD else None
        self.step = CheckoutStep.REVIEW
        return self.step

    def back(self) -> CheckoutStep:
        if self.step in (CheckoutStep.SHIPPING, CheckoutStep.COMPLETED):
            return self.step
        self.step = _STEP_ORDER[_STEP_ORDER.index(self.step) - 1]
        return self.step

    def review(self) -> OrderSummary:
        self._require_step(CheckoutStep.REVIEW)
        self._require_items()

        lines = tuple(
            OrderLine(
                product_id=item.product.id,
                title=item.product.title,
                quantity=item.quantity,
                unit_price=item.product.discounted_price,
                total_price=item.total_price,
            )
            for item in self.cart.items
        )
        subtotal = self.cart.total_amount
        return OrderSummary(
            lines=lines,
            subtotal=subtotal,
            shipping_fee=self.shipping_fee_for(subtotal),
            total_items=self.cart.total_items,
            shipping=self.shipping,
            payment_method=self.payment_method,
            card=self.card,
        )

    def place_order(self) -> OrderConfirmation:
        summary = self.review()

        if self.processing_delay_sec > 0:
            self._sleep(self.processing_delay_sec)

        self.cart.clear_cart()
        self.confirmation = OrderConfirmation(
            order_id=uuid.uuid4().hex[:12].upper(),
            placed_at=datetime.now(timezone.utc),
            summary=summary,
        )
        self.step = CheckoutStep.COMPLETED
        self.logger.info(
            "Order placed: id=%s items=%s total=%.2f payment=%s",
            self.confirmation.order_id,
            summary.total_items,
            summary.total,
            summary.payment_method.value,
        )
        return self.confirmation
