from __future__ import annotations

import pytest

from beautify.cart import CartStore
from beautify.checkout import (
    CardDetails,
    CheckoutFlow,
    CheckoutStep,
    PaymentMethod,
    ShippingDetails,
)
from beautify.exceptions import CheckoutError

SHIPPING = ShippingDetails(
    full_name="Jane Roe",
    email="jane@example.com",
    phone="+1 555 0100",
    address="1 Main St",
    city="Springfield",
    zip_code="12345",
)


@pytest.fixture()
def sleeps() -> list[float]:
    return []


@pytest.fixture()
def cart(products, test_logger) -> CartStore:  # noqa: ANN001
    store = CartStore(logger=test_logger)
    store.add_item(products[0])
    store.add_item(products[0])
    store.add_item(products[1])
    return store


@pytest.fixture()
def flow(cart, sleeps, test_logger) -> CheckoutFlow:  # noqa: ANN001
    return CheckoutFlow(cart, processing_delay_sec=2.0, sleep=sleeps.append, logger=test_logger)


def test_full_checkout_clears_cart(flow, cart, sleeps, products) -> None:  # noqa: ANN001
    expected_subtotal = cart.total_amount

    assert flow.submit_shipping(SHIPPING) is CheckoutStep.PAYMENT
    assert flow.select_payment(PaymentMethod.PAYPAL) is CheckoutStep.REVIEW
    confirmation = flow.place_order()

    assert sleeps == [2.0]
    assert len(cart) == 0
    assert flow.step is CheckoutStep.COMPLETED
    assert confirmation.order_id
    assert confirmation.summary.subtotal == pytest.approx(expected_subtotal)
    assert confirmation.summary.total_items == 3
    assert [line.product_id for line in confirmation.summary.lines] == [products[0].id, products[1].id]
    assert confirmation.summary.payment_method.label == "PayPal"


def test_review_applies_shipping_fee_below_threshold(flow, cart) -> None:  # noqa: ANN001
    flow.submit_shipping(SHIPPING)
    flow.select_payment(PaymentMethod.CARD, CardDetails(number="4111 1111 1111 1234", expiry="12/30", cvv="123"))

    summary = flow.review()

    assert cart.total_amount < 50
    assert summary.shipping_fee == pytest.approx(5.99)
    assert summary.total == pytest.approx(cart.total_amount + 5.99)
    assert summary.card.masked_number == "**** 1234"
    assert len(cart) == 2


def test_review_free_shipping_above_threshold(flow, cart, products) -> None:  # noqa: ANN001
    for _ in range(3):
        cart.add_item(products[1])
    flow.submit_shipping(SHIPPING)
    flow.select_payment(PaymentMethod.APPLE)

    summary = flow.review()

    assert summary.subtotal > 50
    assert summary.free_shipping
    assert summary.total == pytest.approx(summary.subtotal)


def test_card_details_dropped_for_other_methods(flow) -> None:  # noqa: ANN001
    flow.submit_shipping(SHIPPING)
    flow.select_payment(PaymentMethod.PAYPAL, CardDetails(number="4111", expiry="", cvv=""))

    assert flow.card is None


def test_out_of_order_steps_raise(flow) -> None:  # noqa: ANN001
    with pytest.raises(CheckoutError):
        flow.place_order()
    with pytest.raises(CheckoutError):
        flow.select_payment(PaymentMethod.CARD)


def test_back_returns_to_previous_step(flow) -> None:  # noqa: ANN001
    flow.submit_shipping(SHIPPING)
    flow.select_payment(PaymentMethod.CARD)

    assert flow.back() is CheckoutStep.PAYMENT
    assert flow.back() is CheckoutStep.SHIPPING
    assert flow.back() is CheckoutStep.SHIPPING


def test_empty_cart_cannot_be_ordered(cart, sleeps, test_logger) -> None:  # noqa: ANN001
    cart.clear_cart()
    flow = CheckoutFlow(cart, sleep=sleeps.append, logger=test_logger)
    flow.submit_shipping(SHIPPING)
    flow.select_payment(PaymentMethod.CARD)

    with pytest.raises(CheckoutError):
        flow.place_order()
    assert sleeps == []


def test_unknown_payment_method_raises_checkout_error(flow) -> None:  # noqa: ANN001
    flow.submit_shipping(SHIPPING)

    with pytest.raises(CheckoutError):
        flow.select_payment("bitcoin")  # type: ignore[arg-type]
    assert flow.step is CheckoutStep.PAYMENT


def test_payment_method_accepts_plain_value(flow) -> None:  # noqa: ANN001
    flow.submit_shipping(SHIPPING)

    flow.select_payment("apple")  # type: ignore[arg-type]

    assert flow.payment_method is PaymentMethod.APPLE
