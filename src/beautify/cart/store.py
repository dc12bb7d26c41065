from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from beautify.catalog.models import Product


class CartEventType(str, Enum):
    ADDED = "added"
    QUANTITY_UPDATED = "quantity_updated"
    QUANTITY_CHANGED = "quantity_changed"
    REMOVED = "removed"
    CLEARED = "cleared"


@dataclass(slots=True)
class CartItem:
    product: Product
    quantity: int = 1

    @property
    def total_price(self) -> float:
        return self.product.discounted_price * self.quantity


@dataclass(frozen=True, slots=True)
class CartEvent:
    type: CartEventType
    title: str
    message: str
    product_id: int | None = None
    quantity: int | None = None


CartListener = Callable[[CartEvent], None]


class CartStore:
    """
    In-memory cart: line items unique by product id, kept in insertion order.

    Every mutation notifies subscribed listeners after the state has changed.
    A listener that raises is logged and skipped.
    """

    def __init__(
        self,
        *,
        add_delay_sec: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ):
        self._items: dict[int, CartItem] = {}
        self._listeners: list[CartListener] = []
        self._is_adding = False
        self.add_delay_sec = add_delay_sec
        self._sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items.values())

    @property
    def is_adding(self) -> bool:
        return self._is_adding

    @property
    def total_amount(self) -> float:
        return sum((item.total_price for item in self._items.values()), 0.0)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items

    def get_item(self, product_id: int) -> CartItem | None:
        return self._items.get(product_id)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: CartEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as exc:  # noqa: BLE001
                self.logger.warning("Cart listener failed on %s: %s", event.type.value, exc)

    def add_item(self, product: Product) -> CartItem:
        self._is_adding = True
        try:
            if self.add_delay_sec > 0:
                self._sleep(self.add_delay_sec)

            existing = self._items.get(product.id)
            if existing is not None:
                existing.quantity += 1
                self.logger.debug("Cart quantity updated: product=%s qty=%s", product.id, existing.quantity)
                event = CartEvent(
                    type=CartEventType.QUANTITY_UPDATED,
                    title="Quantity updated!",
                    message=f"{product.title} quantity increased to {existing.quantity}",
                    product_id=product.id,
                    quantity=existing.quantity,
                )
                item = existing
            else:
                item = CartItem(product=product)
                self._items[product.id] = item
                self.logger.debug("Cart item added: product=%s", product.id)
                event = CartEvent(
                    type=CartEventType.ADDED,
                    title="Added to cart!",
                    message=f"{product.title} has been added to your cart",
                    product_id=product.id,
                    quantity=1,
                )
        finally:
            self._is_adding = False

        self._notify(event)
        return item

    def remove_item(self, product_id: int) -> None:
        item = self._items.pop(product_id, None)
        if item is None:
            self.logger.debug("Cart remove ignored, product %s is not in cart", product_id)
            return

        self.logger.debug("Cart item removed: product=%s", product_id)
        self._notify(
            CartEvent(
                type=CartEventType.REMOVED,
                title="Removed from cart",
                message=f"{item.product.title} has been removed from your cart",
                product_id=product_id,
                quantity=0,
            )
        )

    def increase_quantity(self, product_id: int) -> None:
        item = self._items.get(product_id)
        if item is None:
            return
        item.quantity += 1
        self.logger.debug("Cart quantity increased: product=%s qty=%s", product_id, item.quantity)
        self._notify(self._quantity_changed(item))

    def decrease_quantity(self, product_id: int) -> None:
        item = self._items.get(product_id)
        if item is None:
            return
        if item.quantity > 1:
            item.quantity -= 1
            self.logger.debug("Cart quantity decreased: product=%s qty=%s", product_id, item.quantity)
            self._notify(self._quantity_changed(item))
        else:
            self.remove_item(product_id)

    def clear_cart(self) -> None:
        self._items.clear()
        self.logger.debug("Cart cleared")
        self._notify(
            CartEvent(
                type=CartEventType.CLEARED,
                title="Cart cleared",
                message="All items have been removed from your cart",
            )
        )

    @staticmethod
    def _quantity_changed(item: CartItem) -> CartEvent:
        return CartEvent(
            type=CartEventType.QUANTITY_CHANGED,
            title="Quantity changed",
            message=f"{item.product.title} quantity is now {item.quantity}",
            product_id=item.product.id,
            quantity=item.quantity,
        )
