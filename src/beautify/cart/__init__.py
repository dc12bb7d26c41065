from .store import CartEvent, CartEventType, CartItem, CartListener, CartStore

__all__ = ["CartEvent", "CartEventType", "CartItem", "CartListener", "CartStore"]
