"""Application service: Change Cart use cases.

A rejected quantity change leaves the line at its previous value; the
caller is expected to show the error and keep displaying the old
quantity.
"""

from __future__ import annotations

from flowershop.domain.service.cart_engine import CartEngine


class SetCartQuantityHandler:

    def __init__(self, cart_engine: CartEngine) -> None:
        self._cart_engine = cart_engine

    def handle(self, product_id: int, quantity: int) -> None:
        self._cart_engine.set_quantity(product_id, quantity)


class RemoveFromCartHandler:

    def __init__(self, cart_engine: CartEngine) -> None:
        self._cart_engine = cart_engine

    def handle(self, product_id: int) -> None:
        self._cart_engine.remove(product_id)
