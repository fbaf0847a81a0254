"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from flowershop.domain.service.cart_engine import CartEngine

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, cart_engine: CartEngine) -> None:
        self._cart_engine = cart_engine

    def handle(self, product_id: int, quantity: int = 1) -> int:
        """Add units to the cart.  Returns the line's new quantity."""
        new_quantity = self._cart_engine.add(product_id, quantity)
        logger.debug("Cart line #%s now %s", product_id, new_quantity)
        return new_quantity
