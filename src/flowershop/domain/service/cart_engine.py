"""Domain service: Cart Engine.

Every cart mutation is checked against current catalog stock.  A
rejected mutation raises and leaves the cart exactly as it was.
"""

from __future__ import annotations

from flowershop.domain.exceptions import CartInvalid, InsufficientStock, ValidationError
from flowershop.domain.model.cart import Cart
from flowershop.domain.model.value_objects import Money
from flowershop.domain.service.catalog_store import CatalogStore


class CartEngine:

    def __init__(self, catalog: CatalogStore, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    @property
    def cart(self) -> Cart:
        return self._cart

    def add(self, product_id: int, quantity: int = 1) -> int:
        """Add *quantity* units on top of what the cart already holds.

        Returns the new line quantity.
        """
        if quantity <= 0:
            raise ValidationError("Quantity to add must be positive")

        product = self._catalog.get(product_id)
        requested = self._cart.quantity_of(product_id) + quantity
        if requested > product.stock:
            raise InsufficientStock(product.name, requested, product.stock)

        self._cart.set_line(product_id, requested)
        return requested

    def set_quantity(self, product_id: int, quantity: int) -> None:
        """Overwrite a line's quantity; zero or less removes the line.

        Sets the line even when the product is not yet in the cart.
        """
        product = self._catalog.get(product_id)
        if quantity <= 0:
            self.remove(product_id)
            return

        if quantity > product.stock:
            raise InsufficientStock(product.name, quantity, product.stock)

        self._cart.set_line(product_id, quantity)

    def remove(self, product_id: int) -> None:
        self._cart.discard(product_id)

    def total(self) -> Money:
        """Running total at *current* catalog prices (not frozen)."""
        result = Money.zero()
        for line in self._cart.lines:
            product = self._catalog.get(line.product_id)
            result = result + product.price * line.quantity
        return result

    def checkout(self) -> None:
        """Read-only gate: raise CartInvalid unless the cart can become an order."""
        if self._cart.is_empty:
            raise CartInvalid([])

        offending = self._catalog.unavailable(self._cart.lines)
        if offending:
            raise CartInvalid(offending)
