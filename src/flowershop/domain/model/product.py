"""Product aggregate.

Products live independently of orders. Prices change over time, and
stock goes down when orders are placed.  Products are never deleted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flowershop.domain.exceptions import InsufficientStock, ValidationError
from flowershop.domain.model.value_objects import Money


class Category(Enum):
    FLOWERS = "flowers"
    BOUQUETS = "bouquets"
    PACKAGING = "packaging"


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is never negative
    - ``price`` is never negative (enforced by ``Money``)
    """

    id: int
    name: str
    price: Money
    category: Category
    stock: int
    is_new: bool = False
    country: str = ""
    color: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(f"Stock for {self.name} cannot be negative")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def decrement_stock(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Check and subtraction happen in one step, so stock can never
        drop below zero.
        """
        if quantity <= 0:
            raise ValidationError("Stock decrement must be positive")
        if quantity > self.stock:
            raise InsufficientStock(self.name, quantity, self.stock)
        self.stock -= quantity

    def restore_stock(self, quantity: int) -> None:
        """Put *quantity* units back (e.g. on order cancellation)."""
        if quantity <= 0:
            raise ValidationError("Stock restore must be positive")
        self.stock += quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price
