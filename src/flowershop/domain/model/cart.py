"""Cart aggregate — the active session's shopping cart.

The cart only knows product ids and quantities.  Stock rules need the
catalog, so they live in ``CartEngine``; the cart itself just keeps
its lines consistent (unique ids, positive quantities).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowershop.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartLine:
    product_id: int
    quantity: int


@dataclass
class Cart:

    _lines: dict[int, int] = field(default_factory=dict)

    @property
    def lines(self) -> list[CartLine]:
        """Lines in the order products were first added."""
        return [CartLine(pid, qty) for pid, qty in self._lines.items()]

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(self._lines.values())

    def quantity_of(self, product_id: int) -> int:
        return self._lines.get(product_id, 0)

    def set_line(self, product_id: int, quantity: int) -> None:
        """Create or overwrite a line.  Zero is not allowed here; use ``discard``."""
        self._lines[product_id] = Quantity(quantity).value

    def discard(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()
