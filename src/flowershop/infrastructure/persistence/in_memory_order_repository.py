"""Process-memory implementation of OrderRepository."""

from __future__ import annotations

from flowershop.domain.model.order import Order
from flowershop.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._high_water = 0
        for order in orders or []:
            self.save(order)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        # 1 + max id ever stored, so deleting the newest order never frees its id
        return self._high_water + 1

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        self._store[order.id] = order
        self._high_water = max(self._high_water, order.id)

    def delete(self, order_id: int) -> None:
        self._store.pop(order_id, None)
