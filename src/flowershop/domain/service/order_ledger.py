"""Domain service: Order Ledger.

The single write path that creates orders.  Placing an order snapshots
the cart at current prices and takes the stock out of the catalog in
one all-or-nothing step.

The two-phase approach (validate-then-mutate) ensures we never leave
the catalog partially decremented if one line fails.  Should a
decrement still fail in phase 2, the lines already taken are put back
before the failure is raised.
"""

from __future__ import annotations

from flowershop.domain.exceptions import (
    CartInvalid,
    DomainException,
    NotAuthenticated,
    NotPermitted,
    OrderNotFound,
    OrderPlacementFailed,
)
from flowershop.domain.model.cart import Cart, CartLine
from flowershop.domain.model.order import Order, OrderLine, OrderStatus
from flowershop.domain.model.value_objects import DeliveryDetails, Quantity
from flowershop.domain.repository.order_repository import OrderRepository
from flowershop.domain.service.catalog_store import CatalogStore


class OrderLedger:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: CatalogStore,
        restore_stock_on_delete: bool = False,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog
        self._restore_stock_on_delete = restore_stock_on_delete

    @property
    def restores_stock_on_delete(self) -> bool:
        return self._restore_stock_on_delete

    # --- Commands -------------------------------------------------------------

    def place_order(
        self,
        user_id: str | None,
        cart: Cart,
        delivery: DeliveryDetails,
    ) -> Order:
        """Turn the cart into a new order and take its stock.

        Raises OrderPlacementFailed (chained from the underlying cause)
        when the cart is empty or any line exceeds current stock.  On
        failure neither the catalog, the ledger nor the cart changes.
        """
        if not user_id:
            raise NotAuthenticated()

        # Phase 1: re-validate against current stock and snapshot prices
        try:
            if cart.is_empty:
                raise CartInvalid([])
            offending = self._catalog.unavailable(cart.lines)
            if offending:
                raise CartInvalid(offending)
            items = [self._snapshot(line) for line in cart.lines]
        except DomainException as exc:
            raise OrderPlacementFailed(f"Order not placed: {exc}") from exc

        order = Order.create(
            order_id=self._order_repo.next_id(),
            user_id=user_id,
            delivery=delivery,
            items=items,
        )

        # Phase 2: decrement stock, undoing on the first failure
        taken: list[OrderLine] = []
        try:
            for item in order.items:
                self._catalog.decrement_stock(item.product_id, item.quantity.value)
                taken.append(item)
        except DomainException as exc:
            for item in taken:
                self._catalog.restore_stock(item.product_id, item.quantity.value)
            raise OrderPlacementFailed(f"Order not placed: {exc}") from exc

        self._order_repo.save(order)
        cart.clear()
        return order

    def delete_order(self, order_id: int, requesting_user_id: str | None) -> Order:
        """Remove a still-new order on behalf of its owner.

        Stock is not restored unless the ledger was built with
        ``restore_stock_on_delete``.
        """
        if not requesting_user_id:
            raise NotAuthenticated()

        order = self._order_repo.get_by_id(order_id)
        if order is None or order.user_id != requesting_user_id:
            raise NotPermitted(f"Order #{order_id} does not belong to you")
        if not order.is_deletable:
            raise NotPermitted(
                f"Order #{order_id} is {order.status.value}; "
                f"only new orders can be deleted"
            )

        self._order_repo.delete(order_id)
        if self._restore_stock_on_delete:
            self.restore_stock_for(order)
        return order

    def restore_stock_for(self, order: Order) -> None:
        """Put every line of *order* back into the catalog."""
        for item in order.items:
            self._catalog.restore_stock(item.product_id, item.quantity.value)

    # --- Queries --------------------------------------------------------------

    def get(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def orders_for_user(self, user_id: str | None) -> list[Order]:
        """The user's orders, newest first."""
        if not user_id:
            raise NotAuthenticated()
        return self._newest_first(
            o for o in self._order_repo.list_all() if o.user_id == user_id
        )

    def all_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """Every order, newest first, optionally limited to one status."""
        return self._newest_first(
            o
            for o in self._order_repo.list_all()
            if status is None or o.status == status
        )

    # --- Internal helpers -----------------------------------------------------

    def _snapshot(self, line: CartLine) -> OrderLine:
        product = self._catalog.get(line.product_id)
        return OrderLine(
            product_id=product.id,
            product_name=product.name,
            quantity=Quantity(line.quantity),
            unit_price=product.price,  # <-- price snapshot
        )

    @staticmethod
    def _newest_first(orders) -> list[Order]:
        return sorted(orders, key=lambda o: (o.created_at, o.id), reverse=True)
