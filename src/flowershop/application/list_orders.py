"""Application service: order history queries."""

from __future__ import annotations

from flowershop.application.dto import OrderDTO, order_to_dto
from flowershop.application.session import Session
from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.order import OrderStatus
from flowershop.domain.service.order_ledger import OrderLedger


class ListMyOrdersHandler:

    def __init__(self, session: Session, ledger: OrderLedger) -> None:
        self._session = session
        self._ledger = ledger

    def handle(self) -> list[OrderDTO]:
        """The logged-in user's orders, newest first."""
        orders = self._ledger.orders_for_user(self._session.user_id)
        return [order_to_dto(o) for o in orders]


class ListAllOrdersHandler:

    def __init__(self, session: Session, ledger: OrderLedger) -> None:
        self._session = session
        self._ledger = ledger

    def handle(self, status: str = "all") -> list[OrderDTO]:
        """Every order for the admin view, newest first."""
        self._session.require_admin()

        wanted: OrderStatus | None = None
        if status != "all":
            try:
                wanted = OrderStatus(status)
            except ValueError:
                raise ValidationError(f"Unknown order status '{status}'")

        return [order_to_dto(o) for o in self._ledger.all_orders(wanted)]
