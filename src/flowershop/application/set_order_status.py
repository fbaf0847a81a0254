"""Application service: Admin Set Order Status use case."""

from __future__ import annotations

import logging

from flowershop.application.dto import OrderDTO, order_to_dto
from flowershop.application.session import Session
from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.order import OrderStatus
from flowershop.domain.service.order_lifecycle import OrderLifecycle

logger = logging.getLogger(__name__)


class SetOrderStatusHandler:

    def __init__(self, session: Session, lifecycle: OrderLifecycle) -> None:
        self._session = session
        self._lifecycle = lifecycle

    def handle(self, order_id: int, status: str, reason: str | None = None) -> OrderDTO:
        admin = self._session.require_admin()

        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown order status '{status}'")

        order = self._lifecycle.transition(order_id, new_status, reason)
        logger.info(
            "Order #%s moved to %s by %s", order.id, order.status.value, admin.login
        )
        if new_status == OrderStatus.CANCELLED and self._lifecycle.restores_stock_on_cancel:
            logger.info(
                "Stock restored for %d line(s) of cancelled order #%s",
                len(order.items),
                order.id,
            )
        return order_to_dto(order)
