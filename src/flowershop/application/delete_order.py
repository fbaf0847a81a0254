"""Application service: Delete Own Order use case.

Customers may withdraw an order only while it is still new.
"""

from __future__ import annotations

import logging

from flowershop.application.session import Session
from flowershop.domain.service.order_ledger import OrderLedger

logger = logging.getLogger(__name__)


class DeleteOwnOrderHandler:

    def __init__(self, session: Session, ledger: OrderLedger) -> None:
        self._session = session
        self._ledger = ledger

    def handle(self, order_id: int) -> None:
        user_id = self._session.user_id
        order = self._ledger.delete_order(order_id, user_id)
        logger.info("Order #%s deleted by %s", order_id, user_id)
        if self._ledger.restores_stock_on_delete:
            logger.info(
                "Stock restored for %d line(s) of deleted order #%s",
                len(order.items),
                order_id,
            )
