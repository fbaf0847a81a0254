"""Domain service: Order Lifecycle Controller.

The only legal mutator of ``Order.status``.  Allowed moves::

    new -> processing -> confirmed
    new -> confirmed
    new | processing -> cancelled

``confirmed`` and ``cancelled`` are terminal.
"""

from __future__ import annotations

from flowershop.domain.model.order import Order, OrderStatus
from flowershop.domain.repository.order_repository import OrderRepository
from flowershop.domain.service.order_ledger import OrderLedger

DEFAULT_CANCEL_REASON = "Reason not specified"


class OrderLifecycle:

    def __init__(
        self,
        order_repo: OrderRepository,
        ledger: OrderLedger,
        restore_stock_on_cancel: bool = False,
        default_cancel_reason: str = DEFAULT_CANCEL_REASON,
    ) -> None:
        self._order_repo = order_repo
        self._ledger = ledger
        self._restore_stock_on_cancel = restore_stock_on_cancel
        self._default_cancel_reason = default_cancel_reason

    @property
    def restores_stock_on_cancel(self) -> bool:
        return self._restore_stock_on_cancel

    def transition(
        self,
        order_id: int,
        new_status: OrderStatus,
        reason: str | None = None,
    ) -> Order:
        """Move an order along one edge of the status graph.

        Raises InvalidTransition for any other move and leaves the order
        untouched.  A blank cancellation reason is replaced with the
        configured placeholder.
        """
        order = self._ledger.get(order_id)

        if new_status == OrderStatus.CANCELLED:
            reason = (reason or "").strip() or self._default_cancel_reason
            order.move_to(new_status, reason)
            if self._restore_stock_on_cancel:
                self._ledger.restore_stock_for(order)
        else:
            order.move_to(new_status)

        self._order_repo.save(order)
        return order
