"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Everything
about an order is fixed at creation except its status and, for
cancelled orders, the cancellation reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from flowershop.domain.exceptions import InvalidTransition, ValidationError
from flowershop.domain.model.value_objects import DeliveryDetails, Money, Quantity


class OrderStatus(Enum):
    NEW = "new"
    PROCESSING = "processing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


# ---------------------------------------------------------------------------
# Status graph: confirmed and cancelled are terminal
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.NEW: frozenset(
        {OrderStatus.PROCESSING, OrderStatus.CONFIRMED, OrderStatus.CANCELLED}
    ),
    OrderStatus.PROCESSING: frozenset(
        {OrderStatus.CONFIRMED, OrderStatus.CANCELLED}
    ),
    OrderStatus.CONFIRMED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass(frozen=True)
class OrderLine:
    """Captures the price snapshot of a product at order-creation time."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` stays simple so seed data can be
    loaded as-is.
    """

    id: int
    user_id: str
    delivery: DeliveryDetails
    items: list[OrderLine]
    status: OrderStatus = OrderStatus.NEW
    cancel_reason: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: int,
        user_id: str,
        delivery: DeliveryDetails,
        items: list[OrderLine],
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not user_id:
            raise ValidationError("Order must belong to a user")

        if not items:
            raise ValidationError("Order must contain at least one item")

        seen = [item.product_id for item in items]
        if len(seen) != len(set(seen)):
            raise ValidationError("Each product may appear only once per order")

        return Order(id=order_id, user_id=user_id, delivery=delivery, items=list(items))

    # --- State transitions ----------------------------------------------------

    def can_move_to(self, new_status: OrderStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self.status]

    def move_to(self, new_status: OrderStatus, reason: str | None = None) -> None:
        """Apply one edge of the status graph.

        ``reason`` is required for cancellation and ignored otherwise;
        choosing the placeholder for a missing reason is the caller's job.
        """
        if not self.can_move_to(new_status):
            raise InvalidTransition(self.status, new_status)

        if new_status == OrderStatus.CANCELLED:
            if not reason:
                raise ValidationError("Cancellation reason is required")
            self.cancel_reason = reason
        else:
            self.cancel_reason = None
        self.status = new_status

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_deletable(self) -> bool:
        return self.status == OrderStatus.NEW
