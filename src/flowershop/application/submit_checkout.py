"""Application service: Submit Checkout use case.

Orchestrates the session (who is buying), the cart engine (read-only
checkout gate) and the order ledger (the single write path for
orders).
"""

from __future__ import annotations

import logging

from flowershop.application.dto import DeliveryForm, OrderDTO, order_to_dto
from flowershop.application.session import Session
from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.value_objects import DeliveryDetails, PaymentMethod
from flowershop.domain.service.cart_engine import CartEngine
from flowershop.domain.service.order_ledger import OrderLedger

logger = logging.getLogger(__name__)


class SubmitCheckoutHandler:

    def __init__(
        self,
        session: Session,
        cart_engine: CartEngine,
        ledger: OrderLedger,
    ) -> None:
        self._session = session
        self._cart_engine = cart_engine
        self._ledger = ledger

    def handle(self, form: DeliveryForm) -> OrderDTO:
        """Place an order for the logged-in user.

        Steps:
        1. Require a logged-in user.
        2. Run the checkout gate (empty cart / over-stock lines).
        3. Validate the delivery form.
        4. Let the ledger snapshot the cart and take the stock.
        """
        user = self._session.require_user()
        self._cart_engine.checkout()

        delivery = DeliveryDetails(
            recipient_name=form.recipient_name or user.name,
            phone=form.phone,
            address=form.address,
            delivery_date=form.delivery_date,
            delivery_time=form.delivery_time,
            payment=self._parse_payment(form.payment),
        )

        order = self._ledger.place_order(user.login, self._cart_engine.cart, delivery)
        logger.info(
            "Order #%s placed by %s: %s line(s), total %s",
            order.id,
            user.login,
            len(order.items),
            order.total,
        )
        return order_to_dto(order)

    @staticmethod
    def _parse_payment(raw: str) -> PaymentMethod:
        try:
            return PaymentMethod(raw)
        except ValueError:
            raise ValidationError(f"Unknown payment method '{raw}' (use cash or card)")
