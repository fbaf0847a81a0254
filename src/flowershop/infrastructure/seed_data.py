"""Initial in-memory state: the shop's catalog, accounts and demo orders."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from flowershop.domain.model.order import Order, OrderLine, OrderStatus
from flowershop.domain.model.product import Category, Product
from flowershop.domain.model.user import User
from flowershop.domain.model.value_objects import (
    DeliveryDetails,
    Money,
    PaymentMethod,
    Quantity,
)


def seed_products() -> list[Product]:
    return [
        Product(1, 'Rose "Red Naomi"', Money.of("150"), Category.FLOWERS, 50,
                is_new=True, country="Netherlands", color="Red",
                description="Classic red rose with a large bud."),
        Product(2, 'Bouquet "Tenderness"', Money.of("2500"), Category.BOUQUETS, 15,
                is_new=True, country="Russia", color="Pink",
                description="Pink roses with eustoma."),
        Product(3, 'Tulip "Strong Gold"', Money.of("80"), Category.FLOWERS, 100,
                country="Netherlands", color="Yellow",
                description="Bright yellow tulip."),
        Product(4, "Kraft wrapping", Money.of("100"), Category.PACKAGING, 200,
                country="Russia", color="Brown",
                description="Recyclable kraft paper."),
        Product(5, 'Bouquet "Spring Breeze"', Money.of("3200"), Category.BOUQUETS, 10,
                is_new=True, country="Russia", color="Mixed",
                description="Bright mix of spring flowers."),
        Product(6, "Satin ribbon", Money.of("50"), Category.PACKAGING, 150,
                country="China", color="Purple",
                description="Satin ribbon for decoration."),
        Product(7, 'Chrysanthemum "Bacardi"', Money.of("120"), Category.FLOWERS, 80,
                country="Netherlands", color="White",
                description="White spray chrysanthemum."),
    ]


def seed_users() -> list[User]:
    return [
        User(
            login="admin",
            password="admin",
            name="Admin",
            phone="+7(000)-000-00-00",
            email="admin@example.com",
            is_admin=True,
        ),
    ]


def seed_orders(now: datetime | None = None) -> list[Order]:
    """Two historical orders for the demo customer ``testuser``.

    They predate the process, so their stock was never part of the
    seeded catalog.
    """
    now = now or datetime.now(timezone.utc)
    delivery = dict(
        recipient_name="Ivan Ivanov",
        phone="+7(999)-111-22-33",
        address="1 Flower St.",
    )
    return [
        Order(
            id=1,
            user_id="testuser",
            delivery=DeliveryDetails(
                **delivery, delivery_date="2024-06-10", delivery_time="12:00",
                payment=PaymentMethod.CARD,
            ),
            items=[
                OrderLine(2, 'Bouquet "Tenderness"', Quantity(1), Money.of("2500")),
            ],
            status=OrderStatus.CONFIRMED,
            created_at=now - timedelta(days=1),
        ),
        Order(
            id=2,
            user_id="testuser",
            delivery=DeliveryDetails(
                **delivery, delivery_date="2024-06-12", delivery_time="15:00",
                payment=PaymentMethod.CASH,
            ),
            items=[
                OrderLine(1, 'Rose "Red Naomi"', Quantity(5), Money.of("150")),
                OrderLine(4, "Kraft wrapping", Quantity(1), Money.of("100")),
            ],
            created_at=now - timedelta(hours=1),
        ),
    ]
