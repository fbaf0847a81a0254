"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowershop.domain.exceptions import DomainException
from flowershop.domain.model.order import Order
from flowershop.domain.model.product import Product


@dataclass(frozen=True)
class DeliveryForm:
    """Input: the checkout form as typed by the customer.

    ``recipient_name`` falls back to the logged-in user's name.
    """

    phone: str
    address: str
    delivery_date: str
    delivery_time: str
    payment: str = "card"
    recipient_name: str | None = None


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "150.00 RUB"
    category: str
    stock: int
    is_new: bool
    country: str
    color: str
    description: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str
    stock: int


@dataclass(frozen=True)
class CartDTO:
    """Output: current cart with a running total at today's prices."""

    lines: list[CartLineDTO]
    total: str
    item_count: int


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    user_id: str
    status: str
    recipient_name: str
    phone: str
    address: str
    delivery_date: str
    delivery_time: str
    payment: str
    items: list[OrderLineDTO]
    total: str
    created_at: str
    cancel_reason: str | None


@dataclass(frozen=True)
class ErrorDTO:
    """Output: a failed operation as (kind, human-readable detail)."""

    kind: str
    detail: str

    @staticmethod
    def from_exception(exc: DomainException) -> ErrorDTO:
        return ErrorDTO(kind=exc.kind, detail=exc.detail)


# --- Mapping -----------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        category=product.category.value,
        stock=product.stock,
        is_new=product.is_new,
        country=product.country,
        color=product.color,
        description=product.description,
    )


def order_to_dto(order: Order) -> OrderDTO:
    delivery = order.delivery
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.value,
        recipient_name=delivery.recipient_name,
        phone=delivery.phone,
        address=delivery.address,
        delivery_date=delivery.delivery_date,
        delivery_time=delivery.delivery_time,
        payment=delivery.payment.value,
        items=[
            OrderLineDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        cancel_reason=order.cancel_reason,
    )
