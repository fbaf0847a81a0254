"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  All state is owned by
the returned ``Storefront`` and lives as long as it does.
"""

from __future__ import annotations

from dataclasses import dataclass

from flowershop.application.session import Session
from flowershop.domain.model.cart import Cart
from flowershop.domain.repository.order_repository import OrderRepository
from flowershop.domain.repository.product_repository import ProductRepository
from flowershop.domain.service.cart_engine import CartEngine
from flowershop.domain.service.catalog_store import CatalogStore
from flowershop.domain.service.order_ledger import OrderLedger
from flowershop.domain.service.order_lifecycle import OrderLifecycle
from flowershop.infrastructure.config import StoreConfig
from flowershop.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from flowershop.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from flowershop.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from flowershop.infrastructure.seed_data import seed_orders, seed_products, seed_users


@dataclass
class Storefront:
    product_repo: ProductRepository
    order_repo: OrderRepository
    session: Session
    catalog: CatalogStore
    cart_engine: CartEngine
    ledger: OrderLedger
    lifecycle: OrderLifecycle


def build_storefront(config: StoreConfig | None = None) -> Storefront:
    config = config or StoreConfig()

    product_repo = InMemoryProductRepository(seed_products())
    order_repo = InMemoryOrderRepository(
        seed_orders() if config.seed_demo_orders else []
    )
    session = Session(InMemoryUserRepository(seed_users()))

    catalog = CatalogStore(product_repo)
    ledger = OrderLedger(
        order_repo,
        catalog,
        restore_stock_on_delete=config.restore_stock_on_delete,
    )
    lifecycle = OrderLifecycle(
        order_repo,
        ledger,
        restore_stock_on_cancel=config.restore_stock_on_cancel,
        default_cancel_reason=config.default_cancel_reason,
    )

    return Storefront(
        product_repo=product_repo,
        order_repo=order_repo,
        session=session,
        catalog=catalog,
        cart_engine=CartEngine(catalog, Cart()),
        ledger=ledger,
        lifecycle=lifecycle,
    )
