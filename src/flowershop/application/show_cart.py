"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from flowershop.application.dto import CartDTO, CartLineDTO
from flowershop.domain.service.cart_engine import CartEngine
from flowershop.domain.service.catalog_store import CatalogStore


class ShowCartHandler:

    def __init__(self, cart_engine: CartEngine, catalog: CatalogStore) -> None:
        self._cart_engine = cart_engine
        self._catalog = catalog

    def handle(self) -> CartDTO:
        cart = self._cart_engine.cart
        lines: list[CartLineDTO] = []
        for line in cart.lines:
            product = self._catalog.get(line.product_id)
            lines.append(
                CartLineDTO(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=line.quantity,
                    unit_price=str(product.price),
                    line_total=str(product.price * line.quantity),
                    stock=product.stock,
                )
            )
        return CartDTO(
            lines=lines,
            total=str(self._cart_engine.total()),
            item_count=cart.item_count,
        )
