"""Domain service: Catalog Store.

The only writer of stock levels.  Browsing (filtering and sorting) is a
side-effect-free projection over the in-stock products.
"""

from __future__ import annotations

from enum import Enum

from flowershop.domain.exceptions import DomainException, ProductNotFound
from flowershop.domain.model.cart import CartLine
from flowershop.domain.model.product import Category, Product
from flowershop.domain.repository.product_repository import ProductRepository


class SortKey(Enum):
    NEW = "new"
    NAME = "name"
    COUNTRY = "country"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


class CatalogStore:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: int) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def unavailable(self, lines: list[CartLine]) -> list[int]:
        """Product ids whose line is unknown to the catalog or exceeds stock."""
        offending: list[int] = []
        for line in lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None or line.quantity > product.stock:
                offending.append(line.product_id)
        return offending

    def list_available(self) -> list[Product]:
        return [p for p in self._product_repo.list_all() if p.in_stock]

    def browse(
        self,
        category: Category | None = None,
        sort_by: SortKey = SortKey.NEW,
    ) -> list[Product]:
        """Filter available products by category and sort them.

        The default order puts new items first, ties broken by
        descending id.
        """
        products = self.list_available()
        if category is not None:
            products = [p for p in products if p.category == category]

        if sort_by == SortKey.NAME:
            return sorted(products, key=lambda p: p.name.casefold())
        if sort_by == SortKey.COUNTRY:
            return sorted(products, key=lambda p: p.country.casefold())
        if sort_by == SortKey.PRICE_ASC:
            return sorted(products, key=lambda p: p.price.amount)
        if sort_by == SortKey.PRICE_DESC:
            return sorted(products, key=lambda p: p.price.amount, reverse=True)
        return sorted(products, key=lambda p: (p.is_new, p.id), reverse=True)

    # --- Stock mutation -------------------------------------------------------

    def decrement_stock(self, product_id: int, quantity: int) -> Product:
        """Atomically reduce stock, or raise InsufficientStock and change nothing."""
        product = self.get(product_id)
        product.decrement_stock(quantity)
        try:
            self._product_repo.save(product)
        except DomainException:
            product.restore_stock(quantity)
            raise
        return product

    def restore_stock(self, product_id: int, quantity: int) -> Product:
        product = self.get(product_id)
        product.restore_stock(quantity)
        self._product_repo.save(product)
        return product
