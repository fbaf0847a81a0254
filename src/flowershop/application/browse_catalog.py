"""Application service: Browse Catalog use cases (queries)."""

from __future__ import annotations

from flowershop.application.dto import ProductDTO, product_to_dto
from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.product import Category
from flowershop.domain.service.catalog_store import CatalogStore, SortKey


class BrowseCatalogHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, category: str = "all", sort_by: str = "new") -> list[ProductDTO]:
        """List in-stock products, optionally by category, in the chosen order."""
        try:
            key = SortKey(sort_by)
        except ValueError:
            raise ValidationError(f"Unknown sort order '{sort_by}'")

        wanted: Category | None = None
        if category != "all":
            try:
                wanted = Category(category)
            except ValueError:
                raise ValidationError(f"Unknown category '{category}'")

        return [product_to_dto(p) for p in self._catalog.browse(wanted, key)]


class ShowProductHandler:

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog

    def handle(self, product_id: int) -> ProductDTO:
        return product_to_dto(self._catalog.get(product_id))
