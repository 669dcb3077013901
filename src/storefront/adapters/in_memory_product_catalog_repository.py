from __future__ import annotations

from storefront.domain.product import Catalog, Paging, Product, ProductFilters
from storefront.ports.product_catalog_repository import ProductCatalogRepository, SearchResult


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Query engine over an immutable in-memory catalog.

    - Preserves catalog insertion order
    - Applies AND-semantics filtering
    - Applies paging AFTER filtering
    - Returns total of matching products before paging
    - Recomputes from the full catalog on every call (no caching)
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def search(self, filters: ProductFilters, paging: Paging) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [product for product in self._catalog if self._matches(product, filters)]
        total = len(matches)  # Count BEFORE paging

        start = paging.offset
        end = start + paging.page_size

        return SearchResult(items=matches[start:end], total=total)

    def get_by_id(self, product_id: str) -> Product | None:
        return next((product for product in self._catalog if product.id == product_id), None)

    def list_categories(self) -> list[str]:
        return sorted({product.category for product in self._catalog})

    def _matches(self, product: Product, filters: ProductFilters) -> bool:
        if filters.category and product.category != filters.category:
            return False
        if filters.min_price is not None and product.price < filters.min_price:
            return False
        if filters.max_price is not None and product.price > filters.max_price:
            return False
        if filters.in_stock is not None and product.in_stock != filters.in_stock:
            return False
        if filters.search_term:
            term = filters.search_term.lower()
            if not (
                term in product.name.lower()
                or term in product.description.lower()
                or term in product.category.lower()
            ):
                return False
        return True
