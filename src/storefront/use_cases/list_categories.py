from __future__ import annotations

from dataclasses import dataclass

from storefront.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class ListCategoriesResponse:
    categories: list[str]


class ListCategories:
    """List the distinct product categories in ascending order."""

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self) -> ListCategoriesResponse:
        return ListCategoriesResponse(categories=self._repository.list_categories())
