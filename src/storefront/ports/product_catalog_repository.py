from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.product import Paging, Product, ProductFilters


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including the pre-paging match count."""

    items: list[Product]
    total: int


class ProductCatalogRepository(ABC):
    """
    Port for product catalog data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - Lookups of absent ids return None, never raise
    """

    @abstractmethod
    def search(self, filters: ProductFilters, paging: Paging) -> SearchResult:
        """
        Search catalog with filters and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing the page of products and the total match count
        """
        ...

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return the product with the given id, or None if absent."""
        ...

    @abstractmethod
    def list_categories(self) -> list[str]:
        """Return distinct categories sorted ascending."""
        ...
