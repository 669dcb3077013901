from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.product import (
    PaginatedResult,
    Paging,
    ProductFilters,
    total_pages,
)
from storefront.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchProductCatalogRequest:
    filters: ProductFilters
    paging: Paging


class SearchProductCatalog:
    """
    Product catalog search with filters and pagination.

    This use case validates filter and paging parameters, delegates
    filtering to the repository adapter and derives the page metadata.
    No filtering logic exists in the use case.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: SearchProductCatalogRequest) -> PaginatedResult:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (filters and paging)

        Returns:
            PaginatedResult with the page of products and pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(
            filters=request.filters,
            paging=request.paging,
        )

        return PaginatedResult(
            items=result.items,
            total=result.total,
            page=request.paging.page,
            page_size=request.paging.page_size,
            total_pages=total_pages(result.total, request.paging.page_size),
        )
