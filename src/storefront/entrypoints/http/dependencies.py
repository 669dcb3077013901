"""
Dependency injection for FastAPI routes.

Key principle: only stateless, immutable values are cached. The catalog is
built once; repositories and use cases are fresh per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from storefront.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from storefront.domain.product import Catalog
from storefront.infra.seed_catalog import build_seed_catalog
from storefront.ports.product_catalog_repository import ProductCatalogRepository
from storefront.use_cases.get_product_by_id import GetProductById
from storefront.use_cases.list_categories import ListCategories
from storefront.use_cases.search_product_catalog import SearchProductCatalog


@lru_cache
def get_catalog() -> Catalog:
    """
    Provides the immutable seed catalog.

    Cached because the catalog never changes after construction; tests
    substitute their own catalog via app.dependency_overrides.
    """
    return build_seed_catalog()


def get_product_catalog_repository(
    catalog: Catalog = Depends(get_catalog),
) -> ProductCatalogRepository:
    return InMemoryProductCatalogRepository(catalog)


def get_search_catalog_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> SearchProductCatalog:
    """
    Factory function that returns a configured SearchProductCatalog use case.

    Args:
        repository: Catalog repository (injected by FastAPI)

    Returns:
        SearchProductCatalog: Configured use case instance
    """
    return SearchProductCatalog(product_catalog_repository=repository)


def get_get_product_by_id_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductById:
    return GetProductById(product_catalog_repository=repository)


def get_list_categories_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> ListCategories:
    return ListCategories(product_catalog_repository=repository)
