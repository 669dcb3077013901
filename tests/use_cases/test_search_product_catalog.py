"""
Test suite for SearchProductCatalog UseCase.

- Validates paging and filter parameters before touching the repository
- Delegates filtering to the repository (no filtering logic in UseCase)
- Derives page metadata (echoed page/page_size, total_pages)
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from storefront.domain.errors import ValidationError
from storefront.domain.product import (
    FilterValidationError,
    PaginatedResult,
    Paging,
    PagingValidationError,
    Product,
    ProductFilters,
)
from storefront.ports.product_catalog_repository import ProductCatalogRepository, SearchResult
from storefront.use_cases.search_product_catalog import (
    SearchProductCatalog,
    SearchProductCatalogRequest,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock repository for testing UseCase in isolation."""
    return Mock(spec=ProductCatalogRepository)


@pytest.fixture()
def sample_products() -> list[Product]:
    return [
        Product(
            id="1",
            name="Wireless Bluetooth Headphones",
            description="Noise cancelling",
            price=Decimal("199.99"),
            category="Electronics",
            image_url="https://example.com/1.jpg",
            in_stock=True,
            rating=Decimal("4.5"),
            review_count=234,
        ),
        Product(
            id="2",
            name="Smart Watch Pro",
            description="Fitness tracking",
            price=Decimal("349.99"),
            category="Electronics",
            image_url="https://example.com/2.jpg",
            in_stock=True,
            rating=Decimal("4.3"),
            review_count=189,
        ),
    ]


# ==============================================================================
# Happy Path
# ==============================================================================


def test_execute_delegates_to_repository(mock_repository: Mock, sample_products: list[Product]) -> None:
    mock_repository.search.return_value = SearchResult(items=sample_products, total=2)
    use_case = SearchProductCatalog(mock_repository)

    request = SearchProductCatalogRequest(
        filters=ProductFilters(category="Electronics"),
        paging=Paging(page=1, page_size=10),
    )

    response = use_case.execute(request)

    mock_repository.search.assert_called_once_with(
        filters=request.filters,
        paging=request.paging,
    )
    assert response == PaginatedResult(
        items=sample_products,
        total=2,
        page=1,
        page_size=10,
        total_pages=1,
    )


def test_execute_computes_total_pages_from_total(
    mock_repository: Mock, sample_products: list[Product]
) -> None:
    mock_repository.search.return_value = SearchResult(items=sample_products, total=12)
    use_case = SearchProductCatalog(mock_repository)

    response = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(), paging=Paging(page=6, page_size=2))
    )

    assert response.total == 12
    assert response.page == 6
    assert response.page_size == 2
    assert response.total_pages == 6


def test_execute_with_no_results(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(items=[], total=0)
    use_case = SearchProductCatalog(mock_repository)

    response = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(search_term="zzz"), paging=Paging())
    )

    assert response.items == []
    assert response.total == 0
    assert response.total_pages == 0


def test_execute_beyond_last_page_is_not_an_error(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(items=[], total=12)
    use_case = SearchProductCatalog(mock_repository)

    response = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(), paging=Paging(page=5, page_size=10))
    )

    assert response.items == []
    assert response.total_pages == 2
    assert response.page == 5


# ==============================================================================
# Validation
# ==============================================================================


@pytest.mark.parametrize(
    "paging",
    [Paging(page=0), Paging(page=-1), Paging(page_size=0)],
)
def test_execute_rejects_invalid_paging(mock_repository: Mock, paging: Paging) -> None:
    use_case = SearchProductCatalog(mock_repository)

    with pytest.raises(PagingValidationError):
        use_case.execute(SearchProductCatalogRequest(filters=ProductFilters(), paging=paging))

    mock_repository.search.assert_not_called()


def test_execute_rejects_non_finite_price(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(mock_repository)
    filters = ProductFilters(max_price=Decimal("Infinity"))

    with pytest.raises(FilterValidationError):
        use_case.execute(SearchProductCatalogRequest(filters=filters, paging=Paging()))

    mock_repository.search.assert_not_called()


def test_execute_passes_inverted_price_range_to_repository(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(items=[], total=0)
    use_case = SearchProductCatalog(mock_repository)
    filters = ProductFilters(min_price=Decimal("100"), max_price=Decimal("50"))

    result = use_case.execute(SearchProductCatalogRequest(filters=filters, paging=Paging()))

    mock_repository.search.assert_called_once_with(filters=filters, paging=Paging())
    assert result.items == []
    assert result.total == 0
    assert result.total_pages == 0


def test_execute_accepts_large_page_size(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(items=[], total=12)
    use_case = SearchProductCatalog(mock_repository)

    result = use_case.execute(
        SearchProductCatalogRequest(filters=ProductFilters(), paging=Paging(page_size=200))
    )

    assert result.page_size == 200
    assert result.total_pages == 1


def test_validation_errors_are_domain_validation_errors(mock_repository: Mock) -> None:
    use_case = SearchProductCatalog(mock_repository)

    with pytest.raises(ValidationError):
        use_case.execute(SearchProductCatalogRequest(filters=ProductFilters(), paging=Paging(page=0)))
