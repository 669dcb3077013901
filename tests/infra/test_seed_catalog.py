"""Query behaviour against the twelve-product demo catalog."""

from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from storefront.domain.product import Paging, ProductFilters
from storefront.infra.seed_catalog import SEED_PRODUCTS, build_seed_catalog


@pytest.fixture()
def repo() -> InMemoryProductCatalogRepository:
    return InMemoryProductCatalogRepository(build_seed_catalog())


def test_seed_catalog_has_twelve_products_in_id_order() -> None:
    catalog = build_seed_catalog()

    assert [product.id for product in catalog] == [str(i) for i in range(1, 13)]


def test_seed_products_have_valid_values() -> None:
    for product in SEED_PRODUCTS:
        assert product.price >= 0
        assert product.price == product.price.quantize(Decimal("0.01"))
        assert Decimal("0") <= product.rating <= Decimal("5")
        assert product.review_count >= 0


def test_first_page_of_unfiltered_catalog(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(ProductFilters(), Paging(page=1, page_size=10))

    assert len(result.items) == 10
    assert result.total == 12


def test_second_page_holds_remaining_products(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(ProductFilters(), Paging(page=2, page_size=10))

    assert [product.id for product in result.items] == ["11", "12"]


def test_electronics_category(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(ProductFilters(category="Electronics"), Paging())

    assert [product.id for product in result.items] == ["1", "2", "6", "10"]
    assert all(product.category == "Electronics" for product in result.items)


def test_search_term_wireless(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(ProductFilters(search_term="wireless"), Paging())

    assert [product.id for product in result.items] == ["1", "10"]


def test_price_range_fifty_to_hundred(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(
        ProductFilters(min_price=Decimal("50"), max_price=Decimal("100")),
        Paging(),
    )

    assert [product.id for product in result.items] == ["6", "8", "9", "10"]
    assert all(Decimal("50") <= product.price <= Decimal("100") for product in result.items)


def test_out_of_stock_products(repo: InMemoryProductCatalogRepository) -> None:
    result = repo.search(ProductFilters(in_stock=False), Paging())

    assert [product.id for product in result.items] == ["3", "8"]


def test_unknown_id_is_absent(repo: InMemoryProductCatalogRepository) -> None:
    assert repo.get_by_id("999") is None


def test_known_id_lookup(repo: InMemoryProductCatalogRepository) -> None:
    product = repo.get_by_id("7")

    assert product is not None
    assert product.name == "Running Shoes Elite"
    assert product.price == Decimal("129.99")


def test_categories(repo: InMemoryProductCatalogRepository) -> None:
    assert repo.list_categories() == [
        "Accessories",
        "Clothing",
        "Electronics",
        "Home & Kitchen",
        "Sports",
    ]
