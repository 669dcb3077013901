from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Iterator

from storefront.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


@dataclass(frozen=True, slots=True)
class Product:
    id: str
    name: str
    description: str
    price: Decimal
    category: str
    image_url: str
    in_stock: bool
    rating: Decimal
    review_count: int


class Catalog:
    """
    Immutable, ordered collection of products.

    Insertion order is the canonical order of every query result.
    Product ids must be unique.
    """

    __slots__ = ("_products",)

    def __init__(self, products: Iterable[Product]) -> None:
        items = tuple(products)

        seen: set[str] = set()
        for product in items:
            if product.id in seen:
                raise ValueError(f"Duplicate product id in catalog: {product.id!r}")
            seen.add(product.id)

        self._products = items

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)


@dataclass(frozen=True, slots=True)
class ProductFilters:
    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None
    search_term: str | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        for name in ("min_price", "max_price"):
            value = getattr(self, name)
            if value is None:
                continue
            # Guardrails: prevent float leakage past boundary
            if not isinstance(value, Decimal):
                raise FilterValidationError(
                    f"{name} must be Decimal or None (no floats past the boundary)"
                )
            if not value.is_finite():
                raise FilterValidationError(f"{name} must be a finite number")
        # An inverted range (min_price > max_price) is valid and matches nothing.


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page < 1:
            raise PagingValidationError("page must be >= 1")
        if self.page_size < 1:
            raise PagingValidationError("page_size must be >= 1")


@dataclass(frozen=True, slots=True)
class PaginatedResult:
    items: list[Product]
    total: int
    page: int
    page_size: int
    total_pages: int


def total_pages(total: int, page_size: int) -> int:
    """Ceiling of total / page_size in integer arithmetic."""
    return -(-total // page_size)
