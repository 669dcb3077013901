from __future__ import annotations

from decimal import Decimal, InvalidOperation

from storefront.domain.errors import ValidationError
from storefront.domain.product import PaginatedResult, Paging, Product, ProductFilters
from storefront.entrypoints.http.dtos.products import (
    PaginatedProductsDTO,
    ProductResponseDTO,
    ProductsSearchQueryDTO,
)
from storefront.use_cases.search_product_catalog import SearchProductCatalogRequest


class ProductMapper:
    """Maps between REST DTOs and domain models for the product catalog."""

    @staticmethod
    def to_domain_filters(dto: ProductsSearchQueryDTO) -> ProductFilters:
        """
        Converts query params to domain filters.

        Empty strings are treated as unset. Prices are parsed to Decimal,
        inStock is true only for the exact string "true".

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            ProductFilters: Domain filters with Decimal prices

        Raises:
            ValidationError: If a price is not a finite decimal number
        """
        errors: list[dict[str, str]] = []
        min_price = ProductMapper._parse_price(dto.min_price, "minPrice", errors)
        max_price = ProductMapper._parse_price(dto.max_price, "maxPrice", errors)
        if errors:
            raise ValidationError(errors=errors)

        return ProductFilters(
            category=dto.category or None,
            min_price=min_price,
            max_price=max_price,
            in_stock=None if dto.in_stock is None else dto.in_stock == "true",
            search_term=dto.search_term or None,
        )

    @staticmethod
    def to_domain_paging(dto: ProductsSearchQueryDTO) -> Paging:
        """
        Converts pagination params to domain paging.

        Empty or absent values fall back to page 1 and page size 10.

        Raises:
            ValidationError: If page or pageSize is not an integer
        """
        errors: list[dict[str, str]] = []
        page = ProductMapper._parse_int(dto.page, "page", errors)
        page_size = ProductMapper._parse_int(dto.page_size, "pageSize", errors)
        if errors:
            raise ValidationError(errors=errors)

        defaults = Paging()
        return Paging(
            page=defaults.page if page is None else page,
            page_size=defaults.page_size if page_size is None else page_size,
        )

    @staticmethod
    def to_domain_request(dto: ProductsSearchQueryDTO) -> SearchProductCatalogRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            SearchProductCatalogRequest: Complete domain request with filters and paging
        """
        return SearchProductCatalogRequest(
            filters=ProductMapper.to_domain_filters(dto),
            paging=ProductMapper.to_domain_paging(dto),
        )

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product entity to REST response DTO.

        Decimal → float at the boundary; clients read prices as JSON numbers.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=float(product.price),
            category=product.category,
            image_url=product.image_url,
            in_stock=product.in_stock,
            rating=float(product.rating),
            review_count=product.review_count,
        )

    @staticmethod
    def to_paginated_response(result: PaginatedResult) -> PaginatedProductsDTO:
        return PaginatedProductsDTO(
            items=[ProductMapper.to_product_response(product) for product in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
        )

    @staticmethod
    def _parse_price(
        raw: str | None, field: str, errors: list[dict[str, str]]
    ) -> Decimal | None:
        if raw is None or not raw.strip():
            return None
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite():
            errors.append(
                {
                    "field": field,
                    "message": "Must be a valid decimal number",
                    "code": "INVALID_DECIMAL",
                }
            )
            return None
        return value

    @staticmethod
    def _parse_int(raw: str | None, field: str, errors: list[dict[str, str]]) -> int | None:
        if raw is None or not raw.strip():
            return None
        try:
            return int(raw.strip())
        except ValueError:
            errors.append(
                {
                    "field": field,
                    "message": "Must be an integer",
                    "code": "INVALID_INTEGER",
                }
            )
            return None
