from __future__ import annotations

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field


class ProductResponseDTO(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    image_url: str = Field(alias="imageUrl")
    in_stock: bool = Field(alias="inStock")
    rating: float
    review_count: int = Field(alias="reviewCount")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "name": "Wireless Bluetooth Headphones",
                "description": "Premium quality wireless headphones with active noise cancellation.",
                "price": 199.99,
                "category": "Electronics",
                "imageUrl": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=500",
                "inStock": True,
                "rating": 4.5,
                "reviewCount": 234,
            }
        },
    )


class PaginatedProductsDTO(BaseModel):
    items: list[ProductResponseDTO]
    total: int
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


class ProductsSearchQueryDTO(BaseModel):
    """Query parameters for searching the product catalog, as received."""

    category: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    in_stock: str | None = None
    search_term: str | None = None
    page: str | None = None
    page_size: str | None = None


def products_search_query(
    category: str | None = Query(
        default=None,
        description="Filter by category (exact match)",
        examples=["Electronics"],
    ),
    min_price: str | None = Query(
        default=None,
        alias="minPrice",
        description="Minimum price (inclusive, decimal)",
        examples=["50"],
    ),
    max_price: str | None = Query(
        default=None,
        alias="maxPrice",
        description="Maximum price (inclusive, decimal)",
        examples=["100"],
    ),
    in_stock: str | None = Query(
        default=None,
        alias="inStock",
        description='Stock filter; "true" keeps in-stock products, any other value out-of-stock ones',
        examples=["true"],
    ),
    search_term: str | None = Query(
        default=None,
        alias="searchTerm",
        description="Case-insensitive substring of name, description or category",
        examples=["wireless"],
    ),
    page: str | None = Query(
        default=None,
        description="1-based page number (default 1)",
        examples=["1"],
    ),
    page_size: str | None = Query(
        default=None,
        alias="pageSize",
        description="Number of products per page (default 10)",
        examples=["10"],
    ),
) -> ProductsSearchQueryDTO:
    """Collect the camelCase query string into a ProductsSearchQueryDTO."""
    return ProductsSearchQueryDTO(
        category=category,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        search_term=search_term,
        page=page,
        page_size=page_size,
    )
