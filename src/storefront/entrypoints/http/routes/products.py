from fastapi import APIRouter, Depends

from storefront.entrypoints.http.dependencies import (
    get_get_product_by_id_use_case,
    get_list_categories_use_case,
    get_search_catalog_use_case,
)
from storefront.entrypoints.http.dtos.products import (
    PaginatedProductsDTO,
    ProductResponseDTO,
    ProductsSearchQueryDTO,
    products_search_query,
)
from storefront.entrypoints.http.envelope import ApiErrorResponse, ApiResponse
from storefront.entrypoints.http.mappers.product_mapper import ProductMapper
from storefront.use_cases.get_product_by_id import GetProductById, GetProductByIdRequest
from storefront.use_cases.list_categories import ListCategories
from storefront.use_cases.search_product_catalog import SearchProductCatalog


router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=ApiResponse[PaginatedProductsDTO],
    summary="Search product catalog",
    description="""
    Search for products with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - category: exact match
    - minPrice/maxPrice: inclusive range
    - inStock: "true" for in-stock products, any other value for out-of-stock ones
    - searchTerm: case-insensitive match on name, description or category

    ## Pagination
    - page is 1-based (default 1)
    - Default pageSize: 10; empty page/pageSize fall back to the defaults
    - Pages beyond the last one return no items

    ## Example
    ```
    GET /api/products?category=Electronics&maxPrice=100&page=1&pageSize=12
    ```
    """,
    responses={
        422: {"model": ApiErrorResponse, "description": "Validation error"},
        500: {"model": ApiErrorResponse, "description": "Unexpected error"},
    },
)
def get_products(
    query: ProductsSearchQueryDTO = Depends(products_search_query),
    use_case: SearchProductCatalog = Depends(get_search_catalog_use_case),
) -> ApiResponse[PaginatedProductsDTO]:
    """Search products endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ProductMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ApiResponse[PaginatedProductsDTO](data=ProductMapper.to_paginated_response(result))


@router.get(
    "/categories",
    response_model=ApiResponse[list[str]],
    summary="List product categories",
    description="Distinct product categories sorted alphabetically.",
    responses={500: {"model": ApiErrorResponse, "description": "Unexpected error"}},
)
def get_categories(
    use_case: ListCategories = Depends(get_list_categories_use_case),
) -> ApiResponse[list[str]]:
    result = use_case.execute()
    return ApiResponse[list[str]](data=result.categories)


@router.get(
    "/{product_id}",
    response_model=ApiResponse[ProductResponseDTO],
    summary="Get product by ID",
    responses={
        404: {"model": ApiErrorResponse, "description": "Product not found"},
        500: {"model": ApiErrorResponse, "description": "Unexpected error"},
    },
)
def get_product(
    product_id: str,
    use_case: GetProductById = Depends(get_get_product_by_id_use_case),
) -> ApiResponse[ProductResponseDTO]:
    result = use_case.execute(GetProductByIdRequest(product_id=product_id))
    return ApiResponse[ProductResponseDTO](data=ProductMapper.to_product_response(result.product))
