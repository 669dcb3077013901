"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.errors import NotFoundError
from storefront.domain.product import Product
from storefront.ports.product_catalog_repository import ProductCatalogRepository


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: str


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product by ID.

    Responsibilities:
    - Delegate to repository for data access
    - Raise NotFoundError if the product doesn't exist (any absent id,
      blank ones included)
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Execute the get product by ID use case.

        Args:
            request: Request containing product_id

        Returns:
            GetProductByIdResponse with the product

        Raises:
            NotFoundError: If no product has the given ID
        """
        product = self._repository.get_by_id(request.product_id)

        if product is None:
            raise NotFoundError(resource="Product", identifier=request.product_id)

        return GetProductByIdResponse(product=product)
