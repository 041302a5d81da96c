"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, adding and deleting products.

==============================================================================
"""

from fastapi import APIRouter, Depends, status

from catalog_app.core.dependencies import get_product_service
from catalog_app.schemas.common import MessageResponse
from catalog_app.schemas.product import (
    ProductCreate,
    ProductCreatedResponse,
    ProductDetail,
    ProductListResponse,
)
from catalog_app.services.product_service import ProductService


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, service: ProductService):
        self._service = service

    async def list_products(self) -> ProductListResponse:
        """List all products, newest first."""
        products = await self._service.list_all()

        return ProductListResponse(
            total=len(products),
            products=[ProductDetail.model_validate(p) for p in products]
        )

    async def add_product(self, data: ProductCreate) -> ProductCreatedResponse:
        """Add a product."""
        product_id = await self._service.add(data.name, data.price)
        return ProductCreatedResponse(id=product_id)

    async def delete_product(self, product_id: str) -> MessageResponse:
        """Delete a product; unknown ids succeed as well."""
        await self._service.delete(product_id)
        return MessageResponse(message=f"Product {product_id} deleted")


@router.get("", response_model=ProductListResponse)
async def list_products(service: ProductService = Depends(get_product_service)):
    """List all products ordered by creation time, newest first."""
    controller = ProductController(service)
    return await controller.list_products()


@router.post(
    "",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED
)
async def add_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """Add a product and return its id."""
    controller = ProductController(service)
    return await controller.add_product(data)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product by id."""
    controller = ProductController(service)
    return await controller.delete_product(product_id)
