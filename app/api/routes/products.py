"""
Product catalog endpoints

Catalog reads are public; writes are limited to the shop owner or an admin.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import ensure_shop_owner_or_admin, get_current_user
from app.domains.ecommerce.api.dependencies import get_product_service, get_shop_service
from app.domains.ecommerce.api.schemas import (
    CountResponse,
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from app.domains.ecommerce.application.dto import AddProductRequest, UpdateProductRequest
from app.domains.ecommerce.application.services import ProductService, ShopService
from app.models.db import User

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def get_products(
    name: str | None = Query(None, description="Nombre exacto del producto"),
    brand: str | None = Query(None, description="Marca"),
    category: str | None = Query(None, description="Nombre de la categoría"),
    shop_name: str | None = Query(None, description="Nombre de la tienda"),
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    """
    List products. Any combination of filters may be given; all of them must match.
    """
    return await service.get_products(name=name, brand=brand, category=category, shop_name=shop_name)


@router.get("/count", response_model=CountResponse)
async def count_products_by_brand_and_name(
    brand: str | None = Query(None),
    name: str | None = Query(None),
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return {"count": await service.count_products_by_brand_and_name(brand, name)}


@router.get("/by-parent-category", response_model=list[ProductResponse])
async def get_products_by_parent_category(
    name: str = Query(..., min_length=1),
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    """Products of a category and of every sub-category below it."""
    return await service.get_products_by_parent_category(name)


@router.get("/by-shop-and-name", response_model=ProductResponse)
async def get_product_by_shop_name_and_product_name(
    shop_name: str = Query(..., min_length=1),
    product_name: str = Query(..., min_length=1),
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.get_product_by_shop_name_and_product_name(shop_name, product_name)


@router.get("/shop/{shop_id}", response_model=list[ProductResponse])
async def get_products_by_shop_id(
    shop_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.get_products_by_shop_id(shop_id)


@router.get("/shop/{shop_id}/count", response_model=CountResponse)
async def count_products_by_shop_id(
    shop_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return {"count": await service.count_products_by_shop_id(shop_id)}


@router.post("/shop/{shop_id}", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    shop_id: int,
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service),  # noqa: B008
    shop_service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Add a product; its category (and optional parent) is created when missing."""
    ensure_shop_owner_or_admin(current_user, await shop_service.get_shop_by_id(shop_id), "add_product")
    return await service.add_product(AddProductRequest(**request.model_dump()), shop_id)


@router.get("/shop/{shop_id}/{product_id}", response_model=ProductResponse)
async def get_product_by_shop_and_id(
    shop_id: int,
    product_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    return await service.get_product_by_shop_and_id(shop_id, product_id)


@router.put("/shop/{shop_id}/{product_id}", response_model=ProductResponse)
async def update_product(
    shop_id: int,
    product_id: int,
    request: ProductUpdateRequest,
    service: ProductService = Depends(get_product_service),  # noqa: B008
    shop_service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_shop_owner_or_admin(current_user, await shop_service.get_shop_by_id(shop_id), "update_product")
    return await service.update_product(UpdateProductRequest(**request.model_dump()), product_id, shop_id)


@router.delete("/shop/{shop_id}/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    shop_id: int,
    product_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
    shop_service: ShopService = Depends(get_shop_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Delete a product. Products that appear in orders are kept."""
    ensure_shop_owner_or_admin(current_user, await shop_service.get_shop_by_id(shop_id), "delete_product")
    await service.delete_product(product_id, shop_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),  # noqa: B008
):
    """Get product by ID."""
    return await service.get_product_by_id(product_id)
