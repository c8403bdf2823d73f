"""
Product Service

Shop-scoped product management and catalog queries.
"""

import logging

from app.core.domain import BusinessRuleViolationException, DuplicateEntityException, EntityNotFoundException, to_money
from app.domains.ecommerce.application.dto import AddProductRequest, UpdateProductRequest
from app.domains.ecommerce.application.ports import IProductRepository, IShopRepository
from app.domains.ecommerce.application.services.cart_service import CartService
from app.domains.ecommerce.application.services.category_service import CategoryService
from app.models.db import Product, Shop

logger = logging.getLogger(__name__)


class ProductService:
    """
    Application service for products.

    Product names are unique inside a shop. Categories are resolved by name
    and created on the fly when they don't exist yet.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        shop_repository: IShopRepository,
        category_service: CategoryService,
        cart_service: CartService,
    ):
        self.product_repository = product_repository
        self.shop_repository = shop_repository
        self.category_service = category_service
        self.cart_service = cart_service

    async def add_product(self, request: AddProductRequest, shop_id: int) -> Product:
        """
        Add a product to a shop.

        Raises:
            EntityNotFoundException: if the shop doesn't exist
            DuplicateEntityException: if the shop already sells a product with that name
        """
        shop = await self._get_shop(shop_id)
        if await self.product_repository.get_by_shop_and_name(shop.id, request.name) is not None:
            raise DuplicateEntityException(
                "Product",
                "name",
                request.name,
                message=f"{request.name} already exists in shop '{shop.name}', you may update this product instead!",
            )

        category = await self.category_service.resolve_category(request.category_name, request.parent_category_name)
        product = Product(
            name=request.name,
            brand=request.brand,
            price=to_money(request.price),
            inventory=request.inventory,
            description=request.description,
            category=category,
            shop_id=shop.id,
            images=[],
        )
        product = await self.product_repository.save(product)
        logger.info(f"Added product {product.id} '{product.name}' to shop {shop.id}")
        return product

    async def get_product_by_id(self, product_id: int) -> Product:
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)
        return product

    async def get_product_by_shop_and_id(self, shop_id: int, product_id: int) -> Product:
        product = await self.product_repository.get_by_shop_and_id(shop_id, product_id)
        if product is None:
            raise EntityNotFoundException(
                "Product", product_id, message=f"Product {product_id} not found in shop {shop_id}"
            )
        return product

    async def update_product(self, request: UpdateProductRequest, product_id: int, shop_id: int) -> Product:
        """
        Partially update a product of a shop.

        Raises:
            EntityNotFoundException: if the product is not part of the shop
            DuplicateEntityException: if renamed onto another product of the shop
        """
        product = await self.get_product_by_shop_and_id(shop_id, product_id)

        if request.name is not None and request.name != product.name:
            other = await self.product_repository.get_by_shop_and_name(shop_id, request.name)
            if other is not None and other.id != product.id:
                raise DuplicateEntityException("Product", "name", request.name)
            product.name = request.name
        if request.brand is not None:
            product.brand = request.brand
        if request.price is not None:
            product.price = to_money(request.price)
        if request.inventory is not None:
            product.inventory = request.inventory
        if request.description is not None:
            product.description = request.description
        if request.category_name is not None:
            product.category = await self.category_service.resolve_category(
                request.category_name, request.parent_category_name
            )

        return await self.product_repository.save(product)

    async def delete_product(self, product_id: int, shop_id: int) -> None:
        """
        Delete a product of a shop.

        Raises:
            BusinessRuleViolationException: if the product is part of an order
        """
        product = await self.get_product_by_shop_and_id(shop_id, product_id)
        if await self.product_repository.is_ordered(product.id):
            raise BusinessRuleViolationException(
                "product_has_orders", f"Product {product.id} is part of existing orders and cannot be deleted"
            )
        await self.purge_product(product)

    async def purge_product(self, product: Product) -> None:
        """Remove the product from every cart, then delete it with its images."""
        await self.cart_service.remove_product_from_carts(product.id)
        await self.product_repository.delete(product)

    # ==================== Catalog queries ====================

    async def get_products(
        self,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        shop_name: str | None = None,
    ) -> list[Product]:
        """List products; every given filter must match."""
        return await self.product_repository.find(name=name, brand=brand, category=category, shop_name=shop_name)

    async def count_products_by_brand_and_name(self, brand: str | None, name: str | None) -> int:
        return await self.product_repository.count(name=name, brand=brand)

    async def get_products_by_parent_category(self, category_name: str) -> list[Product]:
        """Products of the named category and of all its sub-categories."""
        category_ids = await self.category_service.get_category_and_descendant_ids(category_name)
        return await self.product_repository.get_by_category_ids(category_ids)

    async def get_products_by_shop_id(self, shop_id: int) -> list[Product]:
        shop = await self._get_shop(shop_id)
        return await self.product_repository.find(shop_id=shop.id)

    async def count_products_by_shop_id(self, shop_id: int) -> int:
        shop = await self._get_shop(shop_id)
        return await self.product_repository.count(shop_id=shop.id)

    async def get_product_by_shop_name_and_product_name(self, shop_name: str, product_name: str) -> Product:
        product = await self.product_repository.get_by_shop_name_and_name(shop_name, product_name)
        if product is None:
            raise EntityNotFoundException(
                "Product", product_name, message=f"Product '{product_name}' not found in shop '{shop_name}'"
            )
        return product

    async def _get_shop(self, shop_id: int) -> Shop:
        shop = await self.shop_repository.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundException("Shop", shop_id)
        return shop
