"""
Shop Service

Lifecycle of shops (tenant storefronts). A user owns at most one shop and
gets ROLE_SHOP_OWNER while owning it.
"""

import logging

from app.core.domain import BusinessRuleViolationException, DuplicateEntityException, EntityNotFoundException
from app.domains.ecommerce.application.dto import ShopDetails, ShopRequest
from app.domains.ecommerce.application.ports import (
    IOrderRepository,
    IProductRepository,
    IRoleRepository,
    IShopRepository,
    IUserRepository,
)
from app.domains.ecommerce.application.services.product_service import ProductService
from app.domains.ecommerce.application.services.user_service import ensure_role
from app.domains.ecommerce.domain.value_objects import RoleName
from app.models.db import Order, Shop

logger = logging.getLogger(__name__)


class ShopService:
    """
    Application service for shops.
    """

    def __init__(
        self,
        shop_repository: IShopRepository,
        user_repository: IUserRepository,
        role_repository: IRoleRepository,
        product_repository: IProductRepository,
        order_repository: IOrderRepository,
        product_service: ProductService,
    ):
        self.shop_repository = shop_repository
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.product_repository = product_repository
        self.order_repository = order_repository
        self.product_service = product_service

    async def add_shop(self, request: ShopRequest, user_id: int) -> Shop:
        """
        Open a shop for a user.

        Raises:
            EntityNotFoundException: if the user doesn't exist
            DuplicateEntityException: if the user already owns a shop or the name is taken
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User", user_id)

        if await self.shop_repository.get_by_owner_id(user.id) is not None:
            raise DuplicateEntityException(
                "Shop", "owner_id", user.id, message=f"User already has a shop with userId {user.id}"
            )
        if await self.shop_repository.get_by_name(request.name) is not None:
            raise DuplicateEntityException("Shop", "name", request.name)

        shop = Shop(
            name=request.name,
            address=request.address,
            contact_number=request.contact_number,
            contact_email=request.contact_email,
            description=request.description,
            owner=user,
        )
        if not user.has_role(RoleName.SHOP_OWNER.value):
            user.roles.append(await ensure_role(self.role_repository, RoleName.SHOP_OWNER.value))

        shop = await self.shop_repository.save(shop)
        logger.info(f"User {user.id} opened shop {shop.id} '{shop.name}'")
        return shop

    async def get_all_shops(self) -> list[Shop]:
        return await self.shop_repository.get_all()

    async def get_shop_by_id(self, shop_id: int) -> Shop:
        shop = await self.shop_repository.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundException("Shop", shop_id)
        return shop

    async def get_shop_by_name(self, name: str) -> Shop:
        shop = await self.shop_repository.get_by_name(name)
        if shop is None:
            raise EntityNotFoundException("Shop", name, message=f"Shop '{name}' not found")
        return shop

    async def get_shop_by_user_id(self, user_id: int) -> Shop:
        shop = await self.shop_repository.get_by_owner_id(user_id)
        if shop is None:
            raise EntityNotFoundException("Shop", user_id, message=f"User {user_id} has no shop")
        return shop

    async def update_shop(self, shop_id: int, request: ShopRequest) -> Shop:
        """
        Partially update a shop.

        Raises:
            DuplicateEntityException: if renamed onto another shop's name
        """
        shop = await self.get_shop_by_id(shop_id)

        if request.name is not None and request.name != shop.name:
            other = await self.shop_repository.get_by_name(request.name)
            if other is not None and other.id != shop.id:
                raise DuplicateEntityException("Shop", "name", request.name)
            shop.name = request.name
        for field_name in ("address", "contact_number", "contact_email", "description"):
            value = getattr(request, field_name)
            if value is not None:
                setattr(shop, field_name, value)

        return await self.shop_repository.save(shop)

    async def delete_shop(self, shop_id: int) -> None:
        """
        Close a shop: delete its products and revoke ROLE_SHOP_OWNER from the owner.

        Raises:
            BusinessRuleViolationException: if the shop has received orders
        """
        shop = await self.get_shop_by_id(shop_id)
        if await self.order_repository.exists_for_shop(shop.id):
            raise BusinessRuleViolationException("shop_has_orders", f"Shop {shop.id} has orders and cannot be deleted")

        for product in await self.product_repository.find(shop_id=shop.id):
            await self.product_service.purge_product(product)

        owner = await self.user_repository.get_by_id(shop.owner_id)
        if owner is not None:
            owner.roles = [role for role in owner.roles if role.name != RoleName.SHOP_OWNER.value]

        await self.shop_repository.delete(shop)
        logger.info(f"Shop {shop_id} deleted")

    async def count_products_in_shop(self, shop_id: int) -> int:
        shop = await self.get_shop_by_id(shop_id)
        return await self.product_repository.count(shop_id=shop.id)

    async def get_orders_by_shop_id(self, shop_id: int) -> list[Order]:
        shop = await self.get_shop_by_id(shop_id)
        return await self.order_repository.get_by_shop_id(shop.id)

    async def get_shop_details(self, shop: Shop) -> ShopDetails:
        return ShopDetails(
            shop=shop,
            products=await self.product_repository.find(shop_id=shop.id),
            orders=await self.order_repository.get_by_shop_id(shop.id),
        )
