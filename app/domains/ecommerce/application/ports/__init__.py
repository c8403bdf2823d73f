"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing.
"""

from typing import Protocol, runtime_checkable

from app.models.db import (
    Address,
    Cart,
    Category,
    Image,
    Order,
    Product,
    Role,
    Shop,
    User,
    UserAccount,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Interface for user repository."""

    async def get_by_id(self, user_id: int) -> User | None:
        ...

    async def get_by_email(self, email: str) -> User | None:
        ...

    async def exists_by_email(self, email: str) -> bool:
        ...

    async def get_account_by_username(self, username: str) -> UserAccount | None:
        ...

    async def save(self, user: User) -> User:
        ...

    async def delete(self, user: User) -> None:
        ...


@runtime_checkable
class IRoleRepository(Protocol):
    """Interface for role repository."""

    async def get_by_name(self, name: str) -> Role | None:
        ...

    async def save(self, role: Role) -> Role:
        ...


@runtime_checkable
class IShopRepository(Protocol):
    """Interface for shop repository."""

    async def get_by_id(self, shop_id: int) -> Shop | None:
        ...

    async def get_by_name(self, name: str) -> Shop | None:
        ...

    async def get_by_owner_id(self, user_id: int) -> Shop | None:
        ...

    async def get_all(self) -> list[Shop]:
        ...

    async def save(self, shop: Shop) -> Shop:
        ...

    async def delete(self, shop: Shop) -> None:
        ...


@runtime_checkable
class ICategoryRepository(Protocol):
    """Interface for category repository."""

    async def get_by_id(self, category_id: int) -> Category | None:
        ...

    async def get_by_name(self, name: str) -> Category | None:
        ...

    async def get_all(self) -> list[Category]:
        ...

    async def get_children(self, parent_id: int) -> list[Category]:
        ...

    async def get_top_level(self) -> list[Category]:
        ...

    async def has_products(self, category_id: int) -> bool:
        ...

    async def save(self, category: Category) -> Category:
        ...

    async def delete(self, category: Category) -> None:
        ...


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interface for product repository.

    Defines the contract for product data access.
    """

    async def get_by_id(self, product_id: int) -> Product | None:
        ...

    async def get_by_shop_and_id(self, shop_id: int, product_id: int) -> Product | None:
        ...

    async def get_by_shop_and_name(self, shop_id: int, name: str) -> Product | None:
        ...

    async def get_by_shop_name_and_name(self, shop_name: str, name: str) -> Product | None:
        ...

    async def find(
        self,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        shop_name: str | None = None,
        shop_id: int | None = None,
    ) -> list[Product]:
        ...

    async def count(
        self,
        name: str | None = None,
        brand: str | None = None,
        shop_id: int | None = None,
    ) -> int:
        ...

    async def get_by_category_ids(self, category_ids: list[int]) -> list[Product]:
        ...

    async def is_ordered(self, product_id: int) -> bool:
        ...

    async def save(self, product: Product) -> Product:
        ...

    async def delete(self, product: Product) -> None:
        ...


@runtime_checkable
class IImageRepository(Protocol):
    """Interface for product image repository."""

    async def get_by_id(self, image_id: int) -> Image | None:
        ...

    async def get_by_product_id(self, product_id: int) -> list[Image]:
        ...

    async def save(self, image: Image) -> Image:
        ...

    async def delete(self, image: Image) -> None:
        ...


@runtime_checkable
class IAddressRepository(Protocol):
    """Interface for address repository."""

    async def get_by_id(self, address_id: int) -> Address | None:
        ...

    async def find(
        self,
        country: str | None = None,
        city: str | None = None,
        state: str | None = None,
    ) -> list[Address]:
        ...

    async def exists_by_id_and_account(self, address_id: int, account_id: int) -> bool:
        ...

    async def save(self, address: Address) -> Address:
        ...

    async def delete(self, address: Address) -> None:
        ...


@runtime_checkable
class ICartRepository(Protocol):
    """Interface for cart repository."""

    async def get_by_id(self, cart_id: int) -> Cart | None:
        ...

    async def get_by_user_id(self, user_id: int) -> Cart | None:
        ...

    async def get_carts_containing(self, product_id: int) -> list[Cart]:
        ...

    async def save(self, cart: Cart) -> Cart:
        ...

    async def delete(self, cart: Cart) -> None:
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def get_by_id(self, order_id: int) -> Order | None:
        ...

    async def get_by_user_id(self, user_id: int) -> list[Order]:
        ...

    async def get_by_shop_id(self, shop_id: int) -> list[Order]:
        ...

    async def exists_for_user(self, user_id: int) -> bool:
        ...

    async def exists_for_shop(self, shop_id: int) -> bool:
        ...

    async def save(self, order: Order) -> Order:
        ...


@runtime_checkable
class ICloudStorage(Protocol):
    """
    Interface for the cloud asset store used for product images.
    """

    async def upload(self, content: bytes, folder: str | None, public_id: str, overwrite: bool = True) -> dict:
        """Upload a file and return the provider response (secure_url, public_id, ...)"""
        ...

    async def destroy(self, public_id: str) -> None:
        ...


__all__ = [
    "IAddressRepository",
    "ICartRepository",
    "ICategoryRepository",
    "ICloudStorage",
    "IImageRepository",
    "IOrderRepository",
    "IProductRepository",
    "IRoleRepository",
    "IShopRepository",
    "IUserRepository",
]
