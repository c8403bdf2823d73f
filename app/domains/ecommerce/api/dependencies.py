"""
E-commerce API Dependencies

FastAPI dependencies that build the application services for a request.
All of them share the request's AsyncSession, so one request is one
transaction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_token_service
from app.config.settings import Settings, get_settings
from app.database.async_db import get_async_db
from app.domains.ecommerce.application.ports import ICloudStorage
from app.domains.ecommerce.application.services import (
    AddressService,
    CartService,
    CategoryService,
    ImageService,
    OrderService,
    ProductService,
    ShopService,
    UserService,
)
from app.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyAddressRepository,
    SQLAlchemyCartRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyImageRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyRoleRepository,
    SQLAlchemyShopRepository,
    SQLAlchemyUserRepository,
)
from app.domains.ecommerce.infrastructure.services import CloudinaryStorage
from app.services.token_service import TokenService


def get_cloud_storage() -> ICloudStorage:
    """Get the cloud storage adapter (overridden in tests)."""
    return CloudinaryStorage()


def get_user_service(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
) -> UserService:
    return UserService(
        user_repository=SQLAlchemyUserRepository(db),
        role_repository=SQLAlchemyRoleRepository(db),
        cart_repository=SQLAlchemyCartRepository(db),
        order_repository=SQLAlchemyOrderRepository(db),
        token_service=token_service,
    )


def get_category_service(db: AsyncSession = Depends(get_async_db)) -> CategoryService:  # noqa: B008
    return CategoryService(SQLAlchemyCategoryRepository(db))


def get_cart_service(db: AsyncSession = Depends(get_async_db)) -> CartService:  # noqa: B008
    return CartService(SQLAlchemyCartRepository(db), SQLAlchemyProductRepository(db))


def get_product_service(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    category_service: CategoryService = Depends(get_category_service),  # noqa: B008
    cart_service: CartService = Depends(get_cart_service),  # noqa: B008
) -> ProductService:
    return ProductService(
        product_repository=SQLAlchemyProductRepository(db),
        shop_repository=SQLAlchemyShopRepository(db),
        category_service=category_service,
        cart_service=cart_service,
    )


def get_shop_service(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    product_service: ProductService = Depends(get_product_service),  # noqa: B008
) -> ShopService:
    return ShopService(
        shop_repository=SQLAlchemyShopRepository(db),
        user_repository=SQLAlchemyUserRepository(db),
        role_repository=SQLAlchemyRoleRepository(db),
        product_repository=SQLAlchemyProductRepository(db),
        order_repository=SQLAlchemyOrderRepository(db),
        product_service=product_service,
    )


def get_address_service(db: AsyncSession = Depends(get_async_db)) -> AddressService:  # noqa: B008
    return AddressService(SQLAlchemyAddressRepository(db), SQLAlchemyUserRepository(db))


def get_order_service(db: AsyncSession = Depends(get_async_db)) -> OrderService:  # noqa: B008
    return OrderService(SQLAlchemyOrderRepository(db), SQLAlchemyCartRepository(db))


def get_image_service(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    cloud_storage: ICloudStorage = Depends(get_cloud_storage),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> ImageService:
    return ImageService(
        image_repository=SQLAlchemyImageRepository(db),
        product_repository=SQLAlchemyProductRepository(db),
        cloud_storage=cloud_storage,
        settings=settings,
    )


__all__ = [
    "get_address_service",
    "get_cart_service",
    "get_category_service",
    "get_cloud_storage",
    "get_image_service",
    "get_order_service",
    "get_product_service",
    "get_shop_service",
    "get_user_service",
]
