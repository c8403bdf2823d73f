"""
E-commerce Infrastructure Repositories

SQLAlchemy implementations of the application ports.
"""

from .address_repository import SQLAlchemyAddressRepository
from .cart_repository import SQLAlchemyCartRepository
from .category_repository import SQLAlchemyCategoryRepository
from .image_repository import SQLAlchemyImageRepository
from .order_repository import SQLAlchemyOrderRepository
from .product_repository import SQLAlchemyProductRepository
from .shop_repository import SQLAlchemyShopRepository
from .user_repository import SQLAlchemyRoleRepository, SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyAddressRepository",
    "SQLAlchemyCartRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyImageRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyRoleRepository",
    "SQLAlchemyShopRepository",
    "SQLAlchemyUserRepository",
]
