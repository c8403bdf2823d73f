"""
Ecommerce Application Services

Orchestrate repositories and domain rules for each e-commerce aggregate.
"""

from app.domains.ecommerce.application.services.address_service import AddressService
from app.domains.ecommerce.application.services.cart_service import CartService
from app.domains.ecommerce.application.services.category_service import CategoryService
from app.domains.ecommerce.application.services.image_service import ImageService
from app.domains.ecommerce.application.services.order_service import OrderService
from app.domains.ecommerce.application.services.product_service import ProductService
from app.domains.ecommerce.application.services.shop_service import ShopService
from app.domains.ecommerce.application.services.user_service import UserService

__all__ = [
    "AddressService",
    "CartService",
    "CategoryService",
    "ImageService",
    "OrderService",
    "ProductService",
    "ShopService",
    "UserService",
]
