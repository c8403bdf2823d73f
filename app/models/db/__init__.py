"""
Database models package - Organized by aggregate
"""

from .address import Address
from .base import Base, TimestampMixin
from .cart import Cart, CartItem
from .catalog import Category, Image, Product
from .orders import Order, OrderItem
from .shop import Shop
from .user import Role, User, UserAccount, user_roles

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # Users
    "Role",
    "User",
    "UserAccount",
    "user_roles",
    "Address",
    # Shops & catalog
    "Shop",
    "Category",
    "Product",
    "Image",
    # Carts & orders
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
]
