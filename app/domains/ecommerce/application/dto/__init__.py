"""
Ecommerce Application DTOs

Command and result objects exchanged between the API layer and the
application services.
For update commands a None field means "leave unchanged".
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any

# ==================== User DTOs ====================


@dataclass
class CreateUserRequest:
    first_name: str
    last_name: str
    email: str
    password: str


@dataclass
class UpdateUserRequest:
    first_name: str | None = None
    last_name: str | None = None


@dataclass
class UpdateAccountRequest:
    username: str | None = None
    phone_number: str | None = None
    profile_picture_url: str | None = None
    date_of_birth: date | None = None
    gender: str | None = None
    dashboard_color: str | None = None
    preferred_theme: str | None = None
    preferred_language: str | None = None
    account_status: str | None = None


# ==================== Shop DTOs ====================


@dataclass
class ShopRequest:
    name: str | None = None
    address: str | None = None
    contact_number: str | None = None
    contact_email: str | None = None
    description: str | None = None


@dataclass
class ShopDetails:
    """A shop together with its products and received orders."""

    shop: Any
    products: list[Any] = field(default_factory=list)
    orders: list[Any] = field(default_factory=list)


# ==================== Catalog DTOs ====================


@dataclass
class CategoryRequest:
    name: str | None = None
    parent_name: str | None = None


@dataclass
class AddProductRequest:
    name: str
    brand: str
    price: Decimal
    inventory: int
    category_name: str
    description: str | None = None
    parent_category_name: str | None = None


@dataclass
class UpdateProductRequest:
    name: str | None = None
    brand: str | None = None
    price: Decimal | None = None
    inventory: int | None = None
    description: str | None = None
    category_name: str | None = None
    parent_category_name: str | None = None


@dataclass
class UploadedFile:
    """An uploaded file already read into memory."""

    file_name: str
    content_type: str | None
    content: bytes


# ==================== Address DTOs ====================


@dataclass
class AddressRequest:
    street: str | None = None
    city: str | None = None
    country: str | None = None
    address_type: str | None = None
    house_number: str | None = None
    floor: str | None = None
    state: str | None = None
    zip: str | None = None
    is_default: bool | None = None


__all__ = [
    "AddProductRequest",
    "AddressRequest",
    "CategoryRequest",
    "CreateUserRequest",
    "ShopDetails",
    "ShopRequest",
    "UpdateAccountRequest",
    "UpdateProductRequest",
    "UpdateUserRequest",
    "UploadedFile",
]
