"""
E-commerce API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import date
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, EmailStr, Field

from app.domains.ecommerce.application.dto import ShopDetails

# ==================== Shared ====================


class CountResponse(BaseModel):
    count: int


class ExistsResponse(BaseModel):
    exists: bool


# ==================== Auth ====================


class LoginRequest(BaseModel):
    """Schema for JSON login request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


# ==================== Users ====================


class UserCreateRequest(BaseModel):
    """User registration request schema."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserUpdateRequest(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)


class UserResponse(BaseModel):
    """User response schema."""

    id: int
    first_name: str
    last_name: str
    email: str
    # ORM users expose role names through User.role_names
    roles: list[str] = Field(default_factory=list, validation_alias=AliasChoices("role_names", "roles"))
    shop_id: int | None = None

    class Config:
        from_attributes = True


class AccountUpdateRequest(BaseModel):
    username: str | None = Field(default=None, min_length=3, max_length=50)
    phone_number: str | None = Field(default=None, max_length=30)
    profile_picture_url: str | None = Field(default=None, max_length=500)
    date_of_birth: date | None = None
    gender: str | None = None
    dashboard_color: str | None = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    preferred_theme: str | None = None
    preferred_language: str | None = Field(default=None, max_length=10)
    account_status: str | None = None


class AccountResponse(BaseModel):
    """User account (profile) response schema."""

    id: int
    user_id: int
    username: str | None = None
    phone_number: str | None = None
    profile_picture_url: str | None = None
    date_of_birth: date | None = None
    age: int = 0
    gender: str | None = None
    dashboard_color: str
    preferred_theme: str
    preferred_language: str
    account_status: str

    class Config:
        from_attributes = True


# ==================== Categories ====================


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    parent_name: str | None = Field(default=None, max_length=100)


class CategoryUpdateRequest(BaseModel):
    """An empty parent_name moves the category to the top level."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    parent_name: str | None = Field(default=None, max_length=100)


class CategoryResponse(BaseModel):
    """Category response schema."""

    id: int
    name: str
    parent_id: int | None = None

    class Config:
        from_attributes = True


# ==================== Products & Images ====================


class ImageResponse(BaseModel):
    id: int
    file_name: str
    image_url: str

    class Config:
        from_attributes = True


class ProductCreateRequest(BaseModel):
    """Product creation request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=0, decimal_places=2)
    inventory: int = Field(..., ge=0)
    description: str | None = None
    category_name: str = Field(..., min_length=1, max_length=100)
    parent_category_name: str | None = Field(default=None, max_length=100)


class ProductUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    brand: str | None = Field(default=None, min_length=1, max_length=100)
    price: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    inventory: int | None = Field(default=None, ge=0)
    description: str | None = None
    category_name: str | None = Field(default=None, min_length=1, max_length=100)
    parent_category_name: str | None = Field(default=None, max_length=100)


class ProductResponse(BaseModel):
    """Product response schema."""

    id: int
    name: str
    brand: str
    price: Decimal
    inventory: int
    description: str | None = None
    category: CategoryResponse | None = None
    shop_id: int
    images: list[ImageResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


# ==================== Orders ====================


class OrderItemResponse(BaseModel):
    product_id: int
    product_name: str | None = None
    product_brand: str | None = None
    quantity: int
    price: Decimal

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """Order response schema."""

    id: int
    user_id: int
    shop_id: int
    order_date: date
    total_amount: Decimal
    order_status: str
    items: list[OrderItemResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


# ==================== Shops ====================


class ShopCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    address: str | None = Field(default=None, max_length=255)
    contact_number: str | None = Field(default=None, max_length=30)
    contact_email: EmailStr | None = None
    description: str | None = None


class ShopUpdateRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=150)
    address: str | None = Field(default=None, max_length=255)
    contact_number: str | None = Field(default=None, max_length=30)
    contact_email: EmailStr | None = None
    description: str | None = None


class ShopResponse(BaseModel):
    """Shop response schema with its products and received orders."""

    id: int
    name: str
    address: str | None = None
    contact_number: str | None = None
    contact_email: str | None = None
    description: str | None = None
    owner_id: int
    products: list[ProductResponse] = Field(default_factory=list)
    orders: list[OrderResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True

    @classmethod
    def from_details(cls, details: ShopDetails) -> "ShopResponse":
        response = cls.model_validate(details.shop)
        response.products = [ProductResponse.model_validate(product) for product in details.products]
        response.orders = [OrderResponse.model_validate(order) for order in details.orders]
        return response


# ==================== Addresses ====================


class AddressCreateRequest(BaseModel):
    """address_type: SHIPPING, BILLING or BOTH (case-insensitive)."""

    street: str = Field(..., min_length=1, max_length=255)
    house_number: str | None = Field(default=None, max_length=20)
    floor: str | None = Field(default=None, max_length=20)
    city: str = Field(..., min_length=1, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip: str | None = Field(default=None, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)
    address_type: str | None = None
    is_default: bool = False


class AddressUpdateRequest(BaseModel):
    street: str | None = Field(default=None, min_length=1, max_length=255)
    house_number: str | None = Field(default=None, max_length=20)
    floor: str | None = Field(default=None, max_length=20)
    city: str | None = Field(default=None, min_length=1, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    address_type: str | None = None
    is_default: bool | None = None


class AddressResponse(BaseModel):
    """Address response schema."""

    id: int
    street: str
    house_number: str | None = None
    floor: str | None = None
    city: str
    state: str | None = None
    zip: str | None = None
    country: str
    address_type: str
    is_default: bool
    user_account_id: int

    class Config:
        from_attributes = True


# ==================== Carts ====================


class CartItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(default=1, ge=1)


class CartItemResponse(BaseModel):
    id: int
    product_id: int
    product_name: str | None = None
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True


class CartResponse(BaseModel):
    """Cart response schema."""

    id: int
    user_id: int
    total_amount: Decimal
    items: list[CartItemResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class CartTotalResponse(BaseModel):
    cart_id: int
    total_price: Decimal


__all__ = [
    "AccountResponse",
    "AccountUpdateRequest",
    "AddressCreateRequest",
    "AddressResponse",
    "AddressUpdateRequest",
    "CartItemRequest",
    "CartItemResponse",
    "CartResponse",
    "CartTotalResponse",
    "CategoryCreateRequest",
    "CategoryResponse",
    "CategoryUpdateRequest",
    "CountResponse",
    "ExistsResponse",
    "ImageResponse",
    "LoginRequest",
    "OrderItemResponse",
    "OrderResponse",
    "ProductCreateRequest",
    "ProductResponse",
    "ProductUpdateRequest",
    "ShopCreateRequest",
    "ShopResponse",
    "ShopUpdateRequest",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
