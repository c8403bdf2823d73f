"""
User account value objects: roles and profile preferences
"""

from app.core.domain import StatusEnum


class RoleName(StatusEnum):
    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"
    SHOP_OWNER = "ROLE_SHOP_OWNER"


class Gender(StatusEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class Theme(StatusEnum):
    LIGHT = "LIGHT"
    DARK = "DARK"


class AccountStatus(StatusEnum):
    """Lifecycle of a user account. New accounts start as PENDING."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    DEACTIVATED = "DEACTIVATED"
