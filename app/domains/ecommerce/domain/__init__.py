"""
E-commerce Domain Layer

This module contains:
- Value Objects: status enums (OrderStatus, AddressType, RoleName, ...)
- Domain Services: category tree navigation, default address rules, totals
"""

from app.domains.ecommerce.domain.services import CategoryTree
from app.domains.ecommerce.domain.value_objects import (
    AccountStatus,
    AddressType,
    Gender,
    OrderStatus,
    RoleName,
    Theme,
)

__all__ = [
    # Value Objects
    "AccountStatus",
    "AddressType",
    "Gender",
    "OrderStatus",
    "RoleName",
    "Theme",
    # Services
    "CategoryTree",
]
