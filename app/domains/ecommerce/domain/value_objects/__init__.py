"""
E-commerce Domain Value Objects

Immutable value objects for the e-commerce domain.
"""

from app.domains.ecommerce.domain.value_objects.account import AccountStatus, Gender, RoleName, Theme
from app.domains.ecommerce.domain.value_objects.address_type import AddressType
from app.domains.ecommerce.domain.value_objects.order_status import OrderStatus

__all__ = [
    "AccountStatus",
    "AddressType",
    "Gender",
    "OrderStatus",
    "RoleName",
    "Theme",
]
