"""
E-commerce Domain Services

Domain logic that works on plain objects and doesn't belong to a single entity.
"""

from app.domains.ecommerce.domain.services.address_defaults import (
    addresses_of_type,
    ensure_default,
    make_default,
)
from app.domains.ecommerce.domain.services.cart_pricing import (
    line_total,
    order_total,
    refresh_cart_total,
    refresh_item_total,
)
from app.domains.ecommerce.domain.services.category_tree import CategoryTree

__all__ = [
    "CategoryTree",
    "addresses_of_type",
    "ensure_default",
    "make_default",
    "line_total",
    "order_total",
    "refresh_cart_total",
    "refresh_item_total",
]
