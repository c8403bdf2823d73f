"""
Cart and order totals.

Line total = unit price x quantity, document total = sum of line totals,
all quantized to cents.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from app.core.domain import to_money


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return to_money(to_money(unit_price) * quantity)


def refresh_item_total(item: Any) -> None:
    item.total_price = line_total(item.unit_price, item.quantity)


def refresh_cart_total(cart: Any) -> None:
    cart.total_amount = to_money(sum((item.total_price for item in cart.items), Decimal("0")))


def order_total(items: Iterable[Any]) -> Decimal:
    return to_money(sum((line_total(item.price, item.quantity) for item in items), Decimal("0")))
