"""
Order Service

Checkout and order lifecycle.

Inventory is decremented when the order is placed and restored only when a
PENDING order is cancelled. Status changes follow OrderStatus transitions:
confirm and cancel are dedicated actions from PENDING, the generic status
update moves confirmed orders through fulfilment.
"""

import logging
from datetime import date
from decimal import Decimal

from app.core.domain import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidOperationException,
    ValidationException,
)
from app.domains.ecommerce.application.ports import ICartRepository, IOrderRepository
from app.domains.ecommerce.domain.services import order_total
from app.domains.ecommerce.domain.value_objects import OrderStatus
from app.models.db import Order, OrderItem

logger = logging.getLogger(__name__)


class OrderService:
    """
    Application service for orders.
    """

    def __init__(self, order_repository: IOrderRepository, cart_repository: ICartRepository):
        self.order_repository = order_repository
        self.cart_repository = cart_repository

    async def place_order(self, user_id: int) -> Order:
        """
        Turn the user's cart into a PENDING order.

        Each line keeps the cart's unit price, product inventory is decremented
        and the cart is emptied.

        Raises:
            BusinessRuleViolationException: if the cart is missing or empty
            InsufficientStockException: if a product has less inventory than requested
        """
        cart = await self.cart_repository.get_by_user_id(user_id)
        if cart is None or not cart.items:
            raise BusinessRuleViolationException(
                "empty_cart", "No items in cart found. Add items to cart before placing an order."
            )

        for item in cart.items:
            if item.product.inventory < item.quantity:
                raise InsufficientStockException(item.product.id, item.quantity, item.product.inventory)

        order_items = []
        for item in cart.items:
            item.product.inventory -= item.quantity
            order_items.append(OrderItem(product=item.product, quantity=item.quantity, price=item.unit_price))

        order = Order(
            user_id=user_id,
            shop_id=cart.shop_id,
            order_date=date.today(),
            order_status=OrderStatus.PENDING.value,
            total_amount=order_total(order_items),
            items=order_items,
        )
        order = await self.order_repository.save(order)

        cart.items.clear()
        cart.total_amount = Decimal("0.00")
        await self.cart_repository.save(cart)

        logger.info(f"User {user_id} placed order {order.id} ({order.total_amount}) in shop {order.shop_id}")
        return order

    async def get_order_by_id(self, order_id: int) -> Order:
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return order

    async def get_user_orders(self, user_id: int) -> list[Order]:
        return await self.order_repository.get_by_user_id(user_id)

    async def get_orders_by_shop_id(self, shop_id: int) -> list[Order]:
        return await self.order_repository.get_by_shop_id(shop_id)

    async def confirm_order(self, order_id: int) -> Order:
        order = await self.get_order_by_id(order_id)
        current = OrderStatus(order.order_status)
        if not current.can_be_confirmed():
            raise InvalidOperationException(
                "confirm",
                current.value,
                f"Only pending orders can be confirmed. Current status: {current.value}",
            )
        return await self._apply_status(order, OrderStatus.CONFIRMED)

    async def cancel_order(self, order_id: int) -> Order:
        """Cancel a PENDING order and give its quantities back to inventory."""
        order = await self.get_order_by_id(order_id)
        current = OrderStatus(order.order_status)
        if not current.can_be_cancelled():
            raise InvalidOperationException(
                "cancel",
                current.value,
                f"Only pending orders can be cancelled. Current status: {current.value}",
            )

        for item in order.items:
            item.product.inventory += item.quantity
        return await self._apply_status(order, OrderStatus.CANCELLED)

    async def update_order_status(self, order_id: int, status: str | OrderStatus) -> Order:
        """
        Move a confirmed order through fulfilment.

        Raises:
            ValidationException: on an unknown status
            InvalidOperationException: when the transition is not allowed
        """
        target = self._parse_status(status)
        order = await self.get_order_by_id(order_id)
        current = OrderStatus(order.order_status)

        if target == OrderStatus.PENDING:
            raise InvalidOperationException(
                "update_status", current.value, "Cannot revert order status back to PENDING."
            )
        if current.is_terminal():
            raise InvalidOperationException(
                "update_status", current.value, f"Cannot change status of a {current.value} order."
            )
        if current == OrderStatus.PENDING:
            raise InvalidOperationException(
                "update_status",
                current.value,
                "Pending orders must be confirmed or cancelled before their status can be updated.",
            )
        if target == OrderStatus.CANCELLED:
            raise InvalidOperationException(
                "update_status", current.value, "Only pending orders can be cancelled."
            )
        if not current.can_transition_to(target):
            raise InvalidOperationException(
                "update_status",
                current.value,
                f"Cannot change order status from {current.value} to {target.value}.",
            )
        return await self._apply_status(order, target)

    async def _apply_status(self, order: Order, status: OrderStatus) -> Order:
        previous = order.order_status
        order.order_status = status.value
        order = await self.order_repository.save(order)
        logger.info(f"Order {order.id} status changed: {previous} -> {status.value}")
        return order

    @staticmethod
    def _parse_status(status: str | OrderStatus) -> OrderStatus:
        if isinstance(status, OrderStatus):
            return status
        try:
            return OrderStatus.from_string(status)
        except ValueError as e:
            raise ValidationException(
                f"Invalid order status: {status}. Allowed values: {', '.join(OrderStatus.values())}",
                field="status",
            ) from e
