"""
Unit Tests for OrderService

Checkout, inventory bookkeeping and order status transitions.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.core.domain import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidOperationException,
    ValidationException,
)
from app.domains.ecommerce.application.services import OrderService
from app.domains.ecommerce.domain.value_objects import OrderStatus
from app.models.db import Cart, CartItem, Order, OrderItem, Product


@pytest.fixture
def laptop():
    return Product(id=1, name="Laptop", brand="Dell", price=Decimal("1000.00"), inventory=5, shop_id=3)


@pytest.fixture
def mouse():
    return Product(id=2, name="Mouse", brand="Logitech", price=Decimal("25.50"), inventory=10, shop_id=3)


@pytest.fixture
def cart(laptop, mouse):
    cart = Cart(id=1, user_id=9, total_amount=Decimal("0.00"), items=[])
    cart.items.append(
        CartItem(product=laptop, quantity=2, unit_price=Decimal("950.00"), total_price=Decimal("1900.00"))
    )
    cart.items.append(
        CartItem(product=mouse, quantity=4, unit_price=Decimal("25.50"), total_price=Decimal("102.00"))
    )
    cart.total_amount = Decimal("2002.00")
    return cart


@pytest.fixture
def mock_order_repository():
    repo = AsyncMock()
    repo.save = AsyncMock(side_effect=lambda order: order)
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_cart_repository(cart):
    repo = AsyncMock()
    repo.get_by_user_id = AsyncMock(return_value=cart)
    repo.save = AsyncMock(side_effect=lambda c: c)
    return repo


@pytest.fixture
def service(mock_order_repository, mock_cart_repository):
    return OrderService(mock_order_repository, mock_cart_repository)


def make_order(status: OrderStatus, product: Product, quantity: int = 2) -> Order:
    order = Order(
        id=50,
        user_id=9,
        shop_id=3,
        order_date=date.today(),
        total_amount=Decimal("100.00"),
        order_status=status.value,
        items=[],
    )
    order.items.append(OrderItem(product=product, quantity=quantity, price=product.price))
    return order


class TestPlaceOrder:
    @pytest.mark.asyncio
    async def test_cart_becomes_pending_order(self, service, cart, laptop, mouse):
        order = await service.place_order(9)

        assert order.order_status == OrderStatus.PENDING.value
        assert order.user_id == 9
        assert order.shop_id == 3
        # Order lines keep the price captured in the cart
        assert [item.price for item in order.items] == [Decimal("950.00"), Decimal("25.50")]
        assert order.total_amount == Decimal("2002.00")
        assert laptop.inventory == 3
        assert mouse.inventory == 6
        assert cart.items == []
        assert cart.total_amount == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_empty_cart(self, service, cart, mock_order_repository):
        cart.items.clear()
        with pytest.raises(BusinessRuleViolationException):
            await service.place_order(9)
        mock_order_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_cart(self, service, mock_cart_repository):
        mock_cart_repository.get_by_user_id.return_value = None
        with pytest.raises(BusinessRuleViolationException):
            await service.place_order(9)

    @pytest.mark.asyncio
    async def test_insufficient_stock_leaves_inventory_untouched(self, service, laptop, mouse):
        mouse.inventory = 3

        with pytest.raises(InsufficientStockException) as exc_info:
            await service.place_order(9)

        assert exc_info.value.product_id == 2
        assert laptop.inventory == 5
        assert mouse.inventory == 3


class TestOrderLifecycle:
    @pytest.mark.asyncio
    async def test_confirm_pending(self, service, mock_order_repository, laptop):
        mock_order_repository.get_by_id.return_value = make_order(OrderStatus.PENDING, laptop)
        order = await service.confirm_order(50)
        assert order.order_status == OrderStatus.CONFIRMED.value

    @pytest.mark.asyncio
    async def test_confirm_twice_fails(self, service, mock_order_repository, laptop):
        mock_order_repository.get_by_id.return_value = make_order(OrderStatus.CONFIRMED, laptop)
        with pytest.raises(InvalidOperationException):
            await service.confirm_order(50)

    @pytest.mark.asyncio
    async def test_cancel_restocks_inventory(self, service, mock_order_repository, laptop):
        mock_order_repository.get_by_id.return_value = make_order(OrderStatus.PENDING, laptop, quantity=2)

        order = await service.cancel_order(50)

        assert order.order_status == OrderStatus.CANCELLED.value
        assert laptop.inventory == 7

    @pytest.mark.asyncio
    async def test_cancel_after_confirmation_fails(self, service, mock_order_repository, laptop):
        mock_order_repository.get_by_id.return_value = make_order(OrderStatus.CONFIRMED, laptop)
        with pytest.raises(InvalidOperationException):
            await service.cancel_order(50)
        assert laptop.inventory == 5

    @pytest.mark.asyncio
    async def test_unknown_order(self, service):
        with pytest.raises(EntityNotFoundException):
            await service.get_order_by_id(404)


class TestUpdateOrderStatus:
    @pytest.mark.asyncio
    async def test_confirmed_order_moves_through_fulfilment(self, service, mock_order_repository, laptop):
        order = make_order(OrderStatus.CONFIRMED, laptop)
        mock_order_repository.get_by_id.return_value = order

        for status in ("processing", "SHIPPED", "in_transit", "DELIVERED"):
            await service.update_order_status(50, status)

        assert order.order_status == OrderStatus.DELIVERED.value

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "current,target",
        [
            (OrderStatus.PENDING, "SHIPPED"),
            (OrderStatus.CONFIRMED, "PENDING"),
            (OrderStatus.CONFIRMED, "CANCELLED"),
            (OrderStatus.DELIVERED, "SHIPPED"),
            (OrderStatus.CANCELLED, "PROCESSING"),
        ],
    )
    async def test_rejected_transitions(self, service, mock_order_repository, laptop, current, target):
        mock_order_repository.get_by_id.return_value = make_order(current, laptop)
        with pytest.raises(InvalidOperationException):
            await service.update_order_status(50, target)
        mock_order_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_status(self, service, mock_order_repository, laptop):
        mock_order_repository.get_by_id.return_value = make_order(OrderStatus.CONFIRMED, laptop)
        with pytest.raises(ValidationException) as exc_info:
            await service.update_order_status(50, "LOST")
        assert exc_info.value.field == "status"
