"""
Unit Tests for CartService
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from app.core.domain import BusinessRuleViolationException, EntityNotFoundException, ValidationException
from app.domains.ecommerce.application.services import CartService
from app.models.db import Cart, CartItem, Product


def make_product(product_id: int, price: str = "10.00", shop_id: int = 1, inventory: int = 20) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        brand="Acme",
        price=Decimal(price),
        inventory=inventory,
        shop_id=shop_id,
    )


@pytest.fixture
def products():
    return {
        1: make_product(1, "10.00"),
        2: make_product(2, "2.50"),
        3: make_product(3, "99.99", shop_id=2),
    }


@pytest.fixture
def mock_cart_repository():
    repo = AsyncMock()
    repo.get_by_user_id = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=lambda cart: cart)
    return repo


@pytest.fixture
def mock_product_repository(products):
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(side_effect=lambda product_id: products.get(product_id))
    return repo


@pytest.fixture
def service(mock_cart_repository, mock_product_repository):
    return CartService(mock_cart_repository, mock_product_repository)


class TestInitializeCart:
    @pytest.mark.asyncio
    async def test_creates_empty_cart(self, service, mock_cart_repository):
        cart = await service.initialize_new_cart(7)

        assert cart.user_id == 7
        assert cart.total_amount == Decimal("0.00")
        assert cart.items == []
        mock_cart_repository.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_returns_existing_cart(self, service, mock_cart_repository):
        existing = Cart(id=4, user_id=7, total_amount=Decimal("12.00"), items=[])
        mock_cart_repository.get_by_user_id.return_value = existing

        assert await service.initialize_new_cart(7) is existing
        mock_cart_repository.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_cart(self, service, mock_cart_repository):
        mock_cart_repository.get_by_id = AsyncMock(return_value=None)
        with pytest.raises(EntityNotFoundException):
            await service.get_cart(4)


class TestAddItemToCart:
    @pytest.mark.asyncio
    async def test_creates_cart_and_line(self, service, mock_cart_repository):
        cart = await service.add_item_to_cart(user_id=7, product_id=1, quantity=3)

        assert cart.user_id == 7
        assert len(cart.items) == 1
        assert cart.items[0].unit_price == Decimal("10.00")
        assert cart.items[0].total_price == Decimal("30.00")
        assert cart.total_amount == Decimal("30.00")
        assert mock_cart_repository.save.await_count == 2  # initialize + add

    @pytest.mark.asyncio
    async def test_existing_line_is_incremented(self, service, mock_cart_repository, products):
        existing = Cart(id=5, user_id=7, total_amount=Decimal("0.00"), items=[])
        mock_cart_repository.get_by_user_id.return_value = existing

        await service.add_item_to_cart(7, 1, 1)
        await service.add_item_to_cart(7, 2, 2)
        cart = await service.add_item_to_cart(7, 1, 2)

        assert len(cart.items) == 2
        line = next(item for item in cart.items if item.product is products[1])
        assert line.quantity == 3
        assert line.total_price == Decimal("30.00")
        assert cart.total_amount == Decimal("35.00")

    @pytest.mark.asyncio
    async def test_products_of_another_shop_are_rejected(self, service, mock_cart_repository, products):
        cart = Cart(id=5, user_id=7, total_amount=Decimal("10.00"), items=[])
        cart.items.append(
            CartItem(product=products[1], quantity=1, unit_price=Decimal("10.00"), total_price=Decimal("10.00"))
        )
        mock_cart_repository.get_by_user_id.return_value = cart

        with pytest.raises(BusinessRuleViolationException) as exc_info:
            await service.add_item_to_cart(7, 3, 1)

        assert exc_info.value.rule == "single_shop_cart"
        assert len(cart.items) == 1

    @pytest.mark.asyncio
    async def test_unknown_product(self, service):
        with pytest.raises(EntityNotFoundException):
            await service.add_item_to_cart(7, 404, 1)

    @pytest.mark.asyncio
    async def test_quantity_must_be_positive(self, service, mock_product_repository):
        with pytest.raises(ValidationException):
            await service.add_item_to_cart(7, 1, 0)
        mock_product_repository.get_by_id.assert_not_awaited()


class TestCartLines:
    @pytest.fixture
    def cart(self, products, mock_cart_repository):
        cart = Cart(id=5, user_id=7, total_amount=Decimal("0.00"), items=[])
        for product, quantity in ((products[1], 2), (products[2], 4)):
            cart.items.append(
                CartItem(
                    product=product,
                    quantity=quantity,
                    unit_price=product.price,
                    total_price=product.price * quantity,
                )
            )
        cart.total_amount = Decimal("30.00")
        mock_cart_repository.get_by_id = AsyncMock(return_value=cart)
        return cart

    @pytest.mark.asyncio
    async def test_update_quantity_refreshes_price(self, service, cart, products):
        products[1].price = Decimal("12.00")

        await service.update_item_quantity(5, 1, 5)

        line = cart.items[0]
        assert line.quantity == 5
        assert line.unit_price == Decimal("12.00")
        assert line.total_price == Decimal("60.00")
        assert cart.total_amount == Decimal("70.00")

    @pytest.mark.asyncio
    async def test_remove_item(self, service, cart):
        await service.remove_item_from_cart(5, 2)
        assert len(cart.items) == 1
        assert cart.total_amount == Decimal("20.00")

    @pytest.mark.asyncio
    async def test_missing_line(self, service, cart):
        with pytest.raises(EntityNotFoundException):
            await service.remove_item_from_cart(5, 3)

    @pytest.mark.asyncio
    async def test_clear_cart(self, service, cart):
        cleared = await service.clear_cart(5)
        assert cleared.items == []
        assert cleared.total_amount == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_total_price(self, service, cart):
        assert await service.get_total_price(5) == Decimal("30.00")

    @pytest.mark.asyncio
    async def test_remove_product_from_all_carts(self, service, cart, mock_cart_repository):
        mock_cart_repository.get_carts_containing = AsyncMock(return_value=[cart])

        await service.remove_product_from_carts(1)

        assert [item.product.id for item in cart.items] == [2]
        assert cart.total_amount == Decimal("10.00")


@pytest.mark.asyncio
async def test_unknown_cart(service, mock_cart_repository):
    mock_cart_repository.get_by_id = AsyncMock(return_value=None)
    with pytest.raises(EntityNotFoundException):
        await service.get_cart(99)
