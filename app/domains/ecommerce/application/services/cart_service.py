"""
Cart Service

Shopping cart management. A cart belongs to one user and only holds products
of a single shop; every mutation keeps line and cart totals consistent.
"""

import logging
from decimal import Decimal

from app.core.domain import BusinessRuleViolationException, EntityNotFoundException, ValidationException
from app.domains.ecommerce.application.ports import ICartRepository, IProductRepository
from app.domains.ecommerce.domain.services import line_total, refresh_cart_total, refresh_item_total
from app.models.db import Cart, CartItem, Product

logger = logging.getLogger(__name__)


def _item_product_id(item: CartItem) -> int:
    # product_id stays None until the new line is flushed
    return item.product_id if item.product_id is not None else item.product.id


def _validate_quantity(quantity: int) -> None:
    if quantity < 1:
        raise ValidationException("Quantity must be at least 1", field="quantity")


class CartService:
    """
    Application service for carts and cart items.
    """

    def __init__(self, cart_repository: ICartRepository, product_repository: IProductRepository):
        self.cart_repository = cart_repository
        self.product_repository = product_repository

    async def get_cart(self, cart_id: int) -> Cart:
        cart = await self.cart_repository.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundException("Cart", cart_id)
        return cart

    async def initialize_new_cart(self, user_id: int) -> Cart:
        """Return the user's cart, creating an empty one if needed."""
        cart = await self.cart_repository.get_by_user_id(user_id)
        if cart is None:
            cart = await self.cart_repository.save(Cart(user_id=user_id, total_amount=Decimal("0.00"), items=[]))
            logger.info(f"Initialized cart {cart.id} for user {user_id}")
        return cart

    async def clear_cart(self, cart_id: int) -> Cart:
        """Remove every item; the cart itself is kept with a zero total."""
        cart = await self.get_cart(cart_id)
        cart.items.clear()
        cart.total_amount = Decimal("0.00")
        return await self.cart_repository.save(cart)

    async def get_total_price(self, cart_id: int) -> Decimal:
        cart = await self.get_cart(cart_id)
        return cart.total_amount

    async def add_item_to_cart(self, user_id: int, product_id: int, quantity: int) -> Cart:
        """
        Add a product to the user's cart.

        An existing line for the product has its quantity increased; a new line
        captures the current product price as unit price.

        Raises:
            BusinessRuleViolationException: if the cart holds products of another shop
        """
        _validate_quantity(quantity)
        product = await self._get_product(product_id)
        cart = await self.initialize_new_cart(user_id)

        if cart.shop_id is not None and cart.shop_id != product.shop_id:
            raise BusinessRuleViolationException(
                "single_shop_cart",
                "Cannot add products from different shops to the same cart.",
                {"cart_shop_id": cart.shop_id, "product_shop_id": product.shop_id},
            )

        item = self._find_item(cart, product.id)
        if item is not None:
            item.quantity += quantity
            refresh_item_total(item)
        else:
            cart.items.append(
                CartItem(
                    product=product,
                    quantity=quantity,
                    unit_price=product.price,
                    total_price=line_total(product.price, quantity),
                )
            )

        refresh_cart_total(cart)
        logger.info(f"Added product {product.id} x{quantity} to cart {cart.id}")
        return await self.cart_repository.save(cart)

    async def update_item_quantity(self, cart_id: int, product_id: int, quantity: int) -> Cart:
        """Set the quantity of a line and refresh its unit price from the product."""
        _validate_quantity(quantity)
        cart = await self.get_cart(cart_id)
        item = self._require_item(cart, product_id)

        item.quantity = quantity
        item.unit_price = item.product.price
        refresh_item_total(item)
        refresh_cart_total(cart)
        return await self.cart_repository.save(cart)

    async def remove_item_from_cart(self, cart_id: int, product_id: int) -> Cart:
        cart = await self.get_cart(cart_id)
        item = self._require_item(cart, product_id)
        cart.items.remove(item)
        refresh_cart_total(cart)
        return await self.cart_repository.save(cart)

    async def remove_product_from_carts(self, product_id: int) -> None:
        """Drop a product from every cart that holds it."""
        for cart in await self.cart_repository.get_carts_containing(product_id):
            for item in [i for i in cart.items if _item_product_id(i) == product_id]:
                cart.items.remove(item)
            refresh_cart_total(cart)
            await self.cart_repository.save(cart)
            logger.info(f"Removed product {product_id} from cart {cart.id}")

    async def _get_product(self, product_id: int) -> Product:
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)
        return product

    @staticmethod
    def _find_item(cart: Cart, product_id: int) -> CartItem | None:
        return next((item for item in cart.items if _item_product_id(item) == product_id), None)

    def _require_item(self, cart: Cart, product_id: int) -> CartItem:
        item = self._find_item(cart, product_id)
        if item is None:
            raise EntityNotFoundException(
                "CartItem", product_id, message=f"Product {product_id} is not in cart {cart.id}"
            )
        return item
