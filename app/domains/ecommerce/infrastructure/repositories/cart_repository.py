"""
Cart Repository Implementation

SQLAlchemy implementation of ICartRepository.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import ICartRepository
from app.models.db import Cart, CartItem

logger = logging.getLogger(__name__)


class SQLAlchemyCartRepository(ICartRepository):
    """
    SQLAlchemy implementation of cart repository.

    Items (and their products) are eager-loaded with the cart, so item
    changes go through the cart's collection and are flushed with it.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, cart_id: int) -> Cart | None:
        return await self.session.get(Cart, cart_id)

    async def get_by_user_id(self, user_id: int) -> Cart | None:
        result = await self.session.execute(select(Cart).where(Cart.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_carts_containing(self, product_id: int) -> list[Cart]:
        """Get every cart that has a line for the product."""
        result = await self.session.execute(
            select(Cart)
            .where(Cart.id.in_(select(CartItem.cart_id).where(CartItem.product_id == product_id)))
            .order_by(Cart.id)
        )
        return list(result.scalars().all())

    async def save(self, cart: Cart) -> Cart:
        self.session.add(cart)
        await self.session.flush()
        return cart

    async def delete(self, cart: Cart) -> None:
        await self.session.delete(cart)
        await self.session.flush()
        logger.info(f"Deleted cart {cart.id}")
