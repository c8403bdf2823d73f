"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IOrderRepository
from app.models.db import Order

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Handles all order data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, order_id: int) -> Order | None:
        """Get order by ID."""
        return await self.session.get(Order, order_id)

    async def get_by_user_id(self, user_id: int) -> list[Order]:
        """Get orders placed by a user, newest first."""
        result = await self.session.execute(
            select(Order).where(Order.user_id == user_id).order_by(Order.id.desc())
        )
        return list(result.scalars().all())

    async def get_by_shop_id(self, shop_id: int) -> list[Order]:
        """Get orders received by a shop, newest first."""
        result = await self.session.execute(
            select(Order).where(Order.shop_id == shop_id).order_by(Order.id.desc())
        )
        return list(result.scalars().all())

    async def exists_for_user(self, user_id: int) -> bool:
        result = await self.session.execute(select(exists().where(Order.user_id == user_id)))
        return bool(result.scalar())

    async def exists_for_shop(self, shop_id: int) -> bool:
        result = await self.session.execute(select(exists().where(Order.shop_id == shop_id)))
        return bool(result.scalar())

    async def save(self, order: Order) -> Order:
        """Persist a new or modified order."""
        self.session.add(order)
        await self.session.flush()
        logger.debug(f"Saved order {order.id} ({order.order_status})")
        return order
