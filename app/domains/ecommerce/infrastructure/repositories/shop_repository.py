"""
Shop Repository Implementation

SQLAlchemy implementation of IShopRepository.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IShopRepository
from app.models.db import Shop

logger = logging.getLogger(__name__)


class SQLAlchemyShopRepository(IShopRepository):
    """
    SQLAlchemy implementation of shop repository.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, shop_id: int) -> Shop | None:
        return await self.session.get(Shop, shop_id)

    async def get_by_name(self, name: str) -> Shop | None:
        result = await self.session.execute(select(Shop).where(Shop.name == name))
        return result.scalar_one_or_none()

    async def get_by_owner_id(self, user_id: int) -> Shop | None:
        result = await self.session.execute(select(Shop).where(Shop.owner_id == user_id))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Shop]:
        result = await self.session.execute(select(Shop).order_by(Shop.id))
        return list(result.scalars().all())

    async def save(self, shop: Shop) -> Shop:
        self.session.add(shop)
        await self.session.flush()
        return shop

    async def delete(self, shop: Shop) -> None:
        await self.session.delete(shop)
        await self.session.flush()
        logger.info(f"Deleted shop {shop.id}")
