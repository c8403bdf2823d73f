"""
Category Repository Implementation

SQLAlchemy implementation of ICategoryRepository.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import ICategoryRepository
from app.models.db import Category, Product

logger = logging.getLogger(__name__)


class SQLAlchemyCategoryRepository(ICategoryRepository):
    """
    SQLAlchemy implementation of category repository.

    Handles all category data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, category_id: int) -> Category | None:
        """Get category by ID."""
        return await self.session.get(Category, category_id)

    async def get_by_name(self, name: str) -> Category | None:
        """Get category by name."""
        result = await self.session.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Category]:
        """Get all categories ordered by ID."""
        result = await self.session.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def get_children(self, parent_id: int) -> list[Category]:
        """Get direct child categories."""
        result = await self.session.execute(
            select(Category).where(Category.parent_id == parent_id).order_by(Category.id)
        )
        return list(result.scalars().all())

    async def get_top_level(self) -> list[Category]:
        """Get categories without parent."""
        result = await self.session.execute(
            select(Category).where(Category.parent_id.is_(None)).order_by(Category.id)
        )
        return list(result.scalars().all())

    async def has_products(self, category_id: int) -> bool:
        result = await self.session.execute(select(exists().where(Product.category_id == category_id)))
        return bool(result.scalar())

    async def save(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        return category

    async def delete(self, category: Category) -> None:
        await self.session.delete(category)
        await self.session.flush()
        logger.info(f"Deleted category {category.id} ({category.name})")
