"""
Product Repository Implementation

SQLAlchemy implementation of IProductRepository.
"""

import logging

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IProductRepository
from app.models.db import Category, OrderItem, Product, Shop

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(IProductRepository):
    """
    SQLAlchemy implementation of product repository.

    Text filters (name, brand, category, shop name) match case-insensitively.
    Category and images are eager-loaded by the model mapping.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID."""
        return await self.session.get(Product, product_id)

    async def get_by_shop_and_id(self, shop_id: int, product_id: int) -> Product | None:
        result = await self.session.execute(
            select(Product).where(Product.id == product_id, Product.shop_id == shop_id)
        )
        return result.scalar_one_or_none()

    async def get_by_shop_and_name(self, shop_id: int, name: str) -> Product | None:
        """Exact name lookup inside a shop (matches the uniqueness constraint)."""
        result = await self.session.execute(
            select(Product).where(Product.shop_id == shop_id, Product.name == name)
        )
        return result.scalar_one_or_none()

    async def get_by_shop_name_and_name(self, shop_name: str, name: str) -> Product | None:
        result = await self.session.execute(
            select(Product)
            .join(Shop, Shop.id == Product.shop_id)
            .where(func.lower(Shop.name) == shop_name.lower(), func.lower(Product.name) == name.lower())
            .order_by(Product.id)
        )
        return result.scalars().first()

    async def find(
        self,
        name: str | None = None,
        brand: str | None = None,
        category: str | None = None,
        shop_name: str | None = None,
        shop_id: int | None = None,
    ) -> list[Product]:
        """
        List products matching every given filter.

        Args:
            name: Product name
            brand: Brand name
            category: Category name
            shop_name: Shop name
            shop_id: Shop ID

        Returns:
            Products ordered by ID
        """
        query = select(Product)
        if name:
            query = query.where(func.lower(Product.name) == name.lower())
        if brand:
            query = query.where(func.lower(Product.brand) == brand.lower())
        if category:
            query = query.join(Category, Category.id == Product.category_id).where(
                func.lower(Category.name) == category.lower()
            )
        if shop_name:
            query = query.join(Shop, Shop.id == Product.shop_id).where(func.lower(Shop.name) == shop_name.lower())
        if shop_id is not None:
            query = query.where(Product.shop_id == shop_id)

        result = await self.session.execute(query.order_by(Product.id))
        return list(result.scalars().all())

    async def count(
        self,
        name: str | None = None,
        brand: str | None = None,
        shop_id: int | None = None,
    ) -> int:
        query = select(func.count(Product.id))
        if name:
            query = query.where(func.lower(Product.name) == name.lower())
        if brand:
            query = query.where(func.lower(Product.brand) == brand.lower())
        if shop_id is not None:
            query = query.where(Product.shop_id == shop_id)
        result = await self.session.execute(query)
        return int(result.scalar() or 0)

    async def get_by_category_ids(self, category_ids: list[int]) -> list[Product]:
        if not category_ids:
            return []
        result = await self.session.execute(
            select(Product).where(Product.category_id.in_(category_ids)).order_by(Product.id)
        )
        return list(result.scalars().all())

    async def is_ordered(self, product_id: int) -> bool:
        """Check whether any order line references the product."""
        result = await self.session.execute(select(exists().where(OrderItem.product_id == product_id)))
        return bool(result.scalar())

    async def save(self, product: Product) -> Product:
        self.session.add(product)
        await self.session.flush()
        return product

    async def delete(self, product: Product) -> None:
        await self.session.delete(product)
        await self.session.flush()
        logger.info(f"Deleted product {product.id} from shop {product.shop_id}")
