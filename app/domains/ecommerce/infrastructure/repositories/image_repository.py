"""
Image Repository Implementation

SQLAlchemy implementation of IImageRepository.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IImageRepository
from app.models.db import Image


class SQLAlchemyImageRepository(IImageRepository):
    """SQLAlchemy implementation of image repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, image_id: int) -> Image | None:
        return await self.session.get(Image, image_id)

    async def get_by_product_id(self, product_id: int) -> list[Image]:
        result = await self.session.execute(
            select(Image).where(Image.product_id == product_id).order_by(Image.id)
        )
        return list(result.scalars().all())

    async def save(self, image: Image) -> Image:
        self.session.add(image)
        await self.session.flush()
        return image

    async def delete(self, image: Image) -> None:
        await self.session.delete(image)
        await self.session.flush()
