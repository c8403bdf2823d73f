"""
Address Repository Implementation

SQLAlchemy implementation of IAddressRepository.
"""

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IAddressRepository
from app.models.db import Address


class SQLAlchemyAddressRepository(IAddressRepository):
    """
    SQLAlchemy implementation of address repository.

    Per-user address lists come from the account's eager-loaded collection;
    this repository covers lookups across accounts.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, address_id: int) -> Address | None:
        return await self.session.get(Address, address_id)

    async def find(
        self,
        country: str | None = None,
        city: str | None = None,
        state: str | None = None,
    ) -> list[Address]:
        """List addresses filtered by location (case-insensitive)."""
        query = select(Address)
        if country:
            query = query.where(func.lower(Address.country) == country.lower())
        if city:
            query = query.where(func.lower(Address.city) == city.lower())
        if state:
            query = query.where(func.lower(Address.state) == state.lower())
        result = await self.session.execute(query.order_by(Address.id))
        return list(result.scalars().all())

    async def exists_by_id_and_account(self, address_id: int, account_id: int) -> bool:
        result = await self.session.execute(
            select(exists().where(Address.id == address_id, Address.user_account_id == account_id))
        )
        return bool(result.scalar())

    async def save(self, address: Address) -> Address:
        self.session.add(address)
        await self.session.flush()
        return address

    async def delete(self, address: Address) -> None:
        await self.session.delete(address)
        await self.session.flush()
