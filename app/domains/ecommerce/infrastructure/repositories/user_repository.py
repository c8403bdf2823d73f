"""
User Repository Implementation

SQLAlchemy implementation of IUserRepository and IRoleRepository.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.ecommerce.application.ports import IRoleRepository, IUserRepository
from app.models.db import Role, User, UserAccount

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Roles, account and addresses are eager-loaded by the model mapping.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID."""
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (case-insensitive)."""
        result = await self.session.execute(select(User).where(User.email == email.strip().lower()))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.session.execute(select(exists().where(User.email == email.strip().lower())))
        return bool(result.scalar())

    async def get_account_by_username(self, username: str) -> UserAccount | None:
        result = await self.session.execute(select(UserAccount).where(UserAccount.username == username))
        return result.scalar_one_or_none()

    async def save(self, user: User) -> User:
        """Add or update a user and flush to obtain its ID."""
        self.session.add(user)
        await self.session.flush()
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.flush()
        logger.info(f"Deleted user {user.id}")


class SQLAlchemyRoleRepository(IRoleRepository):
    """SQLAlchemy implementation of role repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Role | None:
        result = await self.session.execute(select(Role).where(Role.name == name))
        return result.scalar_one_or_none()

    async def save(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        return role
