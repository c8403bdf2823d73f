"""
Data Seeder - Seeds the default roles and demo accounts on startup.

Usage:
    async with get_async_db_context() as db:
        seeder = DataSeeder(SQLAlchemyUserRepository(db), SQLAlchemyRoleRepository(db), TokenService())
        result = await seeder.seed()
        # {"added": 7, "skipped": 0}
"""

import logging

from app.domains.ecommerce.application.ports import IRoleRepository, IUserRepository
from app.domains.ecommerce.application.services.user_service import ensure_role, new_account
from app.domains.ecommerce.domain.value_objects import RoleName
from app.models.db import User
from app.services.token_service import TokenService

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "123456"
DEFAULT_USER_COUNT = 5
DEFAULT_ADMIN_COUNT = 2


def default_accounts() -> list[dict]:
    """Demo accounts: user1..5@email.com (ROLE_USER) and admin1..2@email.com (ROLE_ADMIN)."""
    accounts = [
        {
            "first_name": "The User",
            "last_name": f"User{i}",
            "email": f"user{i}@email.com",
            "role": RoleName.USER.value,
        }
        for i in range(1, DEFAULT_USER_COUNT + 1)
    ]
    accounts += [
        {
            "first_name": "Admin",
            "last_name": f"Admin{i}",
            "email": f"admin{i}@email.com",
            "role": RoleName.ADMIN.value,
        }
        for i in range(1, DEFAULT_ADMIN_COUNT + 1)
    ]
    return accounts


class DataSeeder:
    """
    Seeder for the default roles and demo users.

    Existing emails are skipped, so seeding is safe on every startup.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        role_repository: IRoleRepository,
        token_service: TokenService,
    ) -> None:
        self._users = user_repository
        self._roles = role_repository
        self._token_service = token_service

    async def seed_roles(self) -> None:
        for role_name in RoleName.values():
            await ensure_role(self._roles, role_name)

    async def seed(self) -> dict[str, int]:
        """Seed roles and demo users.

        Returns:
            Dict with added and skipped user counts
        """
        await self.seed_roles()

        result = {"added": 0, "skipped": 0}
        for account in default_accounts():
            if await self._users.exists_by_email(account["email"]):
                result["skipped"] += 1
                continue

            role = await ensure_role(self._roles, account["role"])
            user = User(
                first_name=account["first_name"],
                last_name=account["last_name"],
                email=account["email"],
                password_hash=self._token_service.get_password_hash(DEFAULT_PASSWORD),
                roles=[role],
                shop=None,
            )
            user.account = new_account()
            await self._users.save(user)
            result["added"] += 1
            logger.debug(f"Seeded user: {account['email']}")

        logger.info(f"Data seeding complete: {result['added']} added, {result['skipped']} skipped")
        return result
