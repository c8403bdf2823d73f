"""
Tests for the default data seeder against the SQLite test database.
"""

import pytest

from app.domains.ecommerce.infrastructure.repositories import SQLAlchemyRoleRepository, SQLAlchemyUserRepository
from app.services.data_seeder import DEFAULT_ADMIN_COUNT, DEFAULT_USER_COUNT, DataSeeder, default_accounts
from app.services.token_service import TokenService


def test_default_accounts():
    accounts = default_accounts()
    assert len(accounts) == DEFAULT_USER_COUNT + DEFAULT_ADMIN_COUNT
    assert accounts[0]["email"] == "user1@email.com"
    assert accounts[-1] == {
        "first_name": "Admin",
        "last_name": f"Admin{DEFAULT_ADMIN_COUNT}",
        "email": f"admin{DEFAULT_ADMIN_COUNT}@email.com",
        "role": "ROLE_ADMIN",
    }


@pytest.mark.asyncio
async def test_seed_is_idempotent(db_session):
    users = SQLAlchemyUserRepository(db_session)
    seeder = DataSeeder(users, SQLAlchemyRoleRepository(db_session), TokenService())

    first = await seeder.seed()
    second = await seeder.seed()

    assert first == {"added": DEFAULT_USER_COUNT + DEFAULT_ADMIN_COUNT, "skipped": 0}
    assert second == {"added": 0, "skipped": DEFAULT_USER_COUNT + DEFAULT_ADMIN_COUNT}

    admin = await users.get_by_email("admin1@email.com")
    assert admin.role_names == ["ROLE_ADMIN"]
    assert admin.account is not None
    for role in ("ROLE_USER", "ROLE_ADMIN", "ROLE_SHOP_OWNER"):
        assert await SQLAlchemyRoleRepository(db_session).get_by_name(role) is not None
