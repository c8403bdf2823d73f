"""
Shared pytest fixtures for all tests.

The API runs against an in-memory SQLite database (aiosqlite, StaticPool so
every session sees the same connection). Cloudinary is replaced by an
in-memory fake and users are authenticated with real JWTs.
"""

import os
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

# Ensure test environment before the settings singleton is created
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_CREATE_TABLES"] = "false"
os.environ["SEED_DEFAULT_DATA"] = "false"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.app_factory import create_app  # noqa: E402
from app.database.async_db import get_async_db  # noqa: E402
from app.domains.ecommerce.api.dependencies import get_cloud_storage  # noqa: E402
from app.domains.ecommerce.application.services.user_service import ensure_role, new_account  # noqa: E402
from app.domains.ecommerce.domain.value_objects import RoleName  # noqa: E402
from app.domains.ecommerce.infrastructure.repositories import (  # noqa: E402
    SQLAlchemyRoleRepository,
    SQLAlchemyUserRepository,
)
from app.models.db import Base, User  # noqa: E402
from app.services.token_service import TokenService  # noqa: E402

# ============================================================================
# FAKES
# ============================================================================


class FakeCloudStorage:
    """In-memory stand-in for Cloudinary that records uploads and deletions."""

    def __init__(self):
        self.uploads: list[dict] = []
        self.destroyed: list[str] = []

    async def upload(self, content: bytes, folder: str | None, public_id: str, overwrite: bool = True) -> dict:
        full_id = f"{folder}/{public_id}" if folder else public_id
        self.uploads.append({"public_id": full_id, "size": len(content), "overwrite": overwrite})
        return {
            "public_id": full_id,
            "secure_url": f"https://res.cloudinary.test/{full_id}.jpg?v={len(self.uploads)}",
        }

    async def destroy(self, public_id: str) -> None:
        self.destroyed.append(public_id)


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def async_session_factory(async_engine) -> async_sessionmaker:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def cloud_storage() -> FakeCloudStorage:
    return FakeCloudStorage()


@pytest.fixture
def fastapi_app(async_session_factory, cloud_storage):
    """Application wired to the test database and the fake cloud storage."""
    app = create_app()

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        async with async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_db] = override_get_async_db
    app.dependency_overrides[get_cloud_storage] = lambda: cloud_storage
    return app


@pytest_asyncio.fixture
async def api_client(fastapi_app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test/api/v1") as client:
        yield client


@pytest.fixture
def token_service() -> TokenService:
    return TokenService()


@pytest.fixture
def create_user(async_session_factory, token_service):
    """
    Factory fixture: insert a user directly and return (user_id, auth headers).

    Usage:
        user_id, headers = await create_user("jane@email.com")
        admin_id, admin_headers = await create_user("root@email.com", roles=[RoleName.ADMIN.value])
    """

    async def _create(email: str, password: str = "secret123", roles: list[str] | None = None):
        async with async_session_factory() as session:
            role_repository = SQLAlchemyRoleRepository(session)
            role_names = roles or [RoleName.USER.value]
            user = User(
                first_name=email.split("@")[0].title(),
                last_name="Tester",
                email=email,
                password_hash=token_service.get_password_hash(password),
                roles=[await ensure_role(role_repository, name) for name in role_names],
                shop=None,
            )
            user.account = new_account()
            await SQLAlchemyUserRepository(session).save(user)
            await session.commit()
            token = token_service.create_user_token(user.id, user.email, user.role_names)
            return user.id, {"Authorization": f"Bearer {token}"}

    return _create


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def sample_product_payload() -> dict:
    return {
        "name": "Galaxy S24",
        "brand": "Samsung",
        "price": "899.99",
        "inventory": 10,
        "description": "Flagship phone",
        "category_name": "Smartphones",
        "parent_category_name": "Electronics",
    }


@pytest.fixture
def mock_repository():
    """Generic AsyncMock repository whose save echoes its argument."""
    mock = AsyncMock()
    mock.save = AsyncMock(side_effect=lambda entity: entity)
    mock.delete = AsyncMock()
    mock.get_by_id = AsyncMock(return_value=None)
    return mock
