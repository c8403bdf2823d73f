import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator
from urllib.parse import quote_plus

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, NullPool

from app.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def get_async_database_url(config: Settings = settings) -> str:
    """
    URL asíncrona de la base de datos.

    DATABASE_URL tiene prioridad (p. ej. sqlite+aiosqlite en local); si no,
    se arma la URL de PostgreSQL/asyncpg con las variables DB_*.
    """
    if config.DATABASE_URL:
        return config.DATABASE_URL
    if not config.DB_NAME:
        raise ValueError("Database name is required (DB_NAME)")

    credentials = quote_plus(config.DB_USER or "postgres")
    if config.DB_PASSWORD:
        credentials += f":{quote_plus(config.DB_PASSWORD)}"
    host = f"{config.DB_HOST or 'localhost'}:{config.DB_PORT or 5432}"
    return f"postgresql+asyncpg://{credentials}@{host}/{config.DB_NAME}"


def _pool_options(database_url: str, config: Settings) -> dict[str, Any]:
    # SQLite maneja su propio pool y no acepta parámetros de tamaño
    if database_url.startswith("sqlite"):
        return {}
    if config.DEBUG:
        return {"poolclass": NullPool}
    return {
        "poolclass": AsyncAdaptedQueuePool,
        "pool_size": config.DB_POOL_SIZE,
        "max_overflow": config.DB_MAX_OVERFLOW,
        "pool_recycle": config.DB_POOL_RECYCLE,
        "pool_timeout": config.DB_POOL_TIMEOUT,
    }


def create_async_database_engine(config: Settings = settings) -> AsyncEngine:
    """Crea el engine asíncrono con el pool adecuado al entorno"""
    database_url = get_async_database_url(config)
    options = _pool_options(database_url, config)
    driver = database_url.split(":", 1)[0]
    pool = options.get("poolclass")
    logger.info(f"Creating async database engine ({driver}, pool: {pool.__name__ if pool else 'default'})")
    return create_async_engine(database_url, echo=config.DB_ECHO, pool_pre_ping=True, **options)


async_engine = create_async_database_engine()

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def get_async_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Sesión transaccional: commit al salir, rollback si se propaga una excepción.

    Los repositorios solo hacen flush; el commit ocurre aquí.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.error(f"Async database error, rolling back: {e}")
            await session.rollback()
            raise


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency de FastAPI: la request completa es la unidad de trabajo"""
    async with get_async_db_context() as session:
        yield session
