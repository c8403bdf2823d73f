import logging

from sqlalchemy import text

from app.database.async_db import (
    AsyncSessionLocal,
    async_engine,
    get_async_db,
    get_async_db_context,
)
from app.models.db import Base

logger = logging.getLogger(__name__)


async def init_db() -> bool:
    """
    Inicializa la base de datos creando todas las tablas
    """
    try:
        async with async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")
        return True
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise


async def check_db_connection() -> bool:
    """Verifica la conexión a la base de datos"""
    try:
        async with get_async_db_context() as db:
            result = (await db.execute(text("SELECT 1"))).scalar()
            logger.info(f"Database connection check: OK = {result}")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "check_db_connection",
    "get_async_db",
    "get_async_db_context",
    "init_db",
]
