"""
Dependencias FastAPI compartidas: autenticación JWT y reglas de acceso.

Las reglas de acceso lanzan AuthorizationException (403) y se aplican en las
rutas, antes de invocar los servicios de aplicación.
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import get_settings
from app.core.domain import AuthorizationException
from app.database.async_db import get_async_db
from app.domains.ecommerce.domain.value_objects import RoleName
from app.domains.ecommerce.infrastructure.repositories import SQLAlchemyUserRepository
from app.models.db import Shop, User
from app.services.token_service import TokenService

logger = logging.getLogger(__name__)

_settings = get_settings()
API_V1_STR = _settings.API_V1_STR

token_service = TokenService()
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_V1_STR}/auth/token")


def get_token_service() -> TokenService:
    return token_service


async def get_current_user(
    token: str = Depends(oauth2_scheme),  # noqa: B008
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
) -> User:
    """
    Usuario autenticado a partir del Bearer token (sub = ID del usuario).

    Raises:
        HTTPException 401: token ausente, inválido, expirado o usuario inexistente
    """
    user_id = token_service.get_user_id(token)
    user = await SQLAlchemyUserRepository(db).get_by_id(user_id)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuario no encontrado",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def require_roles(*roles: str):
    """
    Dependencia que exige al menos uno de los roles indicados

    Args:
        roles: Nombres de rol aceptados (ROLE_ADMIN, ROLE_SHOP_OWNER, ...)
    """

    async def dependency(user: User = Depends(get_current_user)) -> User:  # noqa: B008
        if not any(user.has_role(role) for role in roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permiso insuficiente. Se requiere uno de los roles: {', '.join(roles)}",
            )
        return user

    return dependency


# ============================================================
# ACCESS RULES
# ============================================================


def is_admin(user: User) -> bool:
    return user.has_role(RoleName.ADMIN.value)


def ensure_self_or_admin(current_user: User, user_id: int, operation: str) -> None:
    """Recursos asociados a un user_id: solo el propio usuario o un admin."""
    if current_user.id != user_id and not is_admin(current_user):
        raise AuthorizationException(operation, f"user {user_id}", current_user.id)


def ensure_shop_owner_or_admin(current_user: User, shop: Shop, operation: str) -> None:
    """Escrituras sobre una tienda: solo su dueño o un admin."""
    if shop.owner_id != current_user.id and not is_admin(current_user):
        raise AuthorizationException(operation, f"shop {shop.id}", current_user.id)
