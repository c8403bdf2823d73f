import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from fastapi import HTTPException, status
from jose import ExpiredSignatureError, JWTError, jwt

from app.config.settings import get_settings

logger = logging.getLogger(__name__)


class TokenService:
    """
    Servicio para gestionar tokens JWT y hashing de contraseñas
    """

    def __init__(self):
        self.settings = get_settings()

        # Configuración JWT
        self.SECRET_KEY = self.settings.JWT_SECRET_KEY
        self.ALGORITHM = self.settings.JWT_ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verifica si la contraseña coincide con el hash"""
        password_bytes = plain_password.encode("utf-8")
        hash_bytes = hashed_password.encode("utf-8")
        try:
            return bcrypt.checkpw(password_bytes, hash_bytes)
        except ValueError:
            # Hash almacenado con formato inválido
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    def get_password_hash(self, password: str) -> str:
        """Genera un hash para la contraseña"""
        password_bytes = password.encode("utf-8")
        salt = bcrypt.gensalt()
        hash_bytes = bcrypt.hashpw(password_bytes, salt)
        return hash_bytes.decode("utf-8")

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """
        Crea un token JWT de acceso

        Args:
            data: Datos a incluir en el token
            expires_delta: Tiempo de expiración (opcional)

        Returns:
            Token JWT codificado
        """
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)

        # Incluir tipo de token en el payload
        to_encode.update({"exp": expire, "iat": datetime.now(timezone.utc), "token_type": "access"})

        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def create_user_token(self, user_id: int, email: str, roles: list[str]) -> str:
        """Token de acceso para un usuario autenticado (sub = ID del usuario)"""
        return self.create_access_token({"sub": str(user_id), "email": email, "roles": roles})

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Decodifica un token JWT

        Args:
            token: Token JWT a decodificar

        Returns:
            Datos del token decodificado
        """
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except ExpiredSignatureError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expirado",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e
        except JWTError as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Token inválido: {str(e)}",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e

        if payload.get("token_type") != "access":
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Tipo de token inválido",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return payload

    def get_user_id(self, token: str) -> int:
        """
        Obtiene el ID del usuario a partir del token

        Args:
            token: Token JWT

        Returns:
            ID del usuario
        """
        payload = self.decode_token(token)
        subject = payload.get("sub")
        try:
            return int(subject)
        except (TypeError, ValueError) as e:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="No se pudo validar las credenciales",
                headers={"WWW-Authenticate": "Bearer"},
            ) from e
