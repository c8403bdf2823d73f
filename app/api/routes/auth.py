from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.dependencies import get_current_user, get_token_service
from app.domains.ecommerce.api.dependencies import get_user_service
from app.domains.ecommerce.api.schemas import LoginRequest, TokenResponse, UserResponse
from app.domains.ecommerce.application.services import UserService
from app.models.db import User
from app.services.token_service import TokenService

router = APIRouter()


async def _issue_token(email: str, password: str, user_service: UserService, token_service: TokenService) -> dict:
    user = await user_service.authenticate(email, password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales incorrectas",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = token_service.create_user_token(user.id, user.email, user.role_names)
    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/token", response_model=TokenResponse)
async def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),  # noqa: B008
    user_service: UserService = Depends(get_user_service),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
):
    """
    Endpoint para obtener un token de acceso (OAuth2 form data, username = email)
    """
    return await _issue_token(form_data.username, form_data.password, user_service, token_service)


@router.post("/login", response_model=TokenResponse)
async def login_with_json(
    login_data: LoginRequest,
    user_service: UserService = Depends(get_user_service),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
):
    """
    Endpoint para login con JSON (email y password).
    """
    return await _issue_token(login_data.email, login_data.password, user_service, token_service)


@router.get("/me", response_model=UserResponse)
async def read_users_me(current_user: User = Depends(get_current_user)):  # noqa: B008
    """
    Endpoint para obtener información del usuario actual
    """
    return current_user
