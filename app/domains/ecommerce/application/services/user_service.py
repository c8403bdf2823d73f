"""
User Service

Registration, profile and account management for platform users.
"""

import logging

from app.core.domain import (
    BusinessRuleViolationException,
    DuplicateEntityException,
    EntityNotFoundException,
    ValidationException,
)
from app.domains.ecommerce.application.dto import CreateUserRequest, UpdateAccountRequest, UpdateUserRequest
from app.domains.ecommerce.application.ports import (
    ICartRepository,
    IOrderRepository,
    IRoleRepository,
    IUserRepository,
)
from app.domains.ecommerce.domain.value_objects import AccountStatus, Gender, RoleName, Theme
from app.models.db import Role, User, UserAccount
from app.services.token_service import TokenService

logger = logging.getLogger(__name__)


async def ensure_role(role_repository: IRoleRepository, name: str) -> Role:
    """Get a role by name, creating it when missing."""
    role = await role_repository.get_by_name(name)
    if role is None:
        role = await role_repository.save(Role(name=name))
        logger.info(f"Created role {name}")
    return role


def new_account() -> UserAccount:
    """Empty profile with default preferences."""
    return UserAccount(
        addresses=[],
        dashboard_color="#FFFFFF",
        preferred_theme=Theme.LIGHT.value,
        preferred_language="en",
        account_status=AccountStatus.PENDING.value,
    )


class UserService:
    """
    Application service for the User aggregate.

    Responsibilities:
    - Register users with a hashed password and ROLE_USER
    - Update personal data and account preferences
    - Delete users that no longer own a shop or have orders
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        role_repository: IRoleRepository,
        cart_repository: ICartRepository,
        order_repository: IOrderRepository,
        token_service: TokenService,
    ):
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.cart_repository = cart_repository
        self.order_repository = order_repository
        self.token_service = token_service

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User", user_id)
        return user

    async def create_user(self, request: CreateUserRequest) -> User:
        """
        Register a new user.

        Raises:
            DuplicateEntityException: if the email is already registered
        """
        email = request.email.strip().lower()
        if await self.user_repository.exists_by_email(email):
            raise DuplicateEntityException(
                "User", "email", email, message=f"Oops!! User with email {email} already exists"
            )

        role = await ensure_role(self.role_repository, RoleName.USER.value)
        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=email,
            password_hash=self.token_service.get_password_hash(request.password),
            roles=[role],
            shop=None,
        )
        user.account = new_account()

        user = await self.user_repository.save(user)
        logger.info(f"Created user {user.id} ({email})")
        return user

    async def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        user = await self.get_user(user_id)
        if request.first_name is not None:
            user.first_name = request.first_name
        if request.last_name is not None:
            user.last_name = request.last_name
        return await self.user_repository.save(user)

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with account, addresses and cart.

        Raises:
            BusinessRuleViolationException: if the user owns a shop or has orders
        """
        user = await self.get_user(user_id)

        if user.shop is not None:
            raise BusinessRuleViolationException(
                "user_owns_shop",
                f"User {user_id} owns shop '{user.shop.name}'. Delete the shop first.",
            )
        if await self.order_repository.exists_for_user(user_id):
            raise BusinessRuleViolationException("user_has_orders", f"User {user_id} has orders and cannot be deleted.")

        cart = await self.cart_repository.get_by_user_id(user_id)
        if cart is not None:
            await self.cart_repository.delete(cart)

        await self.user_repository.delete(user)

    async def get_account(self, user_id: int) -> UserAccount:
        user = await self.get_user(user_id)
        return await self._account_of(user)

    async def _account_of(self, user: User) -> UserAccount:
        if user.account is None:
            user.account = new_account()
            await self.user_repository.save(user)
        return user.account

    async def update_account(self, user_id: int, request: UpdateAccountRequest) -> UserAccount:
        """
        Partially update account preferences.

        Raises:
            DuplicateEntityException: if the username is taken by another account
            ValidationException: on unknown gender, theme or status values
        """
        user = await self.get_user(user_id)
        account = await self._account_of(user)

        if request.username is not None and request.username != account.username:
            other = await self.user_repository.get_account_by_username(request.username)
            if other is not None and other.id != account.id:
                raise DuplicateEntityException("UserAccount", "username", request.username)
            account.username = request.username

        plain_fields = ("phone_number", "profile_picture_url", "date_of_birth", "dashboard_color", "preferred_language")
        for field_name in plain_fields:
            value = getattr(request, field_name)
            if value is not None:
                setattr(account, field_name, value)

        enum_fields = (
            ("gender", Gender),
            ("preferred_theme", Theme),
            ("account_status", AccountStatus),
        )
        for field_name, enum_cls in enum_fields:
            value = getattr(request, field_name)
            if value is None:
                continue
            try:
                setattr(account, field_name, enum_cls.from_string(value).value)
            except ValueError as e:
                raise ValidationException(str(e), field=field_name) from e

        await self.user_repository.save(user)
        return account

    async def authenticate(self, email: str, password: str) -> User | None:
        """Return the user when the credentials match, None otherwise."""
        user = await self.user_repository.get_by_email(email)
        if user is None or not self.token_service.verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            return None
        return user
