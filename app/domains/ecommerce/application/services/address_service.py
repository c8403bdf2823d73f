"""
Address Service

Saved addresses of a user account with default-address maintenance.
"""

import logging

from app.core.domain import AuthorizationException, EntityNotFoundException, ValidationException
from app.domains.ecommerce.application.dto import AddressRequest
from app.domains.ecommerce.application.ports import IAddressRepository, IUserRepository
from app.domains.ecommerce.application.services.user_service import new_account
from app.domains.ecommerce.domain.services import ensure_default, make_default
from app.domains.ecommerce.domain.value_objects import AddressType
from app.models.db import Address, UserAccount

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("street", "house_number", "floor", "city", "state", "zip", "country")


class AddressService:
    """
    Application service for addresses.

    Every mutation keeps, per account and address type, exactly one default
    address while the group is non-empty.
    """

    def __init__(self, address_repository: IAddressRepository, user_repository: IUserRepository):
        self.address_repository = address_repository
        self.user_repository = user_repository

    async def add_address(self, request: AddressRequest, user_id: int) -> Address:
        """
        Save a new address for a user.

        A default address replaces the previous default of its type; a
        non-default address becomes default when its type has none.
        """
        account = await self._get_account(user_id)
        address_type = AddressType.resolve(request.address_type)
        for field_name in ("street", "city", "country"):
            if not getattr(request, field_name):
                raise ValidationException(f"{field_name} is required", field=field_name)

        address = Address(
            street=request.street,
            house_number=request.house_number,
            floor=request.floor,
            city=request.city,
            state=request.state,
            zip=request.zip,
            country=request.country,
            is_default=bool(request.is_default),
            address_type=address_type.value,
        )
        account.addresses.append(address)

        if address.is_default:
            make_default(account.addresses, address)
        else:
            ensure_default(account.addresses, address.address_type, preferred=address)

        address = await self.address_repository.save(address)
        logger.info(f"Added {address.address_type} address {address.id} for user {user_id}")
        return address

    async def update_address(self, address_id: int, request: AddressRequest, user_id: int) -> Address:
        """
        Partially update an address of the user.

        When the type changes and the address was the default of its old
        type, another address of the old type is promoted.
        """
        account, address = await self._get_owned_address(user_id, address_id, "update_address")
        old_type = address.address_type
        was_default = address.is_default

        for field_name in _EDITABLE_FIELDS:
            value = getattr(request, field_name)
            if value is not None:
                setattr(address, field_name, value)
        if request.address_type is not None:
            address.address_type = AddressType.resolve(request.address_type).value
        if request.is_default is not None:
            address.is_default = request.is_default

        if address.is_default:
            make_default(account.addresses, address)
        elif was_default and request.is_default is False:
            # Explicitly unset: hand the default to another address if there is one
            ensure_default(account.addresses, address.address_type, avoid=address)
        else:
            ensure_default(account.addresses, address.address_type, preferred=address)

        if address.address_type != old_type:
            ensure_default(account.addresses, old_type)

        return await self.address_repository.save(address)

    async def delete_address(self, address_id: int, user_id: int) -> None:
        """Delete an address; a deleted default is replaced by another address of the same type."""
        account, address = await self._get_owned_address(user_id, address_id, "delete_address")
        account.addresses.remove(address)
        if address.is_default:
            ensure_default(account.addresses, address.address_type)
        await self.address_repository.delete(address)
        logger.info(f"Deleted address {address_id} of user {user_id}")

    async def set_default_address(self, user_id: int, address_id: int) -> Address:
        account, address = await self._get_owned_address(user_id, address_id, "set_default_address")
        make_default(account.addresses, address)
        return await self.address_repository.save(address)

    async def get_address_by_id(self, address_id: int) -> Address:
        address = await self.address_repository.get_by_id(address_id)
        if address is None:
            raise EntityNotFoundException("Address", address_id)
        return address

    async def get_all_addresses(
        self,
        country: str | None = None,
        city: str | None = None,
        state: str | None = None,
    ) -> list[Address]:
        return await self.address_repository.find(country=country, city=city, state=state)

    async def get_all_addresses_by_user_id(self, user_id: int) -> list[Address]:
        account = await self._get_account(user_id)
        return list(account.addresses)

    async def get_default_address_by_user_id(self, user_id: int, address_type: str | None = None) -> Address:
        """
        Default address of a user, optionally for one address type.

        Without a type the default with the lowest ID is returned.
        """
        account = await self._get_account(user_id)
        type_value = AddressType.resolve(address_type).value if address_type else None
        defaults = sorted(
            (a for a in account.addresses if a.is_default and (type_value is None or a.address_type == type_value)),
            key=lambda a: a.id,
        )
        if not defaults:
            raise EntityNotFoundException(
                "Address", user_id, message=f"No default address found for user {user_id}"
            )
        return defaults[0]

    async def exists_by_id_and_user(self, address_id: int, user_id: int) -> bool:
        account = await self._get_account(user_id)
        return await self.address_repository.exists_by_id_and_account(address_id, account.id)

    async def _get_account(self, user_id: int) -> UserAccount:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User", user_id)
        if user.account is None:
            user.account = new_account()
            await self.user_repository.save(user)
        return user.account

    async def _get_owned_address(self, user_id: int, address_id: int, operation: str) -> tuple[UserAccount, Address]:
        account = await self._get_account(user_id)
        address = next((a for a in account.addresses if a.id == address_id), None)
        if address is not None:
            return account, address

        if await self.address_repository.get_by_id(address_id) is None:
            raise EntityNotFoundException("Address", address_id)
        raise AuthorizationException(operation, f"address {address_id}", user_id)
