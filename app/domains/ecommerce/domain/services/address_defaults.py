"""
Default Address Rules

Per account and address type there is at most one default address, and
exactly one while the group is non-empty. These helpers operate on the
account's loaded address collection and only flip is_default flags.
"""

import logging
from collections.abc import Iterable
from typing import Any

logger = logging.getLogger(__name__)


def _sort_key(address: Any) -> tuple[bool, int]:
    # Unsaved addresses sort after persisted ones
    return (address.id is None, address.id or 0)


def addresses_of_type(addresses: Iterable[Any], address_type: str) -> list[Any]:
    return sorted((a for a in addresses if a.address_type == address_type), key=_sort_key)


def make_default(addresses: Iterable[Any], target: Any) -> None:
    """Mark target as default and clear the flag on the rest of its type group."""
    for address in addresses_of_type(addresses, target.address_type):
        address.is_default = address is target


def ensure_default(
    addresses: Iterable[Any],
    address_type: str,
    preferred: Any | None = None,
    avoid: Any | None = None,
) -> Any | None:
    """
    Promote an address when the type group has no default.

    Args:
        addresses: All addresses of the account
        address_type: Group to check
        preferred: Address to promote if it belongs to the group
        avoid: Address to skip unless it is the only candidate

    Returns:
        The promoted address, or None if nothing changed
    """
    group = addresses_of_type(addresses, address_type)
    if not group or any(a.is_default for a in group):
        return None

    if preferred is not None and preferred in group:
        chosen = preferred
    else:
        candidates = [a for a in group if a is not avoid]
        chosen = candidates[0] if candidates else group[0]

    chosen.is_default = True
    logger.info(f"Promoted address {chosen.id} to default {address_type} address")
    return chosen
