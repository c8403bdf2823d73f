"""
Order endpoints

Buyers place and cancel their own orders; fulfilment (confirm, status
updates) belongs to the shop that received the order or to an admin.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import ensure_self_or_admin, get_current_user, is_admin
from app.core.domain import AuthorizationException
from app.domains.ecommerce.api.dependencies import get_order_service
from app.domains.ecommerce.api.schemas import OrderResponse
from app.domains.ecommerce.application.services import OrderService
from app.models.db import Order, User

router = APIRouter(prefix="/orders", tags=["orders"])


def _is_seller(user: User, order: Order) -> bool:
    return user.shop_id is not None and user.shop_id == order.shop_id


def _ensure_can_view(user: User, order: Order, operation: str) -> None:
    if order.user_id != user.id and not _is_seller(user, order) and not is_admin(user):
        raise AuthorizationException(operation, f"order {order.id}", user.id)


def _ensure_can_fulfil(user: User, order: Order, operation: str) -> None:
    if not _is_seller(user, order) and not is_admin(user):
        raise AuthorizationException(operation, f"order {order.id}", user.id)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Turn the current user's cart into a PENDING order and empty the cart."""
    return await service.place_order(current_user.id)


@router.get("/user/{user_id}", response_model=list[OrderResponse])
async def get_user_orders(
    user_id: int,
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    ensure_self_or_admin(current_user, user_id, "get_user_orders")
    return await service.get_user_orders(user_id)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order_by_id(
    order_id: int,
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    order = await service.get_order_by_id(order_id)
    _ensure_can_view(current_user, order, "get_order")
    return order


@router.put("/{order_id}/confirm", response_model=OrderResponse)
async def confirm_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """PENDING -> CONFIRMED."""
    _ensure_can_fulfil(current_user, await service.get_order_by_id(order_id), "confirm_order")
    return await service.confirm_order(order_id)


@router.put("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """PENDING -> CANCELLED; ordered quantities go back to inventory."""
    _ensure_can_view(current_user, await service.get_order_by_id(order_id), "cancel_order")
    return await service.cancel_order(order_id)


@router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    order_status: str = Query(..., alias="status", description="PROCESSING, SHIPPED, IN_TRANSIT o DELIVERED"),
    service: OrderService = Depends(get_order_service),  # noqa: B008
    current_user: User = Depends(get_current_user),  # noqa: B008
):
    """Move a confirmed order through fulfilment."""
    _ensure_can_fulfil(current_user, await service.get_order_by_id(order_id), "update_order_status")
    return await service.update_order_status(order_id, order_status)
