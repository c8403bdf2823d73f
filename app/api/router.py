from fastapi import APIRouter

from app.api.routes import (
    addresses,
    auth,
    carts,
    categories,
    images,
    orders,
    products,
    shops,
    users,
)

api_router = APIRouter()

# API routes (all have /api/v1 prefix from the app factory)
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router)
api_router.include_router(shops.router)
api_router.include_router(products.router)
api_router.include_router(categories.router)
api_router.include_router(images.router)
api_router.include_router(addresses.router)
api_router.include_router(carts.router)
api_router.include_router(orders.router)
