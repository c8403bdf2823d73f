"""
Application factory for FastAPI.

Builds the DreamShops application from settings: middleware, exception
handlers, the versioned storefront API and the health endpoint.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.middleware import RequestLoggingMiddleware
from app.api.router import api_router
from app.config.settings import Settings, get_settings
from app.core.lifecycle import lifespan

logger = logging.getLogger(__name__)

# Grouping shown in the OpenAPI docs, in this order
OPENAPI_TAGS = [
    {"name": "auth", "description": "Login and current user"},
    {"name": "users", "description": "Registration, profiles and accounts"},
    {"name": "shops", "description": "Storefronts, one per owner"},
    {"name": "products", "description": "Shop catalog and product search"},
    {"name": "categories", "description": "Category tree"},
    {"name": "images", "description": "Product images stored in Cloudinary"},
    {"name": "addresses", "description": "Saved shipping and billing addresses"},
    {"name": "carts", "description": "Shopping carts"},
    {"name": "orders", "description": "Checkout and order fulfilment"},
    {"name": "health", "description": "Liveness probe"},
]


class AppFactory:
    """
    Creates configured FastAPI applications.

    Tests build one application per test with create_app() and override the
    database and cloud storage dependencies on it.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        settings = self._settings
        docs_prefix = settings.API_V1_STR
        app = FastAPI(
            title=settings.PROJECT_NAME,
            description=settings.PROJECT_DESCRIPTION,
            version=settings.VERSION,
            openapi_url=f"{docs_prefix}/openapi.json",
            openapi_tags=OPENAPI_TAGS,
            docs_url=f"{docs_prefix}/docs" if settings.DEBUG else None,
            redoc_url=f"{docs_prefix}/redoc" if settings.DEBUG else None,
            lifespan=lifespan,
        )
        app.state.settings = settings

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router, prefix=settings.API_V1_STR)
        self._add_health_endpoint(app)

        logger.info(f"Application created: {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")
        return app

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Register middleware. The last one added runs first, so CORS wraps
        request logging.
        """
        app.add_middleware(RequestLoggingMiddleware)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Correlation-ID", "X-Response-Time-Ms"],
        )

    def _add_health_endpoint(self, app: FastAPI) -> None:
        environment = self._settings.ENVIRONMENT

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            return {"status": "ok", "environment": environment}

    def _cors_origins(self) -> list[str]:
        # Any origin while developing; CORS_ORIGINS otherwise
        if self._settings.DEBUG:
            return ["*"]
        return self._settings.CORS_ORIGINS


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Optional settings override

    Returns:
        Configured FastAPI application
    """
    return AppFactory(settings).create_app()
