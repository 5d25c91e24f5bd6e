"""
==============================================================================
Product Catalog API - Application Entry Point
==============================================================================

FastAPI application serving a read-only product catalog and a validating,
echo-only create endpoint.

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Configured host/port
    python -m app.main

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.catalog.catalog import ProductCatalog, init_catalog
from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.utils.validators import ProductValidator


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Settings, catalog and validator are handed in at construction and
    attached to `app.state`; endpoints read them from there.

    Example:
        >>> application = Application(Settings(json_write_indented=False))
        >>> application.app.state.catalog.products[0].name
        'Laptop'
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[ProductCatalog] = None,
        validator: Optional[ProductValidator] = None
    ):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._catalog = catalog if catalog is not None else init_catalog()
        self._validator = validator or ProductValidator()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Product catalog with server-side validation",
            lifespan=self._lifespan,
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
        )

        app.state.settings = self._settings
        app.state.catalog = self._catalog
        app.state.validator = self._validator

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info(f"📦 Serving {len(self._catalog)} products")
        if self._settings.cors_origins_list == ["*"]:
            logger.info("🌐 CORS open to any origin (development posture)")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application(settings)
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
