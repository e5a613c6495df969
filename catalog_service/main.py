"""
==============================================================================
Catalog Service - Application Entry Point
==============================================================================

FastAPI application serving the product catalog over HTTP/JSON:
- Product creation with validation and unique part numbers
- Listing, name search, category filter, price sort
- Inventory value aggregate

Usage:
------
    # Development
    uvicorn catalog_service.main:app --reload

    # Production (listen address and store from LISTEN / STORE)
    python -m catalog_service.main

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from catalog_service.api.router import api_router
from catalog_service.catalog.service import CatalogService
from catalog_service.config import Settings, get_settings
from catalog_service.core.exceptions import register_exception_handlers
from catalog_service.store import ProductStore, create_store


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

    Handles application lifecycle including:
    - Store creation on startup and closing on shutdown
    - Router registration
    - Exception handler setup

    Args:
        settings: Settings to use (global settings if None)
        store: Pre-built store to serve (built from settings if None).
            A store passed in is still closed on shutdown.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ProductStore] = None
    ):
        """Initialize the application."""
        self._settings = settings or get_settings()
        self._store = store
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Product catalog with search, filtering and inventory valuation",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        try:
            yield
        finally:
            self._shutdown(app)

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        if self._store is None:
            self._store = create_store(self._settings)

        app.state.catalog_service = CatalogService(self._store)

        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Listening on http://{self._settings.listen}")
        logger.info(f"📦 Store backend: {self._store.backend}")
        logger.info("=" * 60)

    def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        if self._store is not None:
            self._store.close()
            self._store = None
        logger.info("✅ Shutdown complete")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

def run() -> None:
    """Serve the application on the configured listen address."""
    import uvicorn

    uvicorn.run(
        "catalog_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
