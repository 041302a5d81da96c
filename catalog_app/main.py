"""
==============================================================================
Product Catalog - Application Entry Point
==============================================================================

FastAPI application with:
- RESTful product catalog endpoints
- Schema migration and demo data seeding at startup
- Health probes

Usage:
------
    # Development
    uvicorn catalog_app.main:app --reload

    # Production
    uvicorn catalog_app.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from catalog_app import __version__
from catalog_app.api.router import api_router
from catalog_app.config import Settings, get_settings
from catalog_app.core.exceptions import register_exception_handlers
from catalog_app.db.database import DatabaseManager
from catalog_app.db.seeder import DatabaseSeeder


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
    - DatabaseManager creation and disposal
    - Seeding before requests are served
    - Middleware, exception handler and router registration
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Application settings (global settings if None)
        """
        self._settings = settings or get_settings()
        self._db_manager: Optional[DatabaseManager] = None
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Product catalog with list, add and delete operations",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)

        register_exception_handlers(app)

        self._register_routers(app)

        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        await self._startup(app)
        yield
        await self._shutdown(app)

    async def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        self._settings.ensure_directories()
        self._db_manager = DatabaseManager(self._settings)
        app.state.db_manager = self._db_manager

        if self._settings.seed_demo_data:
            await DatabaseSeeder(self._db_manager, self._settings).seed()
        else:
            await self._db_manager.migrate()

        logger.info("=" * 60)
        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    async def _shutdown(self, app: FastAPI) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        if self._db_manager is not None:
            await self._db_manager.dispose()
        app.state.db_manager = None
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(api_router)

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the interactive API docs."""
            return RedirectResponse(url="/docs")

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

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
