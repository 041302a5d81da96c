"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for route handlers.

The DatabaseManager is created once at startup and kept on
``app.state``. Route handlers receive services built around it; nothing
looks the manager up through a global.

Dependency Hierarchy:
--------------------
            ┌──────────────────────┐
            │ get_database_manager │  (app.state.db_manager)
            └──────────┬───────────┘
                       │
            ┌──────────▼───────────┐
            │ get_product_service  │
            └──────────────────────┘

Usage Examples:
--------------
    @router.get("")
    async def list_products(service: ProductService = Depends(get_product_service)):
        return await service.list_all()

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from catalog_app.core import exceptions
from catalog_app.db.database import DatabaseManager
from catalog_app.services.product_service import ProductService


# Module logger
logger = logging.getLogger(__name__)


def get_database_manager(request: Request) -> DatabaseManager:
    """
    Get the application's DatabaseManager.

    Raises:
        AppException: INTERNAL_ERROR if startup has not run
    """
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        logger.error("DatabaseManager requested before application startup")
        raise exceptions.internal_error("Database not initialized")
    return db_manager


def get_product_service(
    db_manager: DatabaseManager = Depends(get_database_manager)
) -> ProductService:
    """Build a ProductService for the current request."""
    return ProductService(db_manager)
