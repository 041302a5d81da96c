"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_app.core import AppException, get_product_service

    # Or use exception factory functions via module
    from catalog_app.core import exceptions
    raise exceptions.internal_error()

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import (
    get_database_manager,
    get_product_service,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_database_manager",
    "get_product_service",
]
