"""
Application Exception Handling

Single AppException class for errors rendered by the HTTP layer, with
FastAPI integration. The service and data layers raise nothing of their
own; store failures are turned into responses only here.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError


logger = logging.getLogger(__name__)


class AppException(Exception):
    """
    Unified application exception for HTTP error responses.

    Usage:
        raise AppException("Catalog store unavailable", "DATABASE_ERROR", 500)

    Error Codes:
        General:
            - DATABASE_ERROR (500)
            - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DATABASE_ERROR")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to consistent JSON error response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Render store failures that reached the HTTP layer."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return await app_exception_handler(request, database_error(type(exc).__name__))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def database_error(error_type: Optional[str] = None) -> AppException:
    """Create database failure exception."""
    details = {"error_type": error_type} if error_type else {}
    return AppException("Catalog store operation failed", "DATABASE_ERROR", 500, details)


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
