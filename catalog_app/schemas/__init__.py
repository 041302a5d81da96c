"""
==============================================================================
Schemas Package
==============================================================================

Pydantic models for API requests and responses.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductCreate,
    ProductCreatedResponse,
    ProductDetail,
    ProductListResponse,
)

__all__ = [
    "MessageResponse",
    "ProductCreate",
    "ProductCreatedResponse",
    "ProductDetail",
    "ProductListResponse",
]
