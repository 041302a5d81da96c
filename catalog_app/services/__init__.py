"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog's business contract.

This package provides:
- ProductService: list, add and delete products

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ DatabaseManager │  ← One scoped session per call
    └─────────────────┘

Services receive the DatabaseManager through their constructor.

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
