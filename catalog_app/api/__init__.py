"""
==============================================================================
API Package
==============================================================================

REST endpoints consuming the catalog services.

==============================================================================
"""

from .router import api_router

__all__ = ["api_router"]
