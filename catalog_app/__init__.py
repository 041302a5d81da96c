"""
==============================================================================
Product Catalog
==============================================================================

Product catalog service: a relational store with one Product entity,
list/add/delete operations and demo data seeded at startup.

Packages:
--------
- config: Pydantic Settings
- db: DatabaseManager, ORM models, seeding
- services: ProductService
- schemas: API request/response models
- core: exceptions and FastAPI dependencies
- api: versioned REST routers

==============================================================================
"""

__version__ = "1.0.0"
