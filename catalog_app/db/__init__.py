"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy (asyncio) infrastructure and ORM models.

This package provides:
- DatabaseManager: engine owner and scoped session helpers
- ORM models: Product
- DatabaseSeeder: schema migration and demo data at startup

Architecture:
------------
├── database.py   - DatabaseManager class, scoped sessions
├── models.py     - SQLAlchemy ORM model classes
└── seeder.py     - DatabaseSeeder for startup bootstrap

Usage:
------
    from catalog_app.db import DatabaseManager, Product, seed_demo_data

    db_manager = DatabaseManager()
    await seed_demo_data(db_manager)

    async with db_manager.session_scope() as session:
        products = (await session.scalars(select(Product))).all()

==============================================================================
"""

from .database import DatabaseManager, Base
from .models import Product
from .seeder import DatabaseSeeder, seed_demo_data, reset_db

__all__ = [
    # Database management
    "DatabaseManager",
    "Base",
    # Models
    "Product",
    # Seeding
    "DatabaseSeeder",
    "seed_demo_data",
    "reset_db",
]
