"""
==============================================================================
Database Seeding Module
==============================================================================

Startup bootstrap for the catalog store.

Seeding Flow:
------------
1. Apply pending schema migrations
2. Check whether any product exists
3. If the table is empty, insert the demo products in one batch
4. Commit

The check-then-insert is not guarded against two processes seeding at
the same time. Seeding runs once, before the application serves
requests.

Usage:
------
    from catalog_app.db import DatabaseManager, seed_demo_data

    db_manager = DatabaseManager()
    inserted = await seed_demo_data(db_manager)

==============================================================================
"""

from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_app.config import Settings, get_settings
from catalog_app.db.database import DatabaseManager
from catalog_app.db.models import Product, utc_now


# Module logger
logger = logging.getLogger(__name__)

# (name, price, age at seeding time)
DEMO_PRODUCTS: List[Tuple[str, Decimal, timedelta]] = [
    ("Demo Shampoo", Decimal("12.90"), timedelta(0)),
    ("Hair Serum", Decimal("24.50"), timedelta(minutes=10)),
    ("Conditioner", Decimal("9.99"), timedelta(hours=1)),
]


class DatabaseSeeder:
    """
    One-shot bootstrap of the catalog store.

    Attributes:
        _db_manager: DatabaseManager used for every store access
        _settings: Application settings

    Example:
        >>> seeder = DatabaseSeeder(db_manager)
        >>> await seeder.seed()
        3
        >>> await seeder.seed()
        0
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        settings: Optional[Settings] = None
    ) -> None:
        """
        Initialize the seeder.

        Args:
            db_manager: DatabaseManager to run against
            settings: Application settings (global settings if None)
        """
        self._db_manager = db_manager
        self._settings = settings or get_settings()

    # =========================================================================
    # SEEDING
    # =========================================================================

    async def seed(self) -> int:
        """
        Migrate the schema and insert demo products into an empty table.

        Returns:
            Number of products inserted (0 when the table had rows)
        """
        inserted = await self._db_manager.run_scoped(self._seed)

        if inserted:
            logger.info(f"✅ Seeded {inserted} demo products")
        else:
            logger.info("Products already present, seeding skipped")

        return inserted

    async def _seed(self, session: AsyncSession) -> int:
        await self._db_manager.apply_migrations(session)

        existing = await session.scalar(select(Product.id).limit(1))
        if existing is not None:
            await session.commit()
            return 0

        now = utc_now()
        session.add_all([
            Product(name=name, price=price, created_at_utc=now - age)
            for name, price, age in DEMO_PRODUCTS
        ])
        await session.commit()

        return len(DEMO_PRODUCTS)

    # =========================================================================
    # DEVELOPMENT UTILITIES
    # =========================================================================

    async def reset(self) -> int:
        """
        Drop all tables, then migrate and seed again.

        WARNING: This deletes all data. Use only for development/testing.

        Returns:
            Number of products inserted
        """
        if self._settings.is_production:
            logger.error("Cannot reset database in production!")
            raise RuntimeError("Database reset not allowed in production")

        logger.warning("=" * 60)
        logger.warning("RESETTING DATABASE - ALL DATA WILL BE LOST")
        logger.warning("=" * 60)

        await self._db_manager.drop_tables()
        return await self.seed()

    async def get_stats(self) -> dict:
        """
        Get database statistics.

        Returns:
            Dictionary with table counts
        """
        async def count_products(session: AsyncSession) -> int:
            return await session.scalar(select(func.count(Product.id)))

        return {
            "products": {
                "total": await self._db_manager.run_scoped(count_products),
            }
        }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

async def seed_demo_data(db_manager: DatabaseManager) -> int:
    """
    Seed the catalog store (convenience function).

    Returns:
        Number of products inserted
    """
    return await DatabaseSeeder(db_manager).seed()


async def reset_db(db_manager: DatabaseManager) -> int:
    """
    Reset the catalog store (convenience function).

    WARNING: Deletes all data. Development only.
    """
    return await DatabaseSeeder(db_manager).reset()
