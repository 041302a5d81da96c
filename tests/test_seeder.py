"""
==============================================================================
DatabaseSeeder Tests
==============================================================================

Tests for startup migration and demo data seeding.

==============================================================================
"""

from decimal import Decimal
from pathlib import Path

import pytest

from catalog_app.db.database import DatabaseManager
from catalog_app.db.seeder import DatabaseSeeder, seed_demo_data, reset_db
from catalog_app.services.product_service import ProductService

from conftest import make_settings


class TestSeed:
    """Tests for seeding an empty or populated store."""

    async def test_fresh_store_gets_three_products(self, raw_db_manager: DatabaseManager):
        """Test seeding creates the schema and inserts the demo products."""
        inserted = await DatabaseSeeder(raw_db_manager).seed()

        products = await ProductService(raw_db_manager).list_all()

        assert inserted == 3
        assert [p.name for p in products] == ["Demo Shampoo", "Hair Serum", "Conditioner"]
        assert [p.price for p in products] == [
            Decimal("12.90"),
            Decimal("24.50"),
            Decimal("9.99"),
        ]

    async def test_seed_is_idempotent(self, raw_db_manager: DatabaseManager):
        """Test a second seeding inserts nothing."""
        assert await seed_demo_data(raw_db_manager) == 3
        assert await seed_demo_data(raw_db_manager) == 0

        assert len(await ProductService(raw_db_manager).list_all()) == 3

    async def test_populated_store_is_left_alone(self, db_manager: DatabaseManager):
        """Test seeding does nothing when any product exists."""
        service = ProductService(db_manager)
        product_id = await service.add("Own Product", Decimal("1.00"))

        assert await DatabaseSeeder(db_manager).seed() == 0
        assert [p.id for p in await service.list_all()] == [product_id]

    async def test_timestamps_are_staggered(self, raw_db_manager: DatabaseManager):
        """Test demo products are ten minutes and one hour older than the newest."""
        await DatabaseSeeder(raw_db_manager).seed()

        newest, middle, oldest = await ProductService(raw_db_manager).list_all()

        assert (newest.created_at_utc - middle.created_at_utc).total_seconds() == 600
        assert (newest.created_at_utc - oldest.created_at_utc).total_seconds() == 3600

    async def test_session_released(self, raw_db_manager: DatabaseManager):
        """Test seeding leaves no open session."""
        await DatabaseSeeder(raw_db_manager).seed()

        assert raw_db_manager.open_sessions == 0


class TestReset:
    """Tests for development reset."""

    async def test_reset_restores_demo_data(self, db_manager: DatabaseManager):
        """Test reset replaces all products with the demo set."""
        service = ProductService(db_manager)
        await service.add("Own Product", Decimal("1.00"))

        assert await reset_db(db_manager) == 3

        names = [p.name for p in await service.list_all()]
        assert names == ["Demo Shampoo", "Hair Serum", "Conditioner"]

    async def test_reset_refused_in_production(self, tmp_path: Path):
        """Test reset raises in production mode."""
        settings = make_settings(tmp_path / "prod.db", app_env="production")
        manager = DatabaseManager(settings)
        try:
            with pytest.raises(RuntimeError):
                await DatabaseSeeder(manager, settings).reset()
        finally:
            await manager.dispose()


class TestStats:
    """Tests for get_stats."""

    async def test_counts_products(self, raw_db_manager: DatabaseManager):
        """Test stats report the number of stored products."""
        seeder = DatabaseSeeder(raw_db_manager)
        await seeder.seed()

        stats = await seeder.get_stats()

        assert stats["products"]["total"] == 3
