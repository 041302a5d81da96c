"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, database manager, service and client fixtures. Every
test gets its own file-backed SQLite database under tmp_path.

==============================================================================
"""

import pytest
from pathlib import Path
from typing import AsyncGenerator, Generator
from fastapi.testclient import TestClient

from catalog_app.config import Settings
from catalog_app.db.database import DatabaseManager
from catalog_app.main import Application
from catalog_app.services.product_service import ProductService


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

def make_settings(database_path: Path, **overrides) -> Settings:
    """Settings pointing at a test database, ignoring any .env file."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{database_path}",
        "debug": False,
        "seed_demo_data": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings for a fresh temporary database."""
    return make_settings(tmp_path / "catalog.db")


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
async def raw_db_manager(settings: Settings) -> AsyncGenerator[DatabaseManager, None]:
    """DatabaseManager on an empty database without any tables."""
    manager = DatabaseManager(settings)
    yield manager
    await manager.dispose()


@pytest.fixture
async def db_manager(raw_db_manager: DatabaseManager) -> DatabaseManager:
    """DatabaseManager with the schema in place and no rows."""
    await raw_db_manager.migrate()
    return raw_db_manager


@pytest.fixture
def product_service(db_manager: DatabaseManager) -> ProductService:
    """ProductService over an empty catalog."""
    return ProductService(db_manager)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for an application started (and seeded) on the test database."""
    app = Application(settings).app

    with TestClient(app) as test_client:
        yield test_client
