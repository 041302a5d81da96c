"""
==============================================================================
Settings Tests
==============================================================================

Tests for configuration loading and derived values.

==============================================================================
"""

from pathlib import Path

from catalog_app.config import Settings


class TestDatabaseUrl:
    """Tests for the connection string."""

    def test_default_points_at_local_file(self):
        """Test the default store is a local SQLite file with the async driver."""
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("sqlite+aiosqlite:///")
        assert settings.get_database_path() == Path("storage/db/catalog.db")

    def test_sync_sqlite_url_uses_async_driver(self):
        """Test plain sqlite URLs are switched to aiosqlite."""
        settings = Settings(_env_file=None, database_url="sqlite:///./data/app.db")
        assert settings.database_url == "sqlite+aiosqlite:///./data/app.db"

    def test_in_memory_has_no_path(self):
        """Test in-memory databases have no file path."""
        settings = Settings(_env_file=None, database_url="sqlite://")
        assert settings.database_url == "sqlite+aiosqlite://"
        assert settings.get_database_path() is None

    def test_server_database_untouched(self):
        """Test non-SQLite URLs are kept as given."""
        url = "postgresql+asyncpg://user:pw@localhost/catalog"
        settings = Settings(_env_file=None, database_url=url)
        assert settings.database_url == url
        assert settings.get_database_path() is None

    def test_environment_variable(self, monkeypatch, tmp_path: Path):
        """Test DATABASE_URL is read from the environment."""
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path}/env.db")
        settings = Settings(_env_file=None)
        assert settings.get_database_path() == tmp_path / "env.db"

    def test_ensure_directories_creates_parent(self, tmp_path: Path):
        """Test the database directory is created."""
        db_file = tmp_path / "nested" / "db" / "catalog.db"
        settings = Settings(_env_file=None, database_url=f"sqlite+aiosqlite:///{db_file}")

        settings.ensure_directories()

        assert db_file.parent.is_dir()


class TestAppSettings:
    """Tests for application settings."""

    def test_unknown_env_falls_back_to_development(self):
        """Test an unrecognised APP_ENV becomes development."""
        settings = Settings(_env_file=None, app_env="Qa")
        assert settings.app_env == "development"
        assert settings.is_development

    def test_production(self):
        """Test production mode is detected case-insensitively."""
        settings = Settings(_env_file=None, app_env=" PRODUCTION ")
        assert settings.is_production

    def test_cors_origins_parsing(self):
        """Test CORS origins are parsed from JSON, with a wildcard fallback."""
        assert Settings(
            _env_file=None, cors_origins='["http://localhost:3000"]'
        ).cors_origins_list == ["http://localhost:3000"]
        assert Settings(_env_file=None, cors_origins="not json").cors_origins_list == ["*"]
