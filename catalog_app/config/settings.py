"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

This module implements the Singleton pattern to ensure a single global
configuration instance throughout the application lifecycle.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- A single named connection string for the catalog store
- Computed properties for derived values

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)

ASYNC_SQLITE_SCHEME = "sqlite+aiosqlite://"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode (SQL echo, verbose logging)
        host: Server bind address
        port: Server port number
        database_url: SQLAlchemy connection string for the catalog store
        seed_demo_data: Insert sample products on startup when empty
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> print(settings.database_url)
        'sqlite+aiosqlite:///./storage/db/catalog.db'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging and SQL echo"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="127.0.0.1",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # DATABASE SETTINGS
    # =========================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./storage/db/catalog.db",
        description="SQLAlchemy connection string for the catalog store"
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Insert sample products on startup if the table is empty"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown values fall back to 'development'.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        """
        Use the async driver for SQLite connection strings.

        Args:
            value: Raw connection string

        Returns:
            Connection string usable by an AsyncEngine
        """
        value = value.strip()
        if value.startswith("sqlite://"):
            return ASYNC_SQLITE_SCHEME + value[len("sqlite://"):]
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for in-memory and non-SQLite
            databases
        """
        prefix = ASYNC_SQLITE_SCHEME + "/"
        if not self.database_url.startswith(prefix):
            return None

        db_path = self.database_url[len(prefix):]
        if not db_path or db_path == ":memory:":
            return None
        if db_path.startswith("./"):
            db_path = db_path[2:]
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the database directory (SQLite only)."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug("Required directories created/verified")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Uses lru_cache to ensure only one Settings instance is created
    throughout the application lifecycle.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    settings.ensure_directories()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
