"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

The service recognizes two operational options:

- listen: HTTP listen address as "host:port"
- store:  product store backend, "memory" or "sql"

Supporting values (application name, debug logging and the SQLAlchemy URL
used by the "sql" backend) are loaded the same way.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class StoreBackend(str, Enum):
    """Available product store backends."""

    MEMORY = "memory"
    SQL = "sql"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        debug: Enable debug logging and SQL echo
        listen: HTTP listen address ("host:port")
        store: Product store backend selector
        database_url: SQLAlchemy connection string for the "sql" backend

    Example:
        >>> settings = Settings(listen="127.0.0.1:9000", store="sql")
        >>> settings.port
        9000
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    app_name: str = Field(
        default="Catalog Service",
        description="Display name for the application"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    listen: str = Field(
        default="0.0.0.0:8000",
        description="HTTP listen address as host:port"
    )

    store: StoreBackend = Field(
        default=StoreBackend.MEMORY,
        description="Product store backend: memory or sql"
    )

    database_url: str = Field(
        default="sqlite:///./storage/db/catalog.db",
        description="SQLAlchemy database connection string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("listen")
    @classmethod
    def validate_listen(cls, value: str) -> str:
        """
        Validate the listen address.

        Raises:
            ValueError: If the value is not host:port with a valid port
        """
        value = value.strip()
        host, sep, port = value.rpartition(":")
        if not sep or not host:
            raise ValueError(f"listen must be host:port, got {value!r}")
        if not port.isdigit() or not 1 <= int(port) <= 65535:
            raise ValueError(f"Invalid port in listen address: {value!r}")
        return value

    @field_validator("store", mode="before")
    @classmethod
    def normalize_store(cls, value):
        """Accept the backend name in any case."""
        if isinstance(value, str):
            return value.lower().strip()
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def listen_address(self) -> Tuple[str, int]:
        """Split listen into (host, port)."""
        host, _, port = self.listen.rpartition(":")
        # Bracketed IPv6 literal, e.g. [::1]:8000
        return host.strip("[]"), int(port)

    @property
    def host(self) -> str:
        """Server bind address."""
        return self.listen_address[0]

    @property
    def port(self) -> int:
        """Server port number."""
        return self.listen_address[1]

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================
    def get_database_path(self) -> Optional[Path]:
        """
        Extract database file path for SQLite databases.

        Returns:
            Path to database file, or None for in-memory SQLite and
            non-SQLite databases
        """
        if not self.database_url.startswith("sqlite:///"):
            return None
        db_path = self.database_url.replace("sqlite:///", "", 1)
        if not db_path or db_path == ":memory:":
            return None
        return Path(db_path)

    def ensure_directories(self) -> None:
        """Create the SQLite database directory when needed."""
        db_path = self.get_database_path()
        if db_path:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Database directory verified: {db_path.parent}")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"listen={self.listen!r}, "
            f"store={self.store.value!r})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Uses lru_cache so only one Settings instance is created for the
    process lifetime.
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings
