"""
Environment settings management module.

This module provides a centralized Env class that loads, validates, and
serves externally supplied settings (connection URL, cache size).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import DEFAULT_MAX_CONNECTIONS
from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)

# Module-level singleton instance
_ENV: Optional["Env"] = None


class ConfigError(Exception):
    """Raised when a connection URL or setting is invalid."""
    pass


@dataclass(frozen=True)
class Env:
    """Immutable container for environment-derived settings."""

    DATABASE_URL: Optional[str] = None
    MAX_CONNECTIONS: int = DEFAULT_MAX_CONNECTIONS

    @staticmethod
    def load(cli_overrides: Optional[Mapping[str, str]] = None) -> "Env":
        """
        Load settings from all sources with precedence handling.

        Args:
            cli_overrides: Optional mapping of CLI-provided values

        Returns:
            Configured Env instance

        Raises:
            ConfigError: If a setting is invalid
        """
        global _ENV

        try:
            config = ConfigLoader.load(schema=ConfigSchema, cli_overrides=cli_overrides)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        _ENV = Env.from_schema(config)
        logger.debug("Environment settings loaded successfully")
        return _ENV

    @staticmethod
    def from_schema(config: ConfigSchema) -> "Env":
        """Create an Env instance from a validated schema."""
        return Env(
            DATABASE_URL=config.database_url,
            MAX_CONNECTIONS=config.max_connections,
        )

    @staticmethod
    def current() -> "Env":
        """
        Return the globally-initialized Env instance.

        Raises:
            ConfigError: If Env.load() has not been called yet
        """
        if _ENV is None:
            raise ConfigError("Environment not initialized. Call Env.load() first.")
        return _ENV

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Env":
        """
        Create Env instance from mapping (useful for testing).

        Args:
            mapping: Dictionary of setting values keyed by env var name

        Returns:
            Env instance

        Raises:
            ConfigError: If a value cannot be parsed
        """
        database_url = mapping.get("DATABASE_URL") or None

        raw_max = mapping.get("PG_MAX_CONNECTIONS", str(DEFAULT_MAX_CONNECTIONS))
        try:
            max_connections = int(raw_max)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"PG_MAX_CONNECTIONS must be an integer, got {raw_max!r}") from e
        if max_connections < 0:
            raise ConfigError(f"PG_MAX_CONNECTIONS must be non-negative, got {max_connections}")

        return cls(DATABASE_URL=database_url, MAX_CONNECTIONS=max_connections)

    def to_dict(self) -> dict:
        return {
            "DATABASE_URL": self.DATABASE_URL,
            "MAX_CONNECTIONS": self.MAX_CONNECTIONS,
        }

    def mask(self) -> dict:
        """Return masked version for safe logging (hides the connection URL)."""
        return {
            "DATABASE_URL": "***" if self.DATABASE_URL else None,
            "MAX_CONNECTIONS": self.MAX_CONNECTIONS,
        }
