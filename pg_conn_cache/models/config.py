#!/usr/bin/env python3
"""
Pool Configuration Models

This module contains the configuration value shared by the URL builder
and the connection pool.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple

from ..constants import DEFAULT_DSN, DEFAULT_MAX_CONNECTIONS, DEFAULT_OPTIONS


def freeze_options(options: Mapping[str, Any]) -> Mapping[str, Any]:
    """
    Return a read-only copy of an option map.

    Args:
        options: Option map to copy

    Returns:
        Read-only mapping detached from ``options``
    """
    return MappingProxyType(dict(options))


def _is_secret(key: str) -> bool:
    return "password" in key.lower()


class PoolConfig(NamedTuple):
    """
    Connection settings for one pool.

    The value is treated as immutable: updates go through ``_replace`` and
    produce a new instance, so a half-applied change is never observable.
    Options are held as read-only mappings (see ``freeze_options``) so
    snapshots never share a mutable dict.

    Attributes:
        dsn: libpq connection string (database, host, port or socket path)
        username: Database user, empty for the driver default
        password: Database password, empty for none
        options: Handle attributes and extra connection parameters
        max_connections: Maximum number of idle handles kept for reuse
    """

    dsn: str = DEFAULT_DSN
    username: str = ""
    password: str = ""
    options: Mapping[str, Any] = DEFAULT_OPTIONS
    max_connections: int = DEFAULT_MAX_CONNECTIONS

    @classmethod
    def default(cls) -> "PoolConfig":
        """Return a config with the default options."""
        return cls(options=freeze_options(DEFAULT_OPTIONS))

    def mask(self) -> Dict[str, Any]:
        """
        Return masked version for safe logging (hides passwords).

        Password-like option keys (``password``, ``sslpassword``) are masked
        as well, since they are forwarded to the driver.

        Returns:
            Dictionary with all configuration values, secrets masked
        """
        return {
            "dsn": self.dsn,
            "username": self.username,
            "password": "***" if self.password else "",
            "options": {
                k: "***" if _is_secret(k) and v else v
                for k, v in self.options.items()
            },
            "max_connections": self.max_connections,
        }
