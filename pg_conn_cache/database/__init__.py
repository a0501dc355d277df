#!/usr/bin/env python3
"""
Database package for the connection cache.

This package provides URL-based configuration, psycopg connection handles,
and the pool that caches them.
"""

from .config import (
    config_from_url,
    merge_options,
    validate_database_url,
    create_pool_config,
)

from .connection import (
    PgHandle,
    DatabaseConnectionError,
    create_db_connection,
)

from .pool import (
    PgPool,
)

from .utils import (
    classify_database_error,
)

__all__ = [
    # Configuration
    "config_from_url",
    "merge_options",
    "validate_database_url",
    "create_pool_config",
    # Connections
    "PgHandle",
    "DatabaseConnectionError",
    "create_db_connection",
    # Pool
    "PgPool",
    # Utilities
    "classify_database_error",
]
