#!/usr/bin/env python3
"""
Application Constants

This module contains the connection defaults and exit codes used
throughout the PostgreSQL connection cache.
"""

from types import MappingProxyType

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 3
EXIT_CONNECTION_ERROR = 4
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Connection URL scheme accepted by the configuration builder
URL_SCHEME = "postgresql"

# Connection defaults
DEFAULT_DSN = "dbname=test"
DEFAULT_MAX_CONNECTIONS = 5  # Idle handles kept for reuse
DEFAULT_OPTIONS = MappingProxyType({
    "AutoCommit": True,
    "PrintError": False,
    "RaiseError": True,
})

# Options interpreted by the handle rather than passed to the driver
HANDLE_ATTRIBUTES = ("AutoCommit", "PrintError", "RaiseError")
