"""
Settings management for the connection cache.

This module provides centralized settings handling with support for
environment variables, .env files, and CLI overrides.

Uses a schema-driven approach with Pydantic for validation.
"""

from .env import Env, ConfigError
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Env", "ConfigError", "ConfigSchema", "ConfigLoader"]
