"""
Utilities module for the connection cache.

This module provides shared utility functions organized by concern:
- Logging utilities for consistent logging setup and pool events
- General helper functions for option values
"""

from .logging import setup_logging, log_pool_event
from .helpers import parse_flag

__all__ = [
    "setup_logging",
    "log_pool_event",
    "parse_flag",
]
