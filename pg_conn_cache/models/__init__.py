#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures and capability interfaces used
throughout the connection cache.
"""

from .config import PoolConfig, freeze_options
from .handle import PoolHandle

__all__ = [
    "PoolConfig",
    "freeze_options",
    "PoolHandle",
]
