#!/usr/bin/env python3
"""
CLI package for the connection cache.

This package provides the argument parser and the connection check command.
"""

from .parser import (
    create_argument_parser,
)

from .main import (
    main,
)

__all__ = [
    "create_argument_parser",
    "main",
]
