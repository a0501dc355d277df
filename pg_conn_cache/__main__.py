#!/usr/bin/env python3
"""
Enable execution of the pg_conn_cache package as a module.

This allows running the package with: python -m pg_conn_cache
"""

from .cli.main import main

if __name__ == "__main__":
    main()
