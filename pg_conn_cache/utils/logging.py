"""
Logging utilities for the connection cache.

This module provides centralized logging configuration and the structured
event format used by the pool.
"""

import json
import logging
import os
import time
from typing import Any, Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # psycopg is chatty at DEBUG
    logging.getLogger("psycopg").setLevel(logging.WARNING)


def log_pool_event(
    event: str,
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    **fields: Any,
):
    """
    Log a structured, machine-readable pool lifecycle event.

    The record always carries the event name, a timestamp and the id of the
    process that emitted it, which makes fork resets easy to follow when
    several workers share one log.

    Args:
        event: Event name (e.g. "connect", "fork_reset", "evict")
        logger: Logger instance to use (defaults to current module logger)
        level: Logging level for the record
        **fields: Extra JSON-serializable values to include
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if not logger.isEnabledFor(level):
        return

    record = {
        "event_type": event,
        "timestamp": time.time(),
        "pid": os.getpid(),
    }
    record.update(fields)

    logger.log(level, f"POOL_EVENT: {json.dumps(record, ensure_ascii=False, default=str)}")
