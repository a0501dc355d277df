"""
General helper utilities for the connection cache.
"""

from typing import Any

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def parse_flag(value: Any) -> bool:
    """
    Interpret an option value as a boolean.

    Option values read from a connection URL are strings, so "0" and "off"
    must count as false.

    Args:
        value: Option value (bool, int or string)

    Returns:
        Boolean value

    Raises:
        ValueError: If a string is not a recognised boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v_lower = value.strip().lower()
        if v_lower in _TRUE_VALUES:
            return True
        if v_lower in _FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean value: {value}")
    return bool(value)
