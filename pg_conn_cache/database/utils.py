"""
Database utilities module.

This module provides error classification for driver failures.
"""


def classify_database_error(exception: Exception) -> str:
    """
    Classify database errors into permanent, transient, or systemic categories.

    Args:
        exception: Database exception to classify

    Returns:
        Error type: "permanent", "transient", or "systemic"
    """
    error_str = str(exception).lower()

    # Permanent errors - the request itself is wrong
    permanent_indicators = [
        "invalid connection option",
        "invalid dsn",
        "invalid integer value",
        "missing \"=\" after",
        "could not translate host name",
        "invalid port number",
    ]

    for indicator in permanent_indicators:
        if indicator in error_str:
            return "permanent"

    # Systemic errors - credentials or server setup
    systemic_indicators = [
        "authentication failed",
        "permission denied",
        "role does not exist",
        "does not exist",  # database "x" does not exist
        "ssl required",
        "no pg_hba.conf entry",
        "too many connections",
    ]

    for indicator in systemic_indicators:
        if indicator in error_str:
            return "systemic"

    # Default to transient - connection refused, timeouts, server restarts
    return "transient"
