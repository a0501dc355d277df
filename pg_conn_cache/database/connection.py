"""
Database connection module.

This module wraps psycopg connections in handles the pool can probe and
creates new connections from a PoolConfig.
"""

import logging
from typing import Any, Optional, Sequence

import psycopg
from psycopg.pq import TransactionStatus

from ..config.env import ConfigError
from ..constants import HANDLE_ATTRIBUTES
from ..models import PoolConfig
from ..utils import parse_flag
from .utils import classify_database_error

logger = logging.getLogger(__name__)


class DatabaseConnectionError(ConnectionError):
    """
    Raised when the driver cannot establish a new connection.

    Attributes:
        error_type: "permanent", "transient" or "systemic"
    """

    def __init__(self, message: str, error_type: str = "transient"):
        super().__init__(message)
        self.error_type = error_type


class PgHandle:
    """
    A psycopg connection plus the handle attributes from the pool options.

    ``print_error`` and ``raise_error`` control what ``execute`` does when
    the server rejects a statement.
    """

    def __init__(
        self,
        connection: "psycopg.Connection",
        print_error: bool = False,
        raise_error: bool = True,
    ):
        self.connection = connection
        self.print_error = print_error
        self.raise_error = raise_error

    def __repr__(self) -> str:
        state = "closed" if self.connection.closed else "open"
        return f"<PgHandle {state} at 0x{id(self):x}>"

    def is_alive(self) -> bool:
        """
        Check whether the connection can still be used.

        An idle connection is probed with a trivial query. A connection
        inside a transaction (open, running or failed) is alive as long as
        it is not broken: a failed transaction rejects every statement until
        rolled back, so it cannot be probed, but it is still usable.
        """
        conn = self.connection
        if conn.closed or conn.broken:
            return False

        status = conn.info.transaction_status
        if status == TransactionStatus.UNKNOWN:
            return False
        if status != TransactionStatus.IDLE:
            return True

        try:
            conn.execute("SELECT 1")
            # Don't leave a transaction open that the probe started
            if not conn.autocommit:
                conn.rollback()
            return True
        except psycopg.Error as e:
            logger.debug(f"Liveness probe failed: {e}")
            return False

    def is_active(self) -> bool:
        return not (self.connection.closed or self.connection.broken)

    def execute(self, query: str, params: Optional[Sequence[Any]] = None) -> Optional["psycopg.Cursor"]:
        """
        Run a statement on this handle.

        Args:
            query: SQL statement
            params: Optional query parameters

        Returns:
            Cursor with the results, or None if the statement failed and
            raise_error is off
        """
        try:
            return self.connection.execute(query, params)
        except psycopg.Error as e:
            if self.print_error:
                logger.warning(f"Statement failed: {e}")
            if self.raise_error:
                raise
            return None

    def close(self) -> None:
        """Close the connection; errors while closing are only logged."""
        if self.connection.closed:
            return
        try:
            self.connection.close()
        except psycopg.Error as e:
            logger.debug(f"Error closing connection: {e}")


def _flag(config: PoolConfig, name: str, default: bool) -> bool:
    try:
        return parse_flag(config.options.get(name, default))
    except ValueError as e:
        raise ConfigError(f"Option {name}: {e}") from e


def create_db_connection(config: PoolConfig) -> PgHandle:
    """
    Open a new database connection.

    Handle attributes (AutoCommit, PrintError, RaiseError) are taken out of
    the options; every other option is passed to the driver as a
    connection parameter. The attempt is made exactly once.

    Args:
        config: Pool configuration

    Returns:
        Handle wrapping the new connection

    Raises:
        ConfigError: If a handle attribute has an unreadable value
        DatabaseConnectionError: If the driver fails to connect
    """
    autocommit = _flag(config, "AutoCommit", True)
    print_error = _flag(config, "PrintError", False)
    raise_error = _flag(config, "RaiseError", True)

    params = {k: v for k, v in config.options.items() if k not in HANDLE_ATTRIBUTES}
    if config.username:
        params["user"] = config.username
    if config.password:
        params["password"] = config.password

    try:
        connection = psycopg.connect(config.dsn, autocommit=autocommit, **params)
    except psycopg.Error as e:
        raise DatabaseConnectionError(
            f"Failed to connect to {config.dsn or 'default database'}: {e}",
            error_type=classify_database_error(e),
        ) from e

    return PgHandle(connection, print_error=print_error, raise_error=raise_error)
