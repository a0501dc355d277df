"""
Database configuration management module.

This module translates postgresql:// connection URLs into pool
configuration and validates URLs before a pool config is built.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, unquote, urlsplit

import psycopg
from psycopg.conninfo import make_conninfo

from ..config.env import ConfigError
from ..constants import URL_SCHEME
from ..models import PoolConfig, freeze_options

logger = logging.getLogger(__name__)

_USERINFO_RE = re.compile(r"^([^:]+)(?::([^:]+))?$")


def merge_options(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge two option maps, last writer wins.

    Keys present in ``overlay`` replace the same keys in ``base``; keys only
    in ``base`` keep their values. Neither input is modified.

    Args:
        base: Existing options (e.g. the defaults)
        overlay: Options that take precedence

    Returns:
        New merged options dictionary
    """
    merged = dict(base)
    merged.update(overlay)
    return merged


def _split_netloc(netloc: str) -> Tuple[Optional[str], str, str]:
    """Split a raw netloc into (userinfo, host, port) without decoding."""
    userinfo, sep, hostinfo = netloc.rpartition("@")
    if not sep:
        userinfo = None

    if hostinfo.startswith("["):
        end = hostinfo.find("]")
        if end == -1:
            raise ValueError("unterminated IPv6 address")
        host, rest = hostinfo[1:end], hostinfo[end + 1:]
        if rest and not rest.startswith(":"):
            raise ValueError("garbage after IPv6 address")
        port = rest[1:]
    else:
        host, _, port = hostinfo.partition(":")

    return userinfo, host, port


def config_from_url(url: Optional[str], base: Optional[PoolConfig] = None) -> PoolConfig:
    """
    Build a pool configuration from a connection URL.

    Format: postgresql://[user[:password]@][host][:port]/database[?opt=v&...]

    The host may be a percent-encoded socket path
    (``postgresql://sri@%2ftmp%2fpg.sock/db4``). Query parameters are merged
    into the options of ``base``. Everything is validated before a new
    config is produced, so on error ``base`` is untouched.

    Args:
        url: Connection URL; empty or None returns ``base`` unchanged
        base: Config to update (defaults to a fresh default config)

    Returns:
        Updated PoolConfig

    Raises:
        ConfigError: If the URL is malformed or not postgresql://
    """
    if base is None:
        base = PoolConfig.default()
    if not url:
        return base

    try:
        parsed = urlsplit(url)
        userinfo, host, port = _split_netloc(parsed.netloc)
    except ValueError as e:
        raise ConfigError(f'Invalid PostgreSQL connection string "{url}": {e}') from e

    if parsed.scheme != URL_SCHEME:
        raise ConfigError(f'Invalid PostgreSQL connection string "{url}"')
    if port and not port.isdigit():
        raise ConfigError(f'Invalid PostgreSQL connection string "{url}": bad port {port!r}')

    database = unquote(parsed.path.lstrip("/").split("/")[0])
    try:
        dsn = make_conninfo(
            dbname=database or None,
            host=unquote(host) or None,
            port=port or None,
        )
    except psycopg.Error as e:
        raise ConfigError(f'Invalid PostgreSQL connection string "{url}": {e}') from e

    changes: Dict[str, Any] = {"dsn": dsn}

    match = _USERINFO_RE.match(userinfo or "")
    if match:
        changes["username"] = unquote(match.group(1))
        if match.group(2) is not None:
            changes["password"] = unquote(match.group(2))

    # Repeated keys keep their last value
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    changes["options"] = freeze_options(merge_options(base.options, query))

    return base._replace(**changes)


def validate_database_url(url: str) -> bool:
    """
    Validate that a database URL has the correct format.

    Args:
        url: Database URL to validate

    Returns:
        True if URL format is valid, False otherwise
    """
    if not url:
        logger.error("Database URL is empty")
        return False

    try:
        config_from_url(url)
    except ConfigError as e:
        logger.error(str(e))
        return False

    return True


def create_pool_config(
    url: Optional[str] = None,
    max_connections: Optional[int] = None,
) -> Optional[PoolConfig]:
    """
    Create a pool configuration with validation.

    Args:
        url: Database connection URL (defaults apply if empty)
        max_connections: Idle handles to cache (default: DEFAULT_MAX_CONNECTIONS)

    Returns:
        PoolConfig object or None if validation fails
    """
    if url and not validate_database_url(url):
        return None

    config = config_from_url(url)

    if max_connections is not None:
        if max_connections < 0:
            logger.error(f"Max connections must be non-negative, got {max_connections}")
            return None
        config = config._replace(max_connections=max_connections)

    return config

