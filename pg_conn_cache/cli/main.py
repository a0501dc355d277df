"""
CLI main application module.

This module contains the entry point that parses a connection URL,
optionally borrows one handle through the pool, and reports the result.
"""

import json
import logging
import sys

from ..constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_CONNECTION_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)

from ..config import ConfigError, Env
from ..config.loader import ConfigLoader

from ..database import (
    PgPool,
    DatabaseConnectionError,
    create_pool_config,
)

from .parser import (
    create_argument_parser,
)

from ..utils import (
    setup_logging,
)

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    try:
        env = Env.from_schema(ConfigLoader.load(cli_args=args))
    except (ValueError, ConfigError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    if not env.DATABASE_URL:
        logger.error("Database URL is required. Set DATABASE_URL or use --db-url")
        sys.exit(EXIT_CONFIG_ERROR)

    config = create_pool_config(env.DATABASE_URL, max_connections=env.MAX_CONNECTIONS)
    if config is None:
        sys.exit(EXIT_CONFIG_ERROR)

    if args.dry_run:
        print(json.dumps(config.mask(), indent=2, default=str))
        return EXIT_SUCCESS

    pool = PgPool(config=config)
    try:
        with pool.db() as handle:
            alive = handle.is_alive()
        logger.info(f"Connected to {config.dsn or 'default database'} (alive={alive})")
        print(json.dumps({"dsn": config.dsn, "alive": alive, "idle": len(pool)}))
        if not alive:
            sys.exit(EXIT_CONNECTION_ERROR)
        return EXIT_SUCCESS

    except DatabaseConnectionError as e:
        logger.error(f"Connection failed ({e.error_type}): {e}")
        sys.exit(EXIT_CONNECTION_ERROR)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)
    finally:
        pool.close()
