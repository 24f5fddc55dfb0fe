"""Configuration for the IANA TLD watcher."""

import logging
import os
import sys
from typing import Final

from pythonjsonlogger.json import JsonFormatter

TLD_LIST_URL: Final[str] = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"

# Seconds; applies to the whole fetch, not to persistence
REQUEST_TIMEOUT: Final[float] = 10.0

DEFAULT_SQLITE_FILE: Final[str] = "./db.sqlite"

# Environment variables
SQLITE_FILE_ENV: Final[str] = "SQLITE_FILE"
DEBUG_ENV: Final[str] = "DEBUG"

LOGGER_NAME: Final[str] = "tldwatch"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s %(message)s"


def getenv(key: str, fallback: str) -> str:
    """Return the environment variable ``key``, or ``fallback`` if unset or empty."""
    value = os.environ.get(key, "")
    if value == "":
        return fallback
    return value


def get_sqlite_file() -> str:
    """Resolve the SQLite database path from the environment."""
    return getenv(SQLITE_FILE_ENV, DEFAULT_SQLITE_FILE)


def debug_from_env() -> bool:
    """The debug override is only honoured for the literal value ``"true"``."""
    return getenv(DEBUG_ENV, "false") == "true"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configure and return the application logger.

    Log records are written to stderr as one JSON object per line. Extra
    fields passed via ``extra=`` end up as top-level keys of the object.

    Args:
        debug: Log at DEBUG instead of INFO

    Returns:
        The configured ``tldwatch`` logger, to be passed to each component
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter(LOG_FORMAT))
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False

    return logger
