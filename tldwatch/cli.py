#!/usr/bin/env python3
"""Command-line interface for the IANA TLD watcher."""

import argparse
import sys

from .config import debug_from_env, get_sqlite_file, setup_logging
from .errors import TLDWatchError
from .pipeline import run


def main() -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description=(
            "Fetch the IANA TLD list, record unseen TLDs in SQLite "
            "and print them as a JSON array."
        ),
        epilog=(
            "Environment: SQLITE_FILE sets the database path (default ./db.sqlite), "
            "DEBUG=true enables debug logging."
        ),
    )

    parser.add_argument(
        "-debug",
        "--debug",
        action="store_true",
        help="enable debug mode",
    )

    args = parser.parse_args()

    sqlite_file = get_sqlite_file()

    # We have a debug env var as well as a debug CLI flag
    debug = args.debug or debug_from_env()

    logger = setup_logging(debug)

    try:
        run(logger, sqlite_file)
    except TLDWatchError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
