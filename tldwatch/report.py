"""Collect and print the TLDs added in this run."""

import json
import logging
import sys
from typing import Iterable, TextIO

from .errors import EncodingError, InsertError
from .parse.tlds_txt import TLD
from .store.sqlite import InsertStatement


def collect_new_tlds(
    statement: InsertStatement,
    tlds: Iterable[TLD],
    logger: logging.Logger,
) -> list[TLD]:
    """
    Insert each TLD and keep the ones that were not stored before.

    Duplicates are skipped silently. Other insert failures are logged and
    the TLD is skipped; the batch always runs to the end.

    Returns:
        Newly stored TLDs, in input order
    """
    new_tlds: list[TLD] = []

    for tld in tlds:
        try:
            inserted = statement.insert(tld)
        except InsertError as e:
            logger.error(
                "failed to exec insert statement",
                extra={"tld": e.tld, "err": e.reason},
            )
            continue

        if inserted:
            new_tlds.append(tld)

    return new_tlds


def write_json_report(tlds: list[TLD], out: TextIO | None = None) -> None:
    """
    Write ``tlds`` as a single JSON array followed by a newline.

    Raises:
        EncodingError: If the array cannot be serialized or written
    """
    if out is None:
        out = sys.stdout

    try:
        out.write(json.dumps(list(tlds), ensure_ascii=False))
        out.write("\n")
        out.flush()
    except (TypeError, ValueError, OSError) as e:
        raise EncodingError(f"failed to JSON-print to stdout: {e}") from e
