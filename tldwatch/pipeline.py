"""Fetch the IANA TLD list and report TLDs not seen before."""

import logging
from pathlib import Path
from typing import TextIO

import httpx

from .config import REQUEST_TIMEOUT, TLD_LIST_URL
from .parse.tlds_txt import TLD, parse_tld_lines
from .report import collect_new_tlds, write_json_report
from .store.sqlite import TLDStore
from .utilities.download import open_tld_list


def run(
    logger: logging.Logger,
    sqlite_file: Path | str,
    url: str = TLD_LIST_URL,
    timeout: float = REQUEST_TIMEOUT,
    out: TextIO | None = None,
    transport: httpx.BaseTransport | None = None,
) -> list[TLD]:
    """
    Run one fetch, diff and persist pass.

    The fetch is bounded by ``timeout``. Persistence starts only after the
    whole list has been read and is not bound by that deadline, so a slow
    fetch never cuts the insert phase short.

    Args:
        logger: Application logger
        sqlite_file: Path of the SQLite database
        url: URL of the TLD list
        timeout: Seconds allowed for the fetch
        out: Stream for the JSON report (defaults to stdout)
        transport: Optional httpx transport (used by tests)

    Returns:
        The TLDs that were new in this run

    Raises:
        TLDWatchError: On any fatal error; nothing is written to ``out``
    """
    with open_tld_list(logger, url=url, timeout=timeout, transport=transport) as lines:
        tlds = parse_tld_lines(lines, logger)

    logger.debug("fetched TLD list", extra={"url": url, "count": len(tlds)})

    with TLDStore.open(sqlite_file, logger) as store:
        if store.is_first_run:
            store.ensure_schema()

        with store.prepare_insert() as statement:
            new_tlds = collect_new_tlds(statement, tlds, logger)

    logger.debug("recorded new TLDs", extra={"count": len(new_tlds)})

    write_json_report(new_tlds, out)

    return new_tlds
