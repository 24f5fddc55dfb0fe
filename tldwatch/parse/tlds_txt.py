"""Parser for the IANA TLDs text file."""

import logging
from typing import Iterable, NewType

import idna

from ..errors import DecodeError

TLD = NewType("TLD", str)


def parse_tld_lines(lines: Iterable[str], logger: logging.Logger) -> list[TLD]:
    """
    Parse lines of the IANA TLD list into normalized TLDs.

    Lines are stripped and lowercased; empty lines and ``#`` comments are
    skipped. A-labels (``xn--...``) are decoded to Unicode. A line that
    fails to decode is logged and kept as-is.

    Args:
        lines: Lines of the TLD list, in source order
        logger: Logger for decode failures

    Returns:
        List of TLDs in encounter order (duplicates are kept)
    """
    tlds: list[TLD] = []

    for raw_line in lines:
        line = raw_line.strip().lower()
        if not line or line.startswith("#"):
            continue

        try:
            tld = decode_tld(line)
        except DecodeError as e:
            logger.error(str(e), extra={"line": e.line, "err": e.reason})
            tld = TLD(line)

        tlds.append(tld)

    return tlds


def parse_tlds_file(content: str, logger: logging.Logger) -> list[TLD]:
    """Parse the full text of a TLD list file."""
    return parse_tld_lines(content.splitlines(), logger)


def decode_tld(line: str) -> TLD:
    """
    Decode an ASCII-compatible label to its Unicode form.

    Uses IDNA 2008 rules, including the bidi rule for right-to-left labels.
    Labels that are not A-labels come back unchanged.

    Raises:
        DecodeError: If the label is not valid IDNA
    """
    try:
        return TLD(idna.decode(line))
    except UnicodeError as e:
        # idna.IDNAError is a UnicodeError, as are raw punycode failures
        raise DecodeError(line, str(e)) from e
