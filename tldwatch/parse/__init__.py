"""Parsers for IANA data files."""

from .tlds_txt import TLD, decode_tld, parse_tld_lines, parse_tlds_file

__all__ = [
    "TLD",
    "decode_tld",
    "parse_tld_lines",
    "parse_tlds_file",
]
