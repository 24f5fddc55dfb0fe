"""Utilities for fetching IANA data."""

from .download import open_tld_list

__all__ = [
    "open_tld_list",
]
