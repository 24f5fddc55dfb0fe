"""Persistent storage for seen TLDs."""

from .sqlite import InsertStatement, TLDStore

__all__ = [
    "InsertStatement",
    "TLDStore",
]
