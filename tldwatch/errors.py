"""Exceptions raised while fetching and recording TLDs."""


class TLDWatchError(Exception):
    """Base class for errors that abort a run."""

    pass


class FetchError(TLDWatchError):
    """Raised when the TLD list cannot be fetched within the deadline."""

    pass


class StoreOpenError(TLDWatchError):
    """Raised when the SQLite database cannot be opened."""

    pass


class SchemaInitError(TLDWatchError):
    """Raised when the table cannot be created on first run."""

    pass


class PrepareError(TLDWatchError):
    """Raised when the insert statement cannot be prepared."""

    pass


class EncodingError(TLDWatchError):
    """Raised when the new TLDs cannot be written as JSON."""

    pass


class DecodeError(ValueError):
    """Raised when a line is not a valid IDNA label."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"failed to puny decode {line!r}: {reason}")
        self.line = line
        self.reason = reason


class InsertError(Exception):
    """Raised when an insert fails for a reason other than a duplicate."""

    def __init__(self, tld: str, reason: str):
        super().__init__(f"failed to insert {tld!r}: {reason}")
        self.tld = tld
        self.reason = reason
