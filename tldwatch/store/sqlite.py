"""SQLite storage for previously seen TLDs."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Final, Iterator

from ..errors import InsertError, PrepareError, SchemaInitError, StoreOpenError
from ..parse.tlds_txt import TLD

CREATE_TABLE_SQL: Final[str] = """
    CREATE TABLE tlds (
        tld TEXT PRIMARY KEY NOT NULL
    ) STRICT
"""

INSERT_TLD_SQL: Final[str] = "INSERT INTO tlds (tld) VALUES (?)"

SELECT_TLDS_SQL: Final[str] = "SELECT tld FROM tlds ORDER BY rowid"

# Extended result codes for a duplicate key
_UNIQUE_VIOLATIONS: Final[frozenset[int]] = frozenset(
    {sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY, sqlite3.SQLITE_CONSTRAINT_UNIQUE}
)


class InsertStatement:
    """A prepared insert, reused for every TLD of a run."""

    def __init__(self, cursor: sqlite3.Cursor):
        self._cursor = cursor

    def insert(self, tld: TLD) -> bool:
        """
        Insert a single TLD.

        Returns:
            True if the TLD was stored, False if it was already known

        Raises:
            InsertError: If the insert failed for any other reason
        """
        try:
            self._cursor.execute(INSERT_TLD_SQL, (tld,))
        except sqlite3.IntegrityError as e:
            if e.sqlite_errorcode in _UNIQUE_VIOLATIONS:
                return False
            raise InsertError(tld, str(e)) from e
        except sqlite3.Error as e:
            raise InsertError(tld, str(e)) from e
        return True


class TLDStore:
    """
    Append-only set of TLDs backed by a single SQLite table.

    The connection runs in autocommit mode, so every insert is durable on
    its own and a failed insert never rolls back earlier ones.
    """

    def __init__(self, conn: sqlite3.Connection, is_first_run: bool, logger: logging.Logger):
        self._conn = conn
        self._is_first_run = is_first_run
        self._logger = logger

    @classmethod
    def open(cls, path: Path | str, logger: logging.Logger) -> "TLDStore":
        """
        Open or create the database at ``path``.

        Whether this is the first run is decided before the file is opened,
        since opening creates it.

        Raises:
            StoreOpenError: If the database cannot be opened
        """
        is_first_run = not Path(path).exists()

        try:
            conn = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as e:
            raise StoreOpenError(f"failed to open sqlite database: {e}") from e

        return cls(conn, is_first_run, logger)

    @property
    def is_first_run(self) -> bool:
        return self._is_first_run

    def ensure_schema(self) -> None:
        """
        Create the ``tlds`` table in a single transaction.

        Raises:
            SchemaInitError: If the table could not be created
        """
        try:
            self._conn.execute("BEGIN")
            self._conn.execute(CREATE_TABLE_SQL)
            self._conn.execute("COMMIT")
        except sqlite3.Error as e:
            if self._conn.in_transaction:
                self._rollback()
            raise SchemaInitError(f"failed to init database: {e}") from e

        self._logger.info("successfully initialized database")

    @contextmanager
    def prepare_insert(self) -> Iterator[InsertStatement]:
        """
        Prepare the insert statement for a batch of TLDs.

        The statement is compiled up front so a missing or broken table
        fails here rather than once per TLD. Its cursor is closed when the
        block exits.

        Raises:
            PrepareError: If the statement cannot be compiled
        """
        cursor = None
        try:
            cursor = self._conn.cursor()
            cursor.execute(f"EXPLAIN {INSERT_TLD_SQL}", ("",)).fetchall()
        except sqlite3.Error as e:
            if cursor is not None:
                self._close_cursor(cursor)
            raise PrepareError(f"failed to prepare insert statement: {e}") from e

        try:
            yield InsertStatement(cursor)
        finally:
            self._close_cursor(cursor)

    def list_tlds(self) -> list[TLD]:
        """Return every stored TLD in insertion order."""
        return [TLD(row[0]) for row in self._conn.execute(SELECT_TLDS_SQL)]

    def close(self) -> None:
        try:
            self._conn.close()
        except sqlite3.Error as e:
            self._logger.error("failed to close database", extra={"err": str(e)})

    def __enter__(self) -> "TLDStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _rollback(self) -> None:
        try:
            self._conn.execute("ROLLBACK")
        except sqlite3.Error as e:
            self._logger.error("failed to roll back schema init", extra={"err": str(e)})

    def _close_cursor(self, cursor: sqlite3.Cursor) -> None:
        try:
            cursor.close()
        except sqlite3.Error as e:
            self._logger.error("failed to close insert statement", extra={"err": str(e)})
