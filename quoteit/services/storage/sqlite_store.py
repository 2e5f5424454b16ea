"""
SQLite Document Storage

Quotes live in a single SQLite file as one JSON document per row.
Filters are compiled into json_extract predicates so matching happens
inside SQLite, not in Python.

TRADEOFFS:
- The document column means no schema migration is ever needed for
  optional fields, at the cost of untyped storage (we validate on read)
- The file is held with an exclusive lock for the life of the process;
  a second process fails immediately instead of waiting
"""

import json
import sqlite3
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Any, Iterator, Optional, Union

import structlog

from quoteit.models.quote import Quote
from quoteit.queries.filters import (
    AtLeast,
    AtMost,
    Equals,
    QuoteFilter,
    iter_predicates,
)
from quoteit.services.storage.interface import (
    CorruptRecordError,
    QuoteStorageInterface,
    StorageError,
    StoreUnavailableError,
)

logger = structlog.get_logger(__name__)

TABLE_NAME = "quotes"

# SQL operator for each predicate type
SQL_OPERATORS = {
    Equals: "=",
    AtMost: "<=",
    AtLeast: ">=",
}


def _to_sql_value(value: Union[str, date]) -> str:
    """Dates are stored as ISO strings, which sort chronologically."""
    if isinstance(value, date):
        return value.isoformat()
    return value


def compile_filter(quote_filter: Optional[QuoteFilter]) -> tuple[str, list[Any]]:
    """
    Translate a filter into a WHERE clause and its parameters.

    Field names come from a closed Literal set, so they are safe to
    interpolate; values always go through parameters.

    Returns:
        ("", []) for no filter, otherwise (" WHERE ...", params)
    """
    if quote_filter is None:
        return "", []

    conditions = []
    params: list[Any] = []
    for predicate in iter_predicates(quote_filter):
        operator = SQL_OPERATORS[type(predicate)]
        conditions.append(
            f"json_extract(document, '$.{predicate.field}') {operator} ?"
        )
        params.append(_to_sql_value(predicate.value))

    return " WHERE " + " AND ".join(conditions), params


class SQLiteQuoteStorage(QuoteStorageInterface):
    """
    SQLite implementation of quote storage.

    Usage:
        with SQLiteQuoteStorage(path) as storage:
            storage.insert(Quote(text="..."))
            quotes = storage.find(None)
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None
        self._open()

    def _open(self) -> None:
        """Open the file, take the exclusive lock and make sure the table exists."""
        try:
            # timeout=0: a locked store fails now rather than after a busy wait
            conn = sqlite3.connect(str(self.db_path), timeout=0)
        except sqlite3.Error as e:
            raise StoreUnavailableError(
                f"Could not open quote store {self.db_path}: {e}"
            ) from e

        try:
            conn.execute("PRAGMA locking_mode = EXCLUSIVE")
            # In exclusive locking mode the lock taken here is kept until close
            conn.execute("BEGIN EXCLUSIVE")
            conn.execute(f"""
                CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    document TEXT NOT NULL
                )
            """)
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            raise StoreUnavailableError(
                f"Could not open quote store {self.db_path}: {e}"
            ) from e

        self._conn = conn
        logger.debug("quote_store_opened", path=str(self.db_path))

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get the open connection, committing on success and rolling back on error."""
        if self._conn is None:
            raise StorageError("Quote store is closed")
        try:
            yield self._conn
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            raise StorageError(f"Quote store operation failed: {e}") from e

    def insert(self, quote: Quote) -> None:
        document = json.dumps(quote.to_document(), ensure_ascii=False)
        with self._get_connection() as conn:
            conn.execute(
                f"INSERT INTO {TABLE_NAME} (document) VALUES (?)",
                (document,),
            )

    def find(self, quote_filter: Optional[QuoteFilter] = None) -> list[Quote]:
        where, params = compile_filter(quote_filter)
        with self._get_connection() as conn:
            rows = conn.execute(
                f"SELECT id, document FROM {TABLE_NAME}{where}",
                params,
            ).fetchall()

        # Decode everything before returning so a bad row fails the whole read
        return [self._row_to_quote(row_id, document) for row_id, document in rows]

    def _row_to_quote(self, row_id: int, document: str) -> Quote:
        """Decode one stored row."""
        try:
            return Quote.from_document(json.loads(document))
        except ValueError as e:
            raise CorruptRecordError(
                f"Stored quote #{row_id} is malformed: {e}"
            ) from e

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
