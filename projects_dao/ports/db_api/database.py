"""DB-API connection wrapper implementing `DatabasePort`."""

from __future__ import annotations

import contextlib
from typing import Any, Iterator, Mapping, Optional, Sequence

from ...core.types import MaybeRow, QueryParams, RowMapping, Rows
from ...utils.logger import get_logger
from .dialects import Dialect

logger = get_logger(__name__)


class Database:
    """One open DB-API connection plus the dialect used to talk to it.

    Rows come back as mappings keyed by column label regardless of the
    driver's native row type. Cursors are closed as soon as a statement's
    results have been read.
    """

    def __init__(self, conn: Any, dialect: Dialect):
        """Wrap an open connection.

        Args:
            conn: DB-API connection. SQLite connections should be opened
                with `isolation_level=None` so `transaction()` issues the
                `BEGIN` itself.
            dialect: Dialect matching the connection's driver.
        """

        self.conn: Optional[Any] = conn
        self.dialect = dialect
        self._closed = False

    def _open_conn(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("Database connection is already closed.")
        return self.conn

    def _begin(self, conn: Any) -> None:
        if self.dialect.name == "sqlite":
            # Autocommit-mode sqlite3 needs an explicit BEGIN for a shared snapshot.
            if conn.isolation_level is None and not conn.in_transaction:
                conn.execute("BEGIN")
            return
        begin = getattr(conn, "begin", None)
        if callable(begin):
            begin()

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Run the block as one unit: commit on success, roll back on any error."""

        conn = self._open_conn()
        self._begin(conn)
        try:
            yield
            conn.commit()
        except BaseException:
            conn.rollback()
            logger.debug("Rolled back transaction.")
            raise
        logger.debug("Committed transaction.")

    def execute(self, sql: str, params: QueryParams = None) -> Any:
        """Run one statement and hand back the driver cursor."""

        cursor = self._open_conn().cursor()
        logger.debug("SQL %s params=%r", sql, params)
        if params is None:
            cursor.execute(sql)
        else:
            cursor.execute(sql, list(params))
        return cursor

    def execute_update(self, sql: str, params: QueryParams = None) -> int:
        """Run a DDL/DML statement; returns the driver's affected row count."""

        with _closing(self.execute(sql, params)) as cursor:
            return cursor.rowcount

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow:
        with _closing(self.execute(sql, params)) as cursor:
            row = cursor.fetchone()
            return None if row is None else as_mapping(cursor.description, row)

    def fetchall(self, sql: str, params: QueryParams = None) -> Rows:
        with _closing(self.execute(sql, params)) as cursor:
            description = cursor.description
            return [as_mapping(description, row) for row in cursor.fetchall()]

    def close(self) -> None:
        """Close the connection. Later calls are no-ops."""

        if self._closed:
            return
        conn, self.conn = self.conn, None
        self._closed = True
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()


def as_mapping(description: Optional[Sequence[Any]], row: Any) -> RowMapping:
    """Turn a driver row into a column-label mapping.

    Mapping rows (`sqlite3.Row`, dict cursors) are returned as they are;
    tuple rows are zipped with the labels in `description`.

    Raises:
        TypeError: If a tuple row has no description, or the row type is not
            recognised.
    """

    if isinstance(row, Mapping):
        return row
    if isinstance(row, (tuple, list)):
        if not description:
            raise TypeError("Tuple row without cursor description cannot be labelled.")
        return {column[0]: value for column, value in zip(description, row)}
    if hasattr(row, "keys"):
        return {key: row[key] for key in row.keys()}
    raise TypeError(f"Cannot convert row of type {type(row).__name__} to a mapping.")


@contextlib.contextmanager
def _closing(cursor: Any) -> Iterator[Any]:
    try:
        yield cursor
    finally:
        close = getattr(cursor, "close", None)
        if callable(close):
            close()
