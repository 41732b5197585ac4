"""Connection factory: one new `Database` per call, no pooling."""

from __future__ import annotations

import sqlite3
from datetime import time
from decimal import Decimal

from ... import config
from ...core.errors import DataAccessError
from ...utils.logger import get_logger
from .database import Database
from .dialects import MySQLDialect, SQLiteDialect

logger = get_logger(__name__)

_sqlite_types_registered = False


def _register_sqlite_types() -> None:
    global _sqlite_types_registered
    if _sqlite_types_registered:
        return
    sqlite3.register_adapter(Decimal, str)
    sqlite3.register_adapter(time, time.isoformat)
    sqlite3.register_converter("DECIMAL", lambda raw: Decimal(raw.decode("utf-8")))
    _sqlite_types_registered = True


def connect_sqlite(path: str) -> Database:
    """Open a SQLite database file in explicit-transaction mode.

    `DECIMAL` columns are read back as `Decimal` and bound `Decimal` values
    are stored as text.
    """

    _register_sqlite_types()
    try:
        conn = sqlite3.connect(
            path,
            isolation_level=None,
            detect_types=sqlite3.PARSE_DECLTYPES,
        )
    except sqlite3.Error as exc:
        logger.error(f"Unable to open SQLite database at {path}: {exc}")
        raise DataAccessError(f"Unable to get connection at {path}") from exc
    conn.execute("PRAGMA foreign_keys = ON")
    logger.debug(f"Connected to SQLite database {path}.")
    return Database(conn, SQLiteDialect())


def connect_mysql(
    *,
    host: str,
    port: int,
    database: str,
    user: str,
    password: str,
) -> Database:
    """Open a MySQL connection with autocommit disabled.

    `rowcount` of UPDATE statements is the number of matched rows, not the
    number of changed rows.
    """

    try:
        import pymysql  # type: ignore[import-untyped]
        from pymysql.constants import CLIENT  # type: ignore[import-untyped]
    except ImportError as exc:  # pragma: no cover - env dependent
        raise ImportError(
            "PyMySQL is required for MySQL connections. "
            "Install with `pip install PyMySQL`."
        ) from exc

    uri = f"mysql://{user}@{host}:{port}/{database}"
    logger.info(f"Connecting with uri={uri}")
    try:
        conn = pymysql.connect(
            host=host,
            port=port,
            user=user,
            password=password,
            database=database,
            charset="utf8mb4",
            autocommit=False,
            # UPDATE rowcount counts matched rows.
            client_flag=CLIENT.FOUND_ROWS,
        )
    except pymysql.MySQLError as exc:
        logger.error(f"Unable to get connection at {uri}: {exc}")
        raise DataAccessError(f"Unable to get connection at {uri}") from exc
    logger.info(f"Connection to schema '{database}' is successful.")
    return Database(conn, MySQLDialect())


def get_connection() -> Database:
    """Open a connection for the backend selected by `config.DB_BACKEND`."""

    if config.DB_BACKEND == "sqlite":
        return connect_sqlite(config.SQLITE_PATH)
    if config.DB_BACKEND == "mysql":
        return connect_mysql(
            host=config.DB_HOST,
            port=config.DB_PORT,
            database=config.DB_NAME,
            user=config.DB_USER,
            password=config.DB_PASS,
        )
    raise DataAccessError(f"Unsupported DB_BACKEND {config.DB_BACKEND!r}.")
