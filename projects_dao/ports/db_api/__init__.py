"""DB-API adapter, dialect, and connection factory exports."""

from .connection import connect_mysql, connect_sqlite, get_connection
from .database import Database
from .dialects import Dialect, MySQLDialect, SQLiteDialect

__all__ = [
    "Database",
    "Dialect",
    "MySQLDialect",
    "SQLiteDialect",
    "connect_mysql",
    "connect_sqlite",
    "get_connection",
]
