"""Ordinal and generated-identity helpers run on the caller's connection."""

from __future__ import annotations

from typing import Any

from .contracts import DatabasePort
from .errors import NoResultError
from .marshalling import bind_all


def next_ordinal(db: DatabasePort, parent_id: int, table: str, parent_column: str) -> int:
    """Return the 1-based position for a new child row under `parent_id`.

    Counts existing child rows and adds one. The position is not reserved:
    two callers inserting under the same parent before either commits can
    compute the same value.
    """

    d = db.dialect
    sql = f"SELECT COUNT(*) FROM {d.q(table)} WHERE {d.q(parent_column)} = {d.placeholder()}"
    row = db.fetchone(sql, bind_all((parent_id, int)).values())
    if row is None:
        return 1
    return int(_first_value(row)) + 1


def last_insert_id(db: DatabasePort, table: str) -> int:
    """Return the primary key generated by the most recent insert on `db`.

    Must run on the connection that performed the insert, before any other
    statement that resets the session's last generated identity.

    Raises:
        NoResultError: If the identity query returns no row.
    """

    row = db.fetchone(db.dialect.last_insert_id_sql(table))
    if row is None:
        raise NoResultError("Unable to retrieve the primary key value. No result set!")
    return int(_first_value(row))


def _first_value(row: Any) -> Any:
    return next(iter(row.values()))
