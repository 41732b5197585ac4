"""SQL text and typed parameters generated from record shapes."""

from __future__ import annotations

from typing import Any, List, Optional

from .codecs import declared_field_type
from .contracts import DialectPort
from .marshalling import StatementParameters, bind_all
from .metadata import RecordShape


def _writable_fields(shape: RecordShape[Any]) -> List[str]:
    return [name for name in shape.columns if name != shape.pk]


def insert_sql(dialect: DialectPort, shape: RecordShape[Any]) -> str:
    """`INSERT` of every non-key scalar column; the key is generated."""

    columns = shape.writable_columns
    column_sql = ", ".join(dialect.q(col) for col in columns)
    return (
        f"INSERT INTO {dialect.q(shape.table)} ({column_sql}) "
        f"VALUES ({dialect.placeholders(len(columns))})"
    )


def update_sql(dialect: DialectPort, shape: RecordShape[Any]) -> str:
    """`UPDATE` of every non-key scalar column by primary key."""

    set_clause = ", ".join(
        f"{dialect.q(col)} = {dialect.placeholder()}" for col in shape.writable_columns
    )
    return (
        f"UPDATE {dialect.q(shape.table)} SET {set_clause} "
        f"WHERE {dialect.q(shape.pk_column)} = {dialect.placeholder()}"
    )


def delete_sql(dialect: DialectPort, shape: RecordShape[Any]) -> str:
    return (
        f"DELETE FROM {dialect.q(shape.table)} "
        f"WHERE {dialect.q(shape.pk_column)} = {dialect.placeholder()}"
    )


def select_sql(
    dialect: DialectPort,
    shape: RecordShape[Any],
    *,
    where_column: Optional[str] = None,
    order_by: Optional[str] = None,
) -> str:
    """`SELECT *` from the shape's table with an optional equality filter."""

    sql = f"SELECT * FROM {dialect.q(shape.table)}"
    if where_column is not None:
        sql += f" WHERE {dialect.q(where_column)} = {dialect.placeholder()}"
    if order_by is not None:
        sql += f" ORDER BY {dialect.q(order_by)}"
    return sql


def insert_params(obj: Any, shape: RecordShape[Any]) -> StatementParameters:
    """Bind the non-key scalar fields of `obj` in declaration order."""

    return bind_all(
        *[
            (getattr(obj, name), declared_field_type(shape.model, name))
            for name in _writable_fields(shape)
        ]
    )


def update_params(obj: Any, shape: RecordShape[Any]) -> StatementParameters:
    """Bind the non-key scalar fields followed by the primary key."""

    names = _writable_fields(shape) + [shape.pk]
    return bind_all(
        *[(getattr(obj, name), declared_field_type(shape.model, name)) for name in names]
    )
