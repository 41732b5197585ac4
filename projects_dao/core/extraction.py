"""Generic result-row to record mapping."""

from __future__ import annotations

from typing import Type, TypeVar

from .codecs import deserialize_column_value
from .errors import ExtractionError
from .models import DataclassModel, model_fields, scalar_fields
from .naming import column_name
from .types import RowMapping

T = TypeVar("T", bound=DataclassModel)

__all__ = ["column_name", "extract"]


def extract(row: RowMapping, shape: Type[T], *, strict: bool = False) -> T:
    """Build one `shape` instance from a result row.

    A blank instance is created with the zero-argument constructor, then each
    dataclass field (in declaration order) is looked up in `row` under its
    snake_case column name. Missing columns and SQL nulls leave the field
    untouched, which is how collection fields keep their empty lists.

    Columns are matched by name only. A field whose column name collides with
    an unrelated column receives that column's value.

    Args:
        row: Column name to value mapping for one result row.
        shape: Dataclass record type with a zero-argument constructor.
        strict: Raise instead of skipping when a scalar field's column is
            missing from `row`.

    Raises:
        ExtractionError: If construction or assignment fails, or a scalar
            column is missing in strict mode.
    """

    try:
        obj = shape()
        for field in model_fields(shape):
            col = column_name(field.name)
            if col not in row:
                continue
            value = row[col]
            if value is None:
                continue
            value = deserialize_column_value(shape, field.name, value)
            object.__setattr__(obj, field.name, value)

        if strict:
            missing = [
                column_name(f.name)
                for f in scalar_fields(shape)
                if column_name(f.name) not in row
            ]
            if missing:
                raise ExtractionError(
                    f"Result row is missing columns {missing} for {shape.__name__}."
                )
        return obj
    except ExtractionError:
        raise
    except Exception as exc:
        name = getattr(shape, "__name__", repr(shape))
        raise ExtractionError(f"Unable to create object of type {name}") from exc
