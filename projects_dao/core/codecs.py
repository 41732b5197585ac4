"""Column value codecs for converting driver values into field types."""

from __future__ import annotations

import types
from dataclasses import Field, fields
from datetime import date, datetime, time, timedelta
from functools import lru_cache
from typing import Any, Type, Union, get_args, get_origin, get_type_hints

from .models import require_dataclass_model

_ONE_DAY = timedelta(days=1)


def deserialize_column_value(
    cls: Type[Any],
    field_name: str,
    value: Any,
) -> Any:
    """Convert one non-null column value into the declared field type.

    Only temporal representations are converted: a driver time-of-day value
    (`timedelta` from MySQL `TIME`, `datetime`, or ISO text) becomes
    `datetime.time`, and a timestamp (`date` or ISO text) becomes
    `datetime.datetime`. Everything else is returned unchanged.
    """

    field = _model_field_map(cls).get(field_name)
    if field is None:
        return value
    annotation = _model_type_hints(cls).get(field_name, field.type)
    return _deserialize_value(value, annotation=annotation)


@lru_cache(maxsize=None)
def _model_field_map(cls: Type[Any]) -> dict[str, Field[Any]]:
    require_dataclass_model(cls)
    return {field.name: field for field in fields(cls)}


@lru_cache(maxsize=None)
def _model_type_hints(cls: Type[Any]) -> dict[str, Any]:
    require_dataclass_model(cls)
    try:
        return dict(get_type_hints(cls))
    except (NameError, TypeError) as exc:
        raise TypeError(f"Cannot resolve field annotations of {cls.__name__}: {exc}") from exc


def _deserialize_value(value: Any, *, annotation: Any) -> Any:
    if value is None:
        return None

    target = _unwrap_optional(annotation)
    if target is time:
        return _to_time(value)
    if target is datetime:
        return _to_datetime(value)
    return value


def _to_time(value: Any) -> Any:
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        if not timedelta(0) <= value < _ONE_DAY:
            raise ValueError(f"TIME value {value!r} is not a time of day.")
        return (datetime.min + value).time()
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, str):
        return time.fromisoformat(value)
    return value


def _to_datetime(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def _unwrap_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is None:
        return annotation

    if origin not in {Union, types.UnionType}:
        return annotation

    all_args = get_args(annotation)
    args = [arg for arg in all_args if arg is not type(None)]
    if len(args) == 1 and len(all_args) == 2:
        return args[0]
    return annotation


def declared_field_type(cls: Type[Any], field_name: str) -> Any:
    """Return a field's annotation with any `Optional[...]` removed."""

    field = _model_field_map(cls).get(field_name)
    if field is None:
        raise AttributeError(f"{cls.__name__} has no field {field_name!r}.")
    return _unwrap_optional(_model_type_hints(cls).get(field_name, field.type))
