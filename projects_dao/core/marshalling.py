"""Typed parameter binding for prepared statements.

Each parameter is bound together with its declared application type so that
a `None` value still carries the storage type of its column.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Type

from .errors import UnsupportedTypeError
from .types import TypedValue


class StorageType(str, Enum):
    """Storage type tags for bound parameters."""

    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    DOUBLE = "DOUBLE"
    VARCHAR = "VARCHAR"
    OTHER = "OTHER"


_STORAGE_TYPES: Dict[type, StorageType] = {
    int: StorageType.INTEGER,
    Decimal: StorageType.DECIMAL,
    float: StorageType.DOUBLE,
    str: StorageType.VARCHAR,
    time: StorageType.OTHER,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _mismatch(value: Any, storage_type: StorageType) -> TypeError:
    return TypeError(
        f"Cannot bind {type(value).__name__} value {value!r} as {storage_type.value}."
    )


def _bind_integer(value: Any) -> int:
    if not _is_int(value):
        raise _mismatch(value, StorageType.INTEGER)
    return value


def _bind_decimal(value: Any) -> Decimal:
    """Accept `Decimal`, `int`, or a `float` whose decimal text is its exact value."""

    if isinstance(value, Decimal):
        return value
    if _is_int(value):
        return Decimal(value)
    if isinstance(value, float):
        exact = Decimal(value)
        if not exact.is_finite() or exact != Decimal(repr(value)):
            raise ValueError(f"Float {value!r} has no exact DECIMAL value.")
        return Decimal(repr(value))
    raise _mismatch(value, StorageType.DECIMAL)


def _bind_double(value: Any) -> float:
    if isinstance(value, float):
        return value
    if _is_int(value):
        converted = float(value)
        if converted != value:
            raise ValueError(f"Integer {value!r} has no exact DOUBLE value.")
        return converted
    raise _mismatch(value, StorageType.DOUBLE)


def _bind_varchar(value: Any) -> str:
    if not isinstance(value, str):
        raise _mismatch(value, StorageType.VARCHAR)
    return value


def _bind_time(value: Any) -> time:
    if not isinstance(value, time):
        raise _mismatch(value, StorageType.OTHER)
    return value


_BINDERS: Dict[StorageType, Callable[[Any], Any]] = {
    StorageType.INTEGER: _bind_integer,
    StorageType.DECIMAL: _bind_decimal,
    StorageType.DOUBLE: _bind_double,
    StorageType.VARCHAR: _bind_varchar,
    StorageType.OTHER: _bind_time,
}


def storage_type_for(declared_type: Type[Any]) -> StorageType:
    """Map an application type to its storage type tag.

    Raises:
        UnsupportedTypeError: If the type is outside the closed mapping table.
    """

    storage_type = None
    # Exact lookup: bool is an int subclass but has no mapping.
    if isinstance(declared_type, type):
        storage_type = _STORAGE_TYPES.get(declared_type)
    if storage_type is None:
        name = getattr(declared_type, "__name__", repr(declared_type))
        raise UnsupportedTypeError(f"Unsupported parameter type: {name}")
    return storage_type


@dataclass(frozen=True)
class BoundParameter:
    """One `(position, value)` slot of a prepared statement.

    `position` is 1-based. `value` is `None` for a typed SQL null.
    """

    position: int
    value: Any
    storage_type: StorageType

    @property
    def is_null(self) -> bool:
        return self.value is None


class StatementParameters:
    """Ordered parameter set for one prepared statement."""

    def __init__(self) -> None:
        self._bound: Dict[int, BoundParameter] = {}

    def bind(self, position: int, value: Any, declared_type: Type[Any]) -> None:
        """Bind `value` at `position` (1-based) using `declared_type`."""

        bind(self, position, value, declared_type)

    def set(self, parameter: BoundParameter) -> None:
        if parameter.position < 1:
            raise ValueError(f"Parameter position must be >= 1, got {parameter.position}.")
        self._bound[parameter.position] = parameter

    @property
    def bound(self) -> List[BoundParameter]:
        return [self._bound[pos] for pos in sorted(self._bound)]

    def values(self) -> List[Any]:
        """Render bound parameters as a DB-API positional sequence."""

        positions = sorted(self._bound)
        if positions != list(range(1, len(positions) + 1)):
            raise ValueError(f"Parameter positions must be contiguous from 1, got {positions}.")
        return [self._bound[pos].value for pos in positions]

    def __iter__(self) -> Iterator[BoundParameter]:
        return iter(self.bound)

    def __len__(self) -> int:
        return len(self._bound)

    def __repr__(self) -> str:
        items = ", ".join(
            f"{p.position}:{p.storage_type.value}={p.value!r}" for p in self.bound
        )
        return f"StatementParameters({items})"


def bind(
    params: StatementParameters,
    position: int,
    value: Any,
    declared_type: Type[Any],
) -> None:
    """Bind one typed value (or typed null) into a statement parameter set.

    Raises:
        UnsupportedTypeError: If `declared_type` has no storage mapping, even
            when `value` is `None`.
        TypeError: If `value` is not of the declared type. Values are never
            coerced, so `3.7` declared as `int` is rejected rather than truncated.
        ValueError: If a numeric value has no exact representation in the
            storage type.
    """

    storage_type = storage_type_for(declared_type)
    if value is None:
        params.set(BoundParameter(position, None, storage_type))
        return
    params.set(BoundParameter(position, _BINDERS[storage_type](value), storage_type))


def bind_all(*typed_values: TypedValue) -> StatementParameters:
    """Bind `(value, declared_type)` pairs at positions 1..n."""

    params = StatementParameters()
    for position, (value, declared_type) in enumerate(typed_values, start=1):
        params.bind(position, value, declared_type)
    return params
