"""Model utilities for dataclass record shapes."""

from __future__ import annotations

from dataclasses import Field, fields, is_dataclass
from typing import Any, ClassVar, List, Protocol, Type


class DataclassModel(Protocol):
    """Protocol for supported dataclass record shapes."""

    __dataclass_fields__: ClassVar[dict[str, Any]]


def require_dataclass_model(cls: Type[Any]) -> None:
    """Validate that a class is a dataclass model."""

    if not isinstance(cls, type) or not is_dataclass(cls):
        name = getattr(cls, "__name__", repr(cls))
        raise TypeError(f"{name} must be a dataclass.")


def table_name(model_or_cls: Any) -> str:
    """Resolve table name from model class or instance.

    Uses `__table__` override when present, otherwise lowercased class name.
    """

    cls = model_or_cls if isinstance(model_or_cls, type) else type(model_or_cls)
    name = getattr(cls, "__table__", None)
    return name if isinstance(name, str) and name else cls.__name__.lower()


def model_fields(cls: Type[DataclassModel]) -> List[Field[Any]]:
    """Return dataclass fields for a model type, in declaration order."""

    require_dataclass_model(cls)
    return list(fields(cls))


def is_collection_field(field: Field[Any]) -> bool:
    """Return whether a field is a child collection with no backing column."""

    return bool(field.metadata.get("collection"))


def scalar_fields(cls: Type[DataclassModel]) -> List[Field[Any]]:
    """Return fields that map to exactly one storage column."""

    return [f for f in model_fields(cls) if not is_collection_field(f)]


def collection_fields(cls: Type[DataclassModel]) -> List[Field[Any]]:
    """Return fields declared with `metadata={'collection': True}`."""

    return [f for f in model_fields(cls) if is_collection_field(f)]


def pk_field(cls: Type[DataclassModel]) -> Field[Any]:
    """Return the single primary key field defined with `metadata={'pk': True}`."""

    pks = [f for f in model_fields(cls) if f.metadata.get("pk")]
    if not pks:
        raise ValueError(
            f"{cls.__name__} has no PK field. Use field(metadata={{'pk': True}})."
        )
    if len(pks) != 1:
        raise ValueError(f"{cls.__name__} must declare exactly 1 PK field.")
    return pks[0]
