"""Record shape metadata used by the extractor and the DAO statements."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Generic, List, Type, TypeVar

from .models import (
    DataclassModel,
    collection_fields,
    pk_field,
    scalar_fields,
    table_name,
)
from .naming import column_name

T = TypeVar("T", bound=DataclassModel)


@dataclass(frozen=True)
class RecordShape(Generic[T]):
    """Normalized description of one entity type."""

    model: Type[T]
    table: str
    pk: str
    pk_column: str
    columns: Dict[str, str]
    collections: List[str]

    @property
    def writable_columns(self) -> List[str]:
        """Column names other than the primary key, in declaration order."""

        return [col for name, col in self.columns.items() if name != self.pk]


@lru_cache(maxsize=None)
def shape_metadata(model: Type[T]) -> RecordShape[T]:
    """Build the record shape of a dataclass model.

    Args:
        model: Dataclass model type.

    Returns:
        Immutable shape: scalar field to column mapping plus collection names.

    Raises:
        TypeError: If `model` is not a dataclass.
        ValueError: If model has zero or multiple primary key fields.
    """

    pk = pk_field(model)
    return RecordShape(
        model=model,
        table=table_name(model),
        pk=pk.name,
        pk_column=column_name(pk.name),
        columns={f.name: column_name(f.name) for f in scalar_fields(model)},
        collections=[f.name for f in collection_fields(model)],
    )
