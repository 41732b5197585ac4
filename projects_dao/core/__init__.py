"""Public core API: row extraction, parameter binding, and transactional DAOs."""

from .codecs import declared_field_type, deserialize_column_value
from .dao import DaoBase
from .errors import (
    DataAccessError,
    ExtractionError,
    NoResultError,
    NotFoundError,
    ProjectsError,
    TransactionFailure,
    UnsupportedTypeError,
)
from .extraction import extract
from .marshalling import (
    BoundParameter,
    StatementParameters,
    StorageType,
    bind,
    bind_all,
    storage_type_for,
)
from .metadata import RecordShape, shape_metadata
from .models import (
    DataclassModel,
    collection_fields,
    is_collection_field,
    model_fields,
    pk_field,
    scalar_fields,
    table_name,
)
from .naming import column_name
from .sequences import last_insert_id, next_ordinal

__all__ = [
    "BoundParameter",
    "DaoBase",
    "DataAccessError",
    "DataclassModel",
    "ExtractionError",
    "NoResultError",
    "NotFoundError",
    "ProjectsError",
    "RecordShape",
    "StatementParameters",
    "StorageType",
    "TransactionFailure",
    "UnsupportedTypeError",
    "bind",
    "bind_all",
    "collection_fields",
    "column_name",
    "declared_field_type",
    "deserialize_column_value",
    "extract",
    "is_collection_field",
    "last_insert_id",
    "model_fields",
    "next_ordinal",
    "pk_field",
    "scalar_fields",
    "shape_metadata",
    "storage_type_for",
    "table_name",
]
