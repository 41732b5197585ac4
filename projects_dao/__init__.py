"""projects_dao: transactional data access for the DIY projects schema."""

from .core import (
    BoundParameter,
    DaoBase,
    DataAccessError,
    ExtractionError,
    NoResultError,
    NotFoundError,
    ProjectsError,
    StatementParameters,
    StorageType,
    TransactionFailure,
    UnsupportedTypeError,
    bind,
    bind_all,
    column_name,
    extract,
    last_insert_id,
    next_ordinal,
    shape_metadata,
    storage_type_for,
)
from .dao import ProjectDao
from .entities import Category, Material, Project, Step
from .ports import Database, Dialect, MySQLDialect, SQLiteDialect
from .ports.db_api import connect_mysql, connect_sqlite, get_connection
from .schema import apply_schema, create_schema_sql, drop_schema_sql
from .service import ProjectService

__all__ = [
    "BoundParameter",
    "Category",
    "DaoBase",
    "DataAccessError",
    "Database",
    "Dialect",
    "ExtractionError",
    "Material",
    "MySQLDialect",
    "NoResultError",
    "NotFoundError",
    "Project",
    "ProjectDao",
    "ProjectService",
    "ProjectsError",
    "SQLiteDialect",
    "StatementParameters",
    "Step",
    "StorageType",
    "TransactionFailure",
    "UnsupportedTypeError",
    "apply_schema",
    "bind",
    "bind_all",
    "column_name",
    "connect_mysql",
    "connect_sqlite",
    "create_schema_sql",
    "drop_schema_sql",
    "extract",
    "get_connection",
    "last_insert_id",
    "next_ordinal",
    "shape_metadata",
    "storage_type_for",
]
