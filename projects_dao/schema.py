"""DDL for the projects schema (table creation only)."""

from __future__ import annotations

from typing import List

from .core.contracts import DatabasePort, DialectPort
from .utils.logger import get_logger

logger = get_logger(__name__)

TABLES = ("project", "material", "step", "category", "project_category")


def create_schema_sql(dialect: DialectPort) -> List[str]:
    """Return `CREATE TABLE` statements in dependency order."""

    q = dialect.q
    return [
        f"CREATE TABLE IF NOT EXISTS {q('project')} ("
        f"{dialect.auto_pk_sql('project_id')}, "
        f"{q('project_name')} VARCHAR(128) NOT NULL, "
        f"{q('estimated_hours')} DECIMAL(7,2), "
        f"{q('actual_hours')} DECIMAL(7,2), "
        f"{q('difficulty')} INT, "
        f"{q('notes')} TEXT)",
        f"CREATE TABLE IF NOT EXISTS {q('material')} ("
        f"{dialect.auto_pk_sql('material_id')}, "
        f"{q('project_id')} INT NOT NULL, "
        f"{q('material_name')} VARCHAR(128) NOT NULL, "
        f"{q('num_required')} INT, "
        f"{q('cost')} DECIMAL(7,2), "
        f"FOREIGN KEY ({q('project_id')}) REFERENCES {q('project')} ({q('project_id')}) "
        "ON DELETE CASCADE)",
        f"CREATE TABLE IF NOT EXISTS {q('step')} ("
        f"{dialect.auto_pk_sql('step_id')}, "
        f"{q('project_id')} INT NOT NULL, "
        f"{q('step_text')} TEXT NOT NULL, "
        f"{q('step_order')} INT NOT NULL, "
        f"FOREIGN KEY ({q('project_id')}) REFERENCES {q('project')} ({q('project_id')}) "
        "ON DELETE CASCADE)",
        f"CREATE TABLE IF NOT EXISTS {q('category')} ("
        f"{dialect.auto_pk_sql('category_id')}, "
        f"{q('category_name')} VARCHAR(128) NOT NULL UNIQUE)",
        f"CREATE TABLE IF NOT EXISTS {q('project_category')} ("
        f"{q('project_id')} INT NOT NULL, "
        f"{q('category_id')} INT NOT NULL, "
        f"FOREIGN KEY ({q('project_id')}) REFERENCES {q('project')} ({q('project_id')}) "
        "ON DELETE CASCADE, "
        f"FOREIGN KEY ({q('category_id')}) REFERENCES {q('category')} ({q('category_id')}) "
        "ON DELETE CASCADE, "
        f"UNIQUE ({q('project_id')}, {q('category_id')}))",
    ]


def drop_schema_sql(dialect: DialectPort) -> List[str]:
    """Return `DROP TABLE` statements, children first."""

    return [f"DROP TABLE IF EXISTS {dialect.q(table)}" for table in reversed(TABLES)]


def apply_schema(db: DatabasePort, *, drop_existing: bool = False) -> None:
    """Create the projects tables in one transaction."""

    statements = create_schema_sql(db.dialect)
    if drop_existing:
        statements = drop_schema_sql(db.dialect) + statements
    with db.transaction():
        for sql in statements:
            db.execute_update(sql)
    logger.info(f"Applied projects schema ({len(TABLES)} tables).")
