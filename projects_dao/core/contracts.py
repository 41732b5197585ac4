"""Core port contracts used by adapters and the DAO layer."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Callable, List, Protocol

from .types import MaybeRow, QueryParams, RowMapping


class DialectPort(Protocol):
    """Dialect behavior required by statement building and identity lookup."""

    name: str
    paramstyle: str

    def q(self, ident: str) -> str: ...

    def placeholder(self) -> str: ...

    def placeholders(self, count: int) -> str: ...

    def auto_pk_sql(self, pk_name: str) -> str: ...

    def last_insert_id_sql(self, table: str) -> str: ...


class DatabasePort(Protocol):
    """Database adapter behavior required by the DAO layer."""

    dialect: DialectPort

    def transaction(self) -> AbstractContextManager[None]: ...

    def execute(self, sql: str, params: QueryParams = None) -> Any: ...

    def execute_update(self, sql: str, params: QueryParams = None) -> int: ...

    def fetchone(self, sql: str, params: QueryParams = None) -> MaybeRow: ...

    def fetchall(self, sql: str, params: QueryParams = None) -> List[RowMapping]: ...

    def close(self) -> None: ...


ConnectionProvider = Callable[[], DatabasePort]
