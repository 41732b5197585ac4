"""Transaction-scoped base class for DAOs built on the row extractor."""

from __future__ import annotations

import contextlib
from typing import Iterator, List, Optional, Type, TypeVar

from ..utils.logger import get_logger
from .contracts import ConnectionProvider, DatabasePort
from .errors import DataAccessError, TransactionFailure
from .extraction import extract
from .marshalling import StatementParameters
from .models import DataclassModel

T = TypeVar("T", bound=DataclassModel)

logger = get_logger(__name__)


class DaoBase:
    """Base DAO: one connection and one transaction per public operation.

    Subclasses run their statements inside `transaction()`. Every exception
    raised after `BEGIN` rolls the transaction back and surfaces as
    `TransactionFailure` chained to the original error; the connection is
    closed on every exit path.
    """

    def __init__(self, connect: ConnectionProvider):
        """Create DAO.

        Args:
            connect: Zero-argument callable returning a new open database
                adapter. Called once per operation.
        """

        self._connect = connect

    @contextlib.contextmanager
    def _connection(self) -> Iterator[DatabasePort]:
        try:
            db = self._connect()
        except DataAccessError:
            raise
        except Exception as exc:
            logger.error(f"Unable to get connection: {exc}")
            raise DataAccessError("Unable to get connection") from exc
        try:
            yield db
        finally:
            db.close()

    @contextlib.contextmanager
    def transaction(self) -> Iterator[DatabasePort]:
        """Open a connection and run the block in one commit/rollback scope."""

        with self._connection() as db:
            try:
                with db.transaction():
                    yield db
            except Exception as exc:
                logger.warning(f"Transaction rolled back: {exc!r}")
                raise TransactionFailure(str(exc) or type(exc).__name__) from exc

    def _fetch_one(
        self,
        db: DatabasePort,
        sql: str,
        shape: Type[T],
        params: Optional[StatementParameters] = None,
    ) -> Optional[T]:
        row = db.fetchone(sql, params.values() if params is not None else None)
        return extract(row, shape) if row is not None else None

    def _fetch_all(
        self,
        db: DatabasePort,
        sql: str,
        shape: Type[T],
        params: Optional[StatementParameters] = None,
    ) -> List[T]:
        rows = db.fetchall(sql, params.values() if params is not None else None)
        return [extract(row, shape) for row in rows]

    def _execute_update(
        self,
        db: DatabasePort,
        sql: str,
        params: StatementParameters,
    ) -> int:
        return db.execute_update(sql, params.values())
