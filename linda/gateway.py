"""Persistence gateway over the ``db`` library.

Each gateway owns one engine for its database URL, creates the (single) table
schema and executes statements rendered by :mod:`linda.statements`. Close it
(or use it as a context manager) to release the connection pool. SQLAlchemy failures surface as
:class:`~linda.errors.SchemaError` or :class:`~linda.errors.StatementError`
with the original exception chained.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db import Base
from db.client import make_engine, resolve_database_url, session_scope
from db.models.ledger import LedgerTransaction

from .errors import SchemaError, StatementError
from .logging_setup import get_logger
from .records import Record
from .statements import Statement

logger = get_logger("linda.gateway")


class PersistenceGateway:
    """Executes ledger statements against one database URL."""

    def __init__(self, database_url: str | None = None) -> None:
        self.database_url = resolve_database_url(database_url)
        self._engine: Engine | None = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = make_engine(self.database_url)
        return self._engine

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> PersistenceGateway:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def ensure_schema(self) -> None:
        """Create the ``transaction`` table when it does not exist yet."""

        try:
            Base.metadata.create_all(
                bind=self.engine, tables=[LedgerTransaction.__table__], checkfirst=True
            )
        except SQLAlchemyError as e:
            raise SchemaError(str(e)) from e
        logger.info("Schema ensured at %s", self.database_url)

    def execute(self, statement: Statement) -> int:
        """Run ``statement`` in its own transaction and return the affected row count."""

        try:
            with self.engine.begin() as conn:
                rowcount = conn.execute(text(statement.sql), dict(statement.params)).rowcount
        except SQLAlchemyError as e:
            raise StatementError(str(e)) from e
        logger.info("Executed statement (%d row(s)): %s", rowcount, statement.sql)
        return rowcount

    def fetch_records(self, limit: int | None = None) -> list[Record]:
        """Return persisted rows as records, oldest first.

        With ``limit``, only the most recent ``limit`` rows are returned.
        """

        stmt = select(LedgerTransaction).order_by(LedgerTransaction.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            with session_scope(self.engine) as session:
                rows = list(session.scalars(stmt))
        except SQLAlchemyError as e:
            raise StatementError(str(e)) from e
        return [
            Record(
                created_at=datetime.fromtimestamp(row.created_at).astimezone(),
                tax=row.tax,
                category=row.category,
            )
            for row in reversed(rows)
        ]


__all__ = ["PersistenceGateway"]
