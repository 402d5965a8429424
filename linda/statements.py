"""Render classified commands into insert statements for the gateway.

Statements carry their values as bound parameters. User-supplied text (the
category) is never spliced into the SQL string, so a category such as
``x'); DROP TABLE "transaction"; --`` is stored verbatim and harmlessly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from db.models.ledger import LedgerTransaction

from .classify import ClassifiedCommand, OperationKind, as_classified
from .tokens import Command

_INSERT_SQL = (
    f'INSERT INTO "{LedgerTransaction.__tablename__}" (created_at, tax, category) '
    "VALUES (:created_at, :tax, :category)"
)


@dataclass(frozen=True, slots=True)
class Statement:
    """A textual SQL statement plus its named bind parameters."""

    sql: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        rendered = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{self.sql} -- [{rendered}]"


def to_epoch_seconds(ts: datetime) -> int:
    """Store timestamps as whole Unix seconds (the column is ``INTEGER``)."""

    return int(ts.timestamp())


def render_statement(command: Command | ClassifiedCommand) -> Statement | None:
    """Return the insert statement for income commands, ``None`` otherwise.

    Like :func:`linda.records.build_record`, expense commands have no producer
    and yield ``None``.
    """

    classified = as_classified(command)
    if classified is None or classified.kind is not OperationKind.INCOME:
        return None
    return Statement(
        sql=_INSERT_SQL,
        params={
            "created_at": to_epoch_seconds(classified.created_at),
            "tax": classified.tax.value,
            "category": classified.category.value,
        },
    )


__all__ = [
    "Statement",
    "render_statement",
    "to_epoch_seconds",
]
