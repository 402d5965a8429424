"""Domain record built from income commands."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .classify import ClassifiedCommand, OperationKind, as_classified
from .tokens import Command


class Record(BaseModel):
    """A persistable income entry.

    ``tax`` is not range-checked: zero and negative amounts are accepted as-is.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    created_at: datetime
    tax: int
    category: str


def build_record(command: Command | ClassifiedCommand) -> Record | None:
    """Return a :class:`Record` for income commands, ``None`` for everything else.

    Expense commands classify successfully but have no record producer yet;
    callers treat ``None`` as "nothing to do", not as a failure.
    """

    classified = as_classified(command)
    if classified is None or classified.kind is not OperationKind.INCOME:
        return None
    return Record(
        created_at=classified.created_at,
        tax=classified.tax.value,
        category=classified.category.value,
    )


__all__ = [
    "Record",
    "build_record",
]
