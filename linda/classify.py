"""Classify tokenized commands into operation kinds.

Only the exact shape ``[Marker, Number, Text]`` is recognized. Any other shape
classifies to ``None`` ("no operation"), which is a terminal state rather than
an error. A recognized shape whose marker has no :class:`OperationKind` raises
:class:`~linda.errors.NoSpecifiedOrderKindError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .errors import NoSpecifiedOrderKindError
from .logging_setup import get_logger
from .tokens import Command, Marker, Number, Text

logger = get_logger("linda.classify")


class OperationKind(Enum):
    INCOME = "&"
    EXPENSE = ">"

    @classmethod
    def from_marker(cls, char: str) -> OperationKind:
        """Map a marker character to its kind.

        ``+`` is accepted by the tokenizer but deliberately has no kind here.
        """

        try:
            return cls(char)
        except ValueError:
            raise NoSpecifiedOrderKindError(f"marker {char!r}") from None


@dataclass(frozen=True, slots=True)
class ClassifiedCommand:
    """A command whose token shape has been confirmed as ``[Marker, Number, Text]``.

    ``tax`` and ``category`` are the typed tokens at positions 1 and 2, so field
    extraction downstream never needs to re-check variants.
    """

    kind: OperationKind
    tax: Number
    category: Text
    command: Command

    @property
    def created_at(self) -> datetime:
        return self.command.created_at


def classify(command: Command) -> ClassifiedCommand | None:
    match command.tokens:
        case (Marker(char=char), Number() as tax, Text() as category):
            kind = OperationKind.from_marker(char)
            logger.debug("Classified %s as %s", command, kind.name)
            return ClassifiedCommand(kind=kind, tax=tax, category=category, command=command)
        case _:
            logger.debug(
                "No operation for shape %s",
                [type(t).__name__ for t in command.tokens],
            )
            return None


def as_classified(command: Command | ClassifiedCommand) -> ClassifiedCommand | None:
    """Classify ``command`` unless it already is a :class:`ClassifiedCommand`."""

    if isinstance(command, ClassifiedCommand):
        return command
    return classify(command)


__all__ = [
    "ClassifiedCommand",
    "OperationKind",
    "as_classified",
    "classify",
]
