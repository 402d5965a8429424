"""Tokenizer for single-line ledger commands.

Wire format::

    <marker><field1>,<field2>,...

``marker`` is one character from :data:`MARKERS`. Fields are separated by a
hard comma (no quoting or escaping), stripped of surrounding white space
(:data:`WHITESPACE`), and typed independently: a field that parses as a
signed 32-bit integer becomes a :class:`Number`, anything else (the empty
string included) a :class:`Text`.

The strip set is the Unicode ``White_Space`` property, which is narrower than
:meth:`str.strip`: the separators U+001C..U+001F are kept as field content.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from .errors import MalformedCommandError
from .logging_setup import get_logger

MARKERS: tuple[str, ...] = ("&", ">", "+")
SEPARATOR = ","

WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

logger = get_logger("linda.tokens")


@dataclass(frozen=True, slots=True)
class Marker:
    """Leading operation symbol of a command line."""

    char: str

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Text:
    value: str

    def __str__(self) -> str:
        return self.value


type Token = Marker | Number | Text


@dataclass(frozen=True, slots=True)
class Command:
    """A tokenized command line and the local time it was parsed at.

    ``tokens[0]`` is always a :class:`Marker`; no other position holds one.
    """

    tokens: tuple[Token, ...]
    created_at: datetime

    @property
    def marker(self) -> Marker:
        head = self.tokens[0]
        assert isinstance(head, Marker)  # guaranteed by parse_command
        return head

    @property
    def fields(self) -> tuple[Token, ...]:
        return self.tokens[1:]

    def __str__(self) -> str:
        return self.marker.char + SEPARATOR.join(str(t) for t in self.fields)


def _parse_int(field: str) -> int | None:
    if not _INT_RE.fullmatch(field):
        return None
    value = int(field)
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


def tokenize_field(field: str) -> Number | Text:
    """Type a single raw field after stripping surrounding whitespace."""

    stripped = field.strip(WHITESPACE)
    value = _parse_int(stripped)
    if value is None:
        return Text(stripped)
    return Number(value)


def _local_now() -> datetime:
    return datetime.now().astimezone()


def parse_command(text: str, *, now: Callable[[], datetime] | None = None) -> Command:
    """Tokenize ``text`` into a :class:`Command`.

    Raises
    ------
    MalformedCommandError
        When ``text`` is empty or its first character is not in :data:`MARKERS`.
    """

    if not text:
        raise MalformedCommandError("empty command line")
    head, rest = text[0], text[1:]
    if head not in MARKERS:
        raise MalformedCommandError(f"got {head!r}, expected one of {' '.join(MARKERS)}")

    tokens: list[Token] = [Marker(head)]
    # A bare marker carries no fields at all.
    if rest:
        tokens.extend(tokenize_field(f) for f in rest.split(SEPARATOR))

    created_at = (now or _local_now)()
    command = Command(tokens=tuple(tokens), created_at=created_at)
    logger.debug("Cmd %r created at %s", command.tokens, created_at.isoformat())
    return command


__all__ = [
    "MARKERS",
    "SEPARATOR",
    "WHITESPACE",
    "Command",
    "Marker",
    "Number",
    "Text",
    "Token",
    "parse_command",
    "tokenize_field",
]
