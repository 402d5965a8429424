"""Public interface for the ``linda`` package.

This module exposes the command grammar (tokenize, classify, build, render),
the persistence gateway and the error taxonomy as the stable import surface.
There is no runtime logic here, only symbol re-exports.
"""

from .classify import ClassifiedCommand, OperationKind, classify
from .errors import (
    LindaError,
    MalformedCommandError,
    NoSpecifiedOrderKindError,
    SchemaError,
    StatementError,
)
from .gateway import PersistenceGateway
from .records import Record, build_record
from .statements import Statement, render_statement
from .tokens import MARKERS, Command, Marker, Number, Text, Token, parse_command

__all__ = [
    # Grammar
    "MARKERS",
    "Command",
    "Marker",
    "Number",
    "Text",
    "Token",
    "parse_command",
    "OperationKind",
    "ClassifiedCommand",
    "classify",
    # Producers
    "Record",
    "build_record",
    "Statement",
    "render_statement",
    # Persistence
    "PersistenceGateway",
    # Errors
    "LindaError",
    "MalformedCommandError",
    "NoSpecifiedOrderKindError",
    "SchemaError",
    "StatementError",
]
