"""Error taxonomy for the ``linda`` command pipeline.

Parse and classification errors are fatal for the current line; gateway
errors wrap the underlying SQLAlchemy failure (available as ``__cause__``).
The CLI is the only layer that turns these into exit codes.
"""

from __future__ import annotations


class LindaError(Exception):
    """Base class for all errors raised by ``linda``."""

    message = "linda failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(self.message if detail is None else f"{self.message}: {detail}")


class MalformedCommandError(LindaError, ValueError):
    message = "The first character in the command line does not match the allowed characters"


class NoSpecifiedOrderKindError(LindaError, ValueError):
    message = "There is no operation type for the specified command"


class SchemaError(LindaError):
    message = "Can't initialize the database schema"


class StatementError(LindaError):
    message = "Can't execute the statement"


__all__ = [
    "LindaError",
    "MalformedCommandError",
    "NoSpecifiedOrderKindError",
    "SchemaError",
    "StatementError",
]
