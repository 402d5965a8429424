"""CLI for the ``linda`` ledger.

This module exposes callable command handlers (``cmd_init``, ``cmd_exec``,
``cmd_list``) that return process exit codes, and a Typer-based console
interface around them. ``DATABASE_URL`` and ``LINDA_LOG_LEVEL`` may be provided
through a local ``.env`` loaded with ``python-dotenv``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv

from .classify import classify
from .errors import (
    MalformedCommandError,
    NoSpecifiedOrderKindError,
    SchemaError,
    StatementError,
)
from .gateway import PersistenceGateway
from .logging_setup import configure_logging
from .records import Record, build_record
from .statements import render_statement
from .tokens import parse_command

DEFAULT_TEXT = "&10,some word"


def _report(e: Exception) -> None:
    print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)


def _format_record(record: Record) -> str:
    return f"{record.created_at.isoformat()}\t{record.tax}\t{record.category}"


def cmd_init(*, database_url: str | None = None) -> int:
    """Ensure the ledger table exists. Safe to run repeatedly."""

    with PersistenceGateway(database_url) as gateway:
        try:
            gateway.ensure_schema()
        except SchemaError as e:
            _report(e)
            return 1
        print(f"Database ready: {gateway.database_url}")
    return 0


def cmd_exec(
    text: str,
    *,
    database_url: str | None = None,
    dry_run: bool = False,
    now: Callable[[], datetime] | None = None,
) -> int:
    """Parse one command line and persist the resulting record.

    Exit codes
    ----------
    - ``0``: the record was persisted (or printed with ``dry_run``), or the
      command classified as an expense, which has no record producer yet.
    - ``1``: malformed line, marker without an operation kind, token shape that
      matches no operation, or a database failure.

    A line that matches no operation is not a classification error:
    :func:`linda.classify.classify` just returns ``None`` for it. Exiting with
    ``1`` is a CLI policy, because such a line recorded nothing the user asked
    for. Expense lines, by contrast, are valid and exit ``0``.
    """

    try:
        command = parse_command(text, now=now)
        classified = classify(command)
    except (MalformedCommandError, NoSpecifiedOrderKindError) as e:
        _report(e)
        return 1

    if classified is None:
        print(
            f"Error: no operation matches {command!s}; expected <marker><number>,<text>",
            file=sys.stderr,
        )
        return 1

    statement = render_statement(classified)
    record = build_record(classified)
    if statement is None or record is None:
        print(f"Nothing to do: {classified.kind.name.lower()} commands are not recorded")
        return 0

    print(statement)
    print(_format_record(record))
    if dry_run:
        return 0

    try:
        with PersistenceGateway(database_url) as gateway:
            gateway.execute(statement)
    except StatementError as e:
        _report(e)
        print("Hint: run `linda init` to create the database schema.", file=sys.stderr)
        return 1
    return 0


def cmd_list(*, database_url: str | None = None, limit: int | None = None) -> int:
    """Print persisted records, oldest first."""

    try:
        with PersistenceGateway(database_url) as gateway:
            records = gateway.fetch_records(limit=limit)
    except StatementError as e:
        _report(e)
        return 1
    for record in records:
        print(_format_record(record))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    name="linda",
    no_args_is_help=True,
    add_completion=False,
    help="Record income/expense orders written as one-line commands (e.g. '&10,salary').",
)


@app.command("init")
def init_cmd(
    *,
    database_url: str | None = typer.Option(
        None, help="Override DATABASE_URL (falls back to env var, then ./linda.db)."
    ),
) -> None:
    """Create the ledger table if it does not exist."""

    raise typer.Exit(cmd_init(database_url=database_url))


@app.command("exec")
def exec_cmd(
    *,
    text: str = typer.Option(
        DEFAULT_TEXT, "--text", "-t", help="Command line: <marker><field>,<field>,..."
    ),
    database_url: str | None = typer.Option(
        None, help="Override DATABASE_URL (falls back to env var, then ./linda.db)."
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the statement and record without persisting."
    ),
) -> None:
    """Parse a command line and persist the record it describes."""

    raise typer.Exit(cmd_exec(text, database_url=database_url, dry_run=dry_run))


@app.command("list")
def list_cmd(
    *,
    database_url: str | None = typer.Option(
        None, help="Override DATABASE_URL (falls back to env var, then ./linda.db)."
    ),
    limit: int | None = typer.Option(None, min=1, help="Show only the N most recent records."),
) -> None:
    """List persisted records."""

    raise typer.Exit(cmd_list(database_url=database_url, limit=limit))


@app.callback()
def _root() -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures logging once.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    main()
