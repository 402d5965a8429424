"""Engine and session helpers for the ledger database.

Usage
-----
from db.client import make_engine, session_scope

engine = make_engine()
with session_scope(engine) as s:
    s.execute(...)
engine.dispose()
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

DEFAULT_DATABASE_URL = "sqlite+pysqlite:///linda.db"


def resolve_database_url(override: str | None = None) -> str:
    """Pick the URL to use: explicit override, ``DATABASE_URL``, then ``./linda.db``."""

    return override or os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL


def make_engine(database_url: str | None = None) -> Engine:
    """Create a new engine; the caller owns it and disposes of it."""

    return create_engine(resolve_database_url(database_url))


@contextmanager
def session_scope(bind: Engine) -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on any error."""

    session = Session(bind=bind, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


__all__ = [
    "DEFAULT_DATABASE_URL",
    "make_engine",
    "resolve_database_url",
    "session_scope",
]
