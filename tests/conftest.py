"""Pytest configuration for test isolation.

The gateway and CLI read ``DATABASE_URL`` from the environment, and the CLI
configures the ``linda`` logger once per process. To keep tests hermetic we
point ``DATABASE_URL`` at a per-test SQLite file and undo the logging setup
after every test.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Make the repo root and `libs/db/src` importable without an install.
_ROOT = Path(__file__).resolve().parents[1]
sys.path[:0] = [p for p in [str(_ROOT / "libs" / "db" / "src"), str(_ROOT)] if p not in sys.path]

from linda.logging_setup import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Force a per-test database file so tests don't share on-disk state."""

    url = f"sqlite+pysqlite:///{os.fspath(tmp_path / 'linda.db')}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.delenv("LINDA_LOG_LEVEL", raising=False)
    # .env lookups happen relative to CWD; keep them inside the test dir.
    monkeypatch.chdir(tmp_path)
    yield url
    reset_logging()


@pytest.fixture
def database_url(_isolate_database: str) -> str:
    return _isolate_database
