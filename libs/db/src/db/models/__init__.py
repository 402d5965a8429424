"""Shared SQLAlchemy models registry for the ledger database.

Currently includes the single ``transaction`` table written by ``linda``.
"""

from .ledger import Base, LedgerTransaction

__all__ = [
    "Base",
    "LedgerTransaction",
]
