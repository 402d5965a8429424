from __future__ import annotations

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


# ---------------------------
# Core: transaction
# ---------------------------


class LedgerTransaction(Base):
    __tablename__ = "transaction"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Unix epoch seconds of the moment the command line was parsed.
    created_at: Mapped[int] = mapped_column(Integer, nullable=False)
    tax: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    # Reserved: the command grammar never populates these two columns.
    duration: Mapped[int | None] = mapped_column(
        Integer, nullable=True, server_default=text("0")
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Emit the AUTOINCREMENT keyword so ids are never reused after deletes.
    __table_args__ = {"sqlite_autoincrement": True}


__all__ = [
    "Base",
    "LedgerTransaction",
]
