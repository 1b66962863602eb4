"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBPuzzle(Base):
    """One record of the puzzle dataset. Addressed by (partition_key, sort_key)"""

    __tablename__ = "puzzles"
    partition_key: Mapped[int] = mapped_column(primary_key=True)
    sort_key: Mapped[int] = mapped_column(primary_key=True)
    fen: Mapped[str]
    moves: Mapped[list[str]] = mapped_column(JSON)
    rating: Mapped[int] = mapped_column(index=True)


class DBPuzzleState(Base):
    """Puzzle in progress, one per channel"""

    __tablename__ = "puzzle_states"
    channel_id: Mapped[str] = mapped_column(primary_key=True)
    fen: Mapped[str]
    moves: Mapped[list[str]] = mapped_column(JSON, default=list)
    playing_as: Mapped[str]
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
