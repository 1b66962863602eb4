"""Protocol repository (implemented with SQLAlchemy in sql_repository.py, mocked with a dict in the tests)"""

from typing import Protocol

from knight_puzzles.core.models import DatasetRecord, PuzzleModel


class PuzzleRepository(Protocol):
    """Persistence layer orchestration: the puzzle dataset (read-only) + puzzles in progress per scope (channel)"""

    def fetch_record(self, partition_key: int, sort_key: int) -> DatasetRecord:
        """Get a puzzle from the dataset. Raises RepositoryError if no record lives under the keys."""
        ...

    def session_exists(self, scope_id: str) -> bool:
        """Is a puzzle in progress for this scope?"""
        ...

    def load_session(self, scope_id: str) -> PuzzleModel | None:
        """Get the puzzle in progress, if any."""
        ...

    def save_session(self, scope_id: str, puzzle: PuzzleModel) -> None:
        """Store the puzzle in progress (overwrites an earlier one for the same scope)."""
        ...

    def delete_session(self, scope_id: str) -> None:
        """Remove the puzzle in progress. No-op if there is none."""
        ...
