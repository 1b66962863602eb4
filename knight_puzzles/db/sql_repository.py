"""Implementation of (Puzzle)Repository using SQLAlchemy"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from knight_puzzles.core.exceptions import RepositoryError
from knight_puzzles.core.logger import get_logger
from knight_puzzles.core.models import DatasetRecord, PuzzleModel
from knight_puzzles.dataset.partitions import SORT_KEYS_PER_PARTITION
from knight_puzzles.db.schema import DBPuzzle, DBPuzzleState

logger = get_logger(__name__)


class SQLPuzzleRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    # --- DATASET ---
    def fetch_record(self, partition_key: int, sort_key: int) -> DatasetRecord:
        """Get a puzzle from the dataset. Raises RepositoryError if no record lives under the keys."""
        puzzle_db = self.db.get(DBPuzzle, (partition_key, sort_key))
        if puzzle_db is None:
            raise RepositoryError(
                f"No puzzle found with {partition_key=} and {sort_key=}."
            )
        return DatasetRecord(
            fen=puzzle_db.fen, moves=list(puzzle_db.moves), rating=puzzle_db.rating
        )

    def add_records(self, records: list[DatasetRecord]) -> int:
        """
        Fill the dataset table.
        ----

        Records get sorted by rating and stored in partitions of SORT_KEYS_PER_PARTITION consecutive sort keys,
        continuing after the last partition already in the table. Returns the number of records added.
        """
        last_partition = self.db.scalar(select(func.max(DBPuzzle.partition_key))) or 0
        for index, record in enumerate(sorted(records, key=lambda r: r.rating)):
            partition_offset, sort_offset = divmod(index, SORT_KEYS_PER_PARTITION)
            self.db.add(
                DBPuzzle(
                    partition_key=last_partition + partition_offset + 1,
                    sort_key=sort_offset + 1,
                    fen=record.fen,
                    moves=list(record.moves),
                    rating=record.rating,
                )
            )
        self.db.commit()
        logger.debug("Added %d puzzles after partition %d", len(records), last_partition)
        return len(records)

    # --- PUZZLES IN PROGRESS ---
    def session_exists(self, scope_id: str) -> bool:
        return self._fetch_state(scope_id) is not None

    def load_session(self, scope_id: str) -> PuzzleModel | None:
        """Get the puzzle in progress, if any."""
        state_db = self._fetch_state(scope_id)
        if state_db:
            return self._to_model(state_db)
        return None

    def save_session(self, scope_id: str, puzzle: PuzzleModel) -> None:
        """Insert, or overwrite the existing record of the channel."""
        state_db = self._fetch_state(scope_id)
        if state_db is None:
            state_db = DBPuzzleState(channel_id=scope_id)
            self.db.add(state_db)
        state_db.fen = puzzle.position
        state_db.moves = list(puzzle.remaining_moves)
        state_db.playing_as = puzzle.playing_as
        self.db.commit()
        logger.debug("Stored puzzle state for channel %s", scope_id)

    def delete_session(self, scope_id: str) -> None:
        """Remove a puzzle's record."""
        state_db = self._fetch_state(scope_id)
        if not state_db:
            return
        self.db.delete(state_db)
        self.db.commit()
        logger.debug("Deleted puzzle state for channel %s", scope_id)

    def _fetch_state(self, scope_id: str) -> DBPuzzleState | None:
        query = select(DBPuzzleState).where(DBPuzzleState.channel_id == scope_id)
        return self.db.scalar(query)

    def _to_model(self, state_db: DBPuzzleState) -> PuzzleModel:
        """Convert SQLAlchemy model to data transfer model."""
        return PuzzleModel(
            position=state_db.fen,
            remaining_moves=list(state_db.moves),
            playing_as=state_db.playing_as,
        )
