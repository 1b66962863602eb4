"""Orchestration of communication from the callers (chat commands) to the puzzle engine and persistence layers."""

from dataclasses import dataclass
from random import Random
from typing import Optional

from knight_puzzles.api.models import (
    AnswerRequest,
    AnswerResponse,
    NewPuzzleRequest,
    PuzzleResponse,
)
from knight_puzzles.chess.puzzle import COLOR_NAMES, PuzzleSession
from knight_puzzles.core.config import Settings, get_settings
from knight_puzzles.core.exceptions import (
    NoPuzzleInProgressError,
    PuzzleInProgressError,
    RepositoryError,
)
from knight_puzzles.core.logger import get_logger
from knight_puzzles.db.repository import PuzzleRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of submitting a move.

    * accepted: the move matched the solution. If not, `session` is the very session that was submitted.
    * solved: no moves left
    * next_opponent_move: the reply that was played automatically (if the puzzle continues)
    """

    accepted: bool
    solved: bool
    next_opponent_move: Optional[str]
    session: PuzzleSession


class PuzzleService:
    """Orchestration of layers for chess puzzles."""

    def __init__(
        self,
        repository: PuzzleRepository,
        rng: Optional[Random] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.repo = repository
        self.rng = rng or Random()
        self.settings = settings or get_settings()

    # -- Puzzle engine logic ---
    def start_puzzle(self, rating: int) -> tuple[PuzzleSession, str]:
        """Random puzzle around the rating, with the opponent's first move already played."""
        session = PuzzleSession.create(rating, self.repo.fetch_record, self.rng)

        # for the type checker: create() always plays a move
        assert session.last_move is not None
        return session, session.last_move

    def submit_move(self, session: PuzzleSession, move_uci: str) -> MoveOutcome:
        """
        Player answers with a move.
        ----

        1. Compare literally with the next move of the solution. Wrong? Nothing changes.
        2. Play the move
        3. Moves left? Play the opponent's reply as well
        """
        if move_uci != session.next_move:
            return MoveOutcome(
                accepted=False,
                solved=session.is_solved,
                next_opponent_move=None,
                session=session,
            )

        after_move = session.apply_next_move(move_uci)
        if after_move.is_solved:
            return MoveOutcome(
                accepted=True, solved=True, next_opponent_move=None, session=after_move
            )

        opponent_move = after_move.next_move
        after_reply = after_move.apply_next_move()
        return MoveOutcome(
            accepted=True,
            solved=after_reply.is_solved,
            next_opponent_move=opponent_move,
            session=after_reply,
        )

    # -- Channel (scope) logic ---
    def new_puzzle(self, request: NewPuzzleRequest) -> PuzzleResponse:
        """Generate a new puzzle, if the channel is not busy with another one already."""
        if self.repo.session_exists(request.channel_id):
            raise PuzzleInProgressError(
                f"A puzzle is already in progress in channel {request.channel_id}."
            )

        rating = (
            request.rating
            if request.rating is not None
            else self.settings.default_rating
        )
        session, opponent_move = self.start_puzzle(rating)

        # store in repository
        self.repo.save_session(request.channel_id, session.to_model())
        logger.info(
            "New puzzle (rating %s) in channel %s, opponent played %s",
            session.rating,
            request.channel_id,
            opponent_move,
        )

        return PuzzleResponse(
            channel_id=request.channel_id,
            position=session.position,
            playing_as=COLOR_NAMES[session.playing_as],
            rating=session.rating,
            last_move=opponent_move,
            moves_left=len(session.remaining_moves),
        )

    def answer(self, request: AnswerRequest) -> AnswerResponse:
        """Answer the next move of the puzzle in progress in the channel."""
        session = self._fetch_session(request.channel_id)
        outcome = self.submit_move(session, request.move)

        if not outcome.accepted:
            logger.info("Wrong move %s in channel %s", request.move, request.channel_id)
        elif outcome.solved:
            self.repo.delete_session(request.channel_id)
            logger.info("Puzzle solved in channel %s", request.channel_id)
        else:
            self.repo.save_session(request.channel_id, outcome.session.to_model())
            logger.info(
                "Correct move %s in channel %s, opponent replied %s",
                request.move,
                request.channel_id,
                outcome.next_opponent_move,
            )

        return AnswerResponse(
            channel_id=request.channel_id,
            move=request.move,
            accepted=outcome.accepted,
            solved=outcome.solved,
            opponent_move=outcome.next_opponent_move,
            position=outcome.session.position,
        )

    # -- Internal helpers --
    def _fetch_session(self, channel_id: str) -> PuzzleSession:
        """Attempt to find the puzzle in progress and raise error if there is none."""
        if not self.repo.session_exists(channel_id):
            raise NoPuzzleInProgressError(
                f"There is no puzzle in progress in channel {channel_id}. Start one first."
            )
        model = self.repo.load_session(channel_id)
        if model is None:
            raise RepositoryError(f"Puzzle state of channel {channel_id} not found.")
        return PuzzleSession.from_model(model)
