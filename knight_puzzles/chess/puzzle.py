"""
The PuzzleSession is the entrypoint into the domain layer for the service layer.
It bundles the position, whose turn it is, and the moves still needed to solve the puzzle.

Sessions are values: playing a move returns a new session and never changes the old one.
"""

from dataclasses import dataclass, replace
from random import Random
from typing import Callable, Optional, Self

from knight_puzzles.chess.moves import Move, apply_move
from knight_puzzles.chess.pieces import Color
from knight_puzzles.chess.posenc import decode, encode, parse_record_fen
from knight_puzzles.core.exceptions import EmptyMoveQueueError, InvalidRequestError
from knight_puzzles.core.models import DatasetRecord, PuzzleModel
from knight_puzzles.core.shared_types import Color as ColorName
from knight_puzzles.dataset.partitions import select_dataset_key

RecordLookup = Callable[[int, int], DatasetRecord]

COLOR_NAMES: dict[Color, ColorName] = {
    Color.WHITE: ColorName.WHITE,
    Color.BLACK: ColorName.BLACK,
}


@dataclass(frozen=True)
class PuzzleSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    position: str  # PosEnc
    side_to_move: Color
    playing_as: Color
    remaining_moves: tuple[str, ...]
    rating: Optional[int] = None
    last_move: Optional[str] = None  # not persisted

    @classmethod
    def create(cls, rating: int, fetch_record: RecordLookup, rng: Random) -> Self:
        """
        New puzzle, ready to show to the player
        ----

        1. pick random dataset keys around the requested rating
        2. fetch the record
        3. play the first move: it always belongs to the opponent
        """
        key = select_dataset_key(rating, rng)
        record = fetch_record(key.partition_key, key.sort_key)
        return cls.from_record(record).apply_next_move()

    @classmethod
    def from_record(cls, record: DatasetRecord) -> Self:
        """Puzzle exactly as stored: the first move in the queue has not been played yet.

        The side to move in the record is the opponent (who plays the first move), so the player gets the other color.
        """
        position, color_to_move = parse_record_fen(record.fen)
        return cls(
            position=position,
            side_to_move=color_to_move,
            playing_as=color_to_move.opponent(),
            remaining_moves=tuple(record.moves),
            rating=record.rating,
        )

    @classmethod
    def from_model(cls, model: PuzzleModel) -> Self:
        """
        Puzzle retrieved from storage.

        NOTE sessions only get stored while waiting for the player's answer, so it is the player's turn.
        The rating is not stored: only position, moves and color matter for continuing play.
        """
        playing_as_name = model.playing_as.lower()
        if playing_as_name not in {name.value for name in ColorName}:
            raise InvalidRequestError(
                f"Invalid color: {model.playing_as!r}. \nPick one from {','.join(ColorName)}"
            )
        playing_as = Color[playing_as_name.upper()]

        # Fail early when storage holds a broken position
        decode(model.position)
        return cls(
            position=model.position,
            side_to_move=playing_as,
            playing_as=playing_as,
            remaining_moves=tuple(model.remaining_moves),
            rating=None,
        )

    def to_model(self) -> PuzzleModel:
        """Encode back into a format the Service/DB layers use"""
        return PuzzleModel(
            position=self.position,
            remaining_moves=list(self.remaining_moves),
            playing_as=COLOR_NAMES[self.playing_as].value,
        )

    @property
    def next_move(self) -> Optional[str]:
        """Front of the queue: the move that has to be played next (None when solved)"""
        return self.remaining_moves[0] if self.remaining_moves else None

    def is_queue_empty(self) -> bool:
        return not self.remaining_moves

    @property
    def is_solved(self) -> bool:
        return self.is_queue_empty()

    @property
    def is_players_turn(self) -> bool:
        return self.side_to_move == self.playing_as

    def apply_next_move(self, move_uci: Optional[str] = None) -> Self:
        """
        Play one move and return the new session
        ----

        The move defaults to the front of the queue. Whatever move is given, the front of the queue gets consumed.
        (Comparing a player's answer against the queue is up to the caller.)

        1. update the board
        2. drop the move from the queue
        3. hand the turn to the other side
        """
        if self.is_queue_empty():
            raise EmptyMoveQueueError(
                "No moves left to play. This puzzle has already been solved."
            )

        move_text = move_uci if move_uci is not None else self.remaining_moves[0]
        move = Move.from_uci(move_text)
        board = apply_move(decode(self.position), move, self.side_to_move)
        return replace(
            self,
            position=encode(board),
            side_to_move=self.side_to_move.opponent(),
            remaining_moves=self.remaining_moves[1:],
            last_move=move_text,
        )
