"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The repository (lower) and the service (higher) exchange these instead of domain objects,
so the puzzle engine never depends on how or where things get stored.
"""

from dataclasses import dataclass

# Type aliases to make the models easier to read
PieceColor = str
MoveUCI = str


@dataclass(frozen=True)
class DatasetKey:
    """Two-level address of one record in the puzzle dataset."""

    partition_key: int
    sort_key: int


@dataclass
class DatasetRecord:
    """A puzzle as stored in the (read-only) dataset.

    * fen: full FEN string. Only the board position and the side to move are used.
    * moves: the complete solution. The first move belongs to the 'opponent'.
    * rating: difficulty of the puzzle
    """

    fen: str
    moves: list[MoveUCI]
    rating: int


@dataclass
class PuzzleModel:
    """Transport-safe representation of a puzzle in progress, used between Service and DB layers."""

    position: str
    remaining_moves: list[MoveUCI]
    playing_as: PieceColor
