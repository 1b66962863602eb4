"""Helpers for the castling special case when applying a move."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Self

from knight_puzzles.chess.square import Square


class CastlingDirection(Enum):
    """The four castling directions. Values are the king moves (UCI) that trigger them."""

    WHITE_KING_SIDE = "e1g1"
    WHITE_QUEEN_SIDE = "e1c1"
    BLACK_KING_SIDE = "e8g8"
    BLACK_QUEEN_SIDE = "e8c8"


@dataclass(frozen=True)
class RookRelocation:
    """Where the rook comes from / ends up when castling in a given direction."""

    rook_from: Square
    rook_to: Square

    @classmethod
    def from_algebraic(cls, r_from: str, r_to: str) -> Self:
        """Convenience method: to make mapping shown below (from CastlingDirection) more readable"""
        return cls(Square.from_algebraic(r_from), Square.from_algebraic(r_to))


# The rook moves (in classical chess) made when castling.
# NOTE: Only these exact king moves count as castling. A king starting elsewhere (e.g. Chess960) never moves a rook.
CASTLING_RULES: dict[CastlingDirection, RookRelocation] = {
    CastlingDirection.WHITE_KING_SIDE: RookRelocation.from_algebraic("h1", "f1"),
    CastlingDirection.WHITE_QUEEN_SIDE: RookRelocation.from_algebraic("a1", "d1"),
    CastlingDirection.BLACK_KING_SIDE: RookRelocation.from_algebraic("h8", "f8"),
    CastlingDirection.BLACK_QUEEN_SIDE: RookRelocation.from_algebraic("a8", "d8"),
}


def castling_direction(move_uci: str) -> Optional[CastlingDirection]:
    """Exact lookup of the move notation. Anything else (including a promotion suffix) is not castling."""
    try:
        return CastlingDirection(move_uci)
    except ValueError:
        return None
