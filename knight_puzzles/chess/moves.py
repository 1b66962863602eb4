"""
Moves and how a single move changes the board.

Key idea: the puzzle solution is precomputed, so every move handed to apply_move is assumed to be legal.
Nothing here checks legality. An illegal (but well-formed) move just produces a strange board.
"""

from dataclasses import dataclass
from typing import Optional, Self

from knight_puzzles.chess.board import Board
from knight_puzzles.chess.castling import CASTLING_RULES, castling_direction
from knight_puzzles.chess.pieces import (
    PIECE_TO_FEN,
    PROMOTION_OPTIONS,
    Color,
    Piece,
    PieceType,
)
from knight_puzzles.chess.square import FILE_NAMES, RANK_NAMES, Square
from knight_puzzles.core.exceptions import InvalidMoveNotationError


def is_valid_uci(uci: str) -> bool:
    """<from file><from rank><to file><to rank>[promotion piece]"""
    if len(uci) not in (4, 5):
        return False

    from_file, from_rank, to_file, to_rank = uci[:4]
    if from_file not in FILE_NAMES or to_file not in FILE_NAMES:
        return False
    if from_rank not in RANK_NAMES or to_rank not in RANK_NAMES:
        return False

    if len(uci) == 5 and uci[4].lower() not in PROMOTION_OPTIONS:
        return False
    return True


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square
    promote_to: Optional[PieceType] = None

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        Universal Chess Interface:
        ---
        ---
        The notation used by the puzzle dataset (and by players answering a puzzle)

        examples:
        * "e2e4": move the piece that was on e2 to e4
        * "e7e8q" : (pawn) moves from e7 to e8 and promotes to a queen (the q)
        * "e1g1": the king castles king side
        """
        if not is_valid_uci(uci):
            raise InvalidMoveNotationError(f"Cannot interpret {uci!r} as a UCI move.")

        from_sq = Square.from_algebraic(uci[:2])
        to_sq = Square.from_algebraic(uci[2:4])
        promote_to = PROMOTION_OPTIONS[uci[4].lower()] if len(uci) == 5 else None
        return cls(from_sq, to_sq, promote_to)

    def to_uci(self) -> str:
        """Convert into UCI notation"""
        piece_char = PIECE_TO_FEN[self.promote_to] if self.promote_to else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{piece_char}"

    @property
    def file_distance(self) -> int:
        return abs(self.to_square.file - self.from_square.file)


def moving_piece(board: Board, move: Move, color_to_move: Color) -> Piece:
    """The piece that will end up on the target square.

    With a promotion that is the new piece, colored like the pawn that promotes.
    (If the starting square is empty we can only trust the side to move for the color.)
    """
    piece_on_start = board.piece(move.from_square)
    if move.promote_to is None:
        return piece_on_start

    color = piece_on_start.color if not piece_on_start.is_empty else color_to_move
    return Piece(move.promote_to, color)


def is_en_passant(board: Board, move: Move, piece: Piece) -> bool:
    """A pawn moving one file sideways onto an empty square must be capturing en passant."""
    return (
        piece.type == PieceType.PAWN
        and move.file_distance == 1
        and board.is_empty(move.to_square)
    )


def en_passant_capture_square(move: Move) -> Square:
    """The captured pawn stands next to the moving pawn: same rank as the start, same file as the target."""
    return Square(file=move.to_square.file, rank=move.from_square.rank)


def apply_move(board: Board, move: Move, color_to_move: Color) -> Board:
    """
    Play a move and return the resulting board. The board passed in is left untouched.
    ----

    1. Determine the piece that moves (promotion replaces the pawn)
    2. En passant? remove the pawn that gets taken
    3. Move the piece (whatever stands on the target square is captured)
    4. Castling? move the rook as well
    """
    new_board = board.copy()
    piece = moving_piece(new_board, move, color_to_move)

    if is_en_passant(new_board, move, piece):
        new_board.remove_piece(en_passant_capture_square(move))

    new_board.remove_piece(move.from_square)
    new_board.place_piece(move.to_square, piece)

    direction = castling_direction(move.to_uci())
    if direction is not None:
        rook = CASTLING_RULES[direction]
        new_board.move_piece(rook.rook_from, rook.rook_to)

    return new_board
