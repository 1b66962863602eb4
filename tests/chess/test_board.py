"""Unit tests for knight_puzzles/chess/board.py"""

from knight_puzzles.chess.board import Board
from knight_puzzles.chess.pieces import Color, Piece, PieceType
from knight_puzzles.chess.posenc import decode
from knight_puzzles.chess.square import Square

E4 = Square.from_algebraic("e4")
E5 = Square.from_algebraic("e5")


def test_empty_board() -> None:
    board = Board.empty()
    assert len(board.position) == 64
    assert all(piece.is_empty for piece in board.position.values())


def test_place_and_remove_piece() -> None:
    board = Board.empty()
    board.place_piece(E4, Piece(PieceType.KNIGHT, Color.WHITE))
    assert board.piece(E4) == Piece(PieceType.KNIGHT, Color.WHITE)
    assert not board.is_empty(E4)

    board.remove_piece(E4)
    assert board.is_empty(E4)


def test_move_piece_captures() -> None:
    """Whatever was on the target square disappears"""
    board = decode("8/8/8/4p3/4Q3/8/8/8")
    board.move_piece(E4, E5)
    assert board.is_empty(E4)
    assert board.piece(E5) == Piece(PieceType.QUEEN, Color.WHITE)


def test_locate_pieces() -> None:
    board = decode("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")
    assert board.locate_pieces(PieceType.KING, Color.WHITE) == [Square.from_algebraic("e1")]
    assert len(board.locate_pieces(PieceType.PAWN, Color.BLACK)) == 8


def test_copy_is_independent() -> None:
    board = decode("8/8/8/8/4Q3/8/8/8")
    copied = board.copy()
    copied.remove_piece(E4)
    assert not board.is_empty(E4)
    assert copied.is_empty(E4)
