"""Unit tests for knight_puzzles/chess/square.py"""

from string import ascii_lowercase

import pytest

from knight_puzzles.chess.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file]}{8 - rank}")
        for file in range(8)
        for rank in range(8)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """'a8' maps to file 0, rank 0 (top left when looking at the board as white), 'h1' to file 7, rank 7"""
    square = Square.from_algebraic(notation)
    assert square.file == file
    assert square.rank == rank


@pytest.mark.parametrize(
    "notation",
    [f"{file_name}{rank_name}" for file_name in "abcdefgh" for rank_name in "12345678"],
)
def test_algebraic_roundtrip(notation: str) -> None:
    assert Square.from_algebraic(notation).to_algebraic() == notation


def test_rank_index_counts_down_from_the_eighth_rank() -> None:
    """array rank = 8 - rank digit"""
    assert Square.from_algebraic("e8") == Square(4, 0)
    assert Square.from_algebraic("e1") == Square(4, 7)
    assert Square.from_algebraic("d5") == Square(3, 3)


def test_square_within_bounds() -> None:
    for file in range(BOARD_DIMENSIONS[0]):
        for rank in range(BOARD_DIMENSIONS[1]):
            assert Square(file, rank).is_within_bounds()


def test_square_out_of_bounds() -> None:
    assert not Square(BOARD_DIMENSIONS[0], 0).is_within_bounds()
    assert not Square(0, BOARD_DIMENSIONS[1]).is_within_bounds()
    assert not Square(-1, -1).is_within_bounds()


def test_all_squares_in_fen_order() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
    assert squares[0] == Square.from_algebraic("a8")
    assert squares[7] == Square.from_algebraic("h8")
    assert squares[-1] == Square.from_algebraic("h1")
