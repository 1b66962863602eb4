"""
PosEnc: the board position part of a FEN string.
----

<8th rank>/<7th rank>/.../<1st rank>

* Every rank lists the files a to h.
* A letter is a piece: upper case for white, lower case for black (pnbrqk).
* A digit 1-8 is a run of that many empty squares.
* Every rank must add up to exactly 8 squares.

ex) the standard starting position
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR

The dataset stores full FEN strings. Besides the position, only the second field (side to move) is of interest:
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
"""

from knight_puzzles.chess.board import Board
from knight_puzzles.chess.pieces import FEN_TO_PIECE, Color, Piece
from knight_puzzles.chess.square import BOARD_DIMENSIONS, Square
from knight_puzzles.core.exceptions import MalformedEncodingError

RANK_DELIMITER = "/"
EMPTY_RUN_DIGITS = "12345678"
COLOR_CODES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def decode(text: str) -> Board:
    """Construct the board from a PosEnc string. Raises MalformedEncodingError instead of repairing anything."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_groups = text.split(RANK_DELIMITER)
    if len(rank_groups) != num_ranks:
        raise MalformedEncodingError(
            f"Expected {num_ranks} ranks separated by {RANK_DELIMITER!r}, found {len(rank_groups)}: {text!r}"
        )

    board = Board.empty()
    for rank, rank_group in enumerate(rank_groups):
        file = 0
        for character in rank_group:
            if character in EMPTY_RUN_DIGITS:
                # squares are already empty, just skip ahead
                file += int(character)
            elif character.isascii() and character.lower() in FEN_TO_PIECE:
                if file < num_files:
                    board.place_piece(Square(file, rank), Piece.from_fen(character))
                file += 1
            else:
                raise MalformedEncodingError(
                    f"Unexpected character {character!r} in rank {rank_group!r}"
                )

        if file != num_files:
            raise MalformedEncodingError(
                f"Rank {rank_group!r} covers {file} squares instead of {num_files}"
            )
    return board


def encode(board: Board) -> str:
    """Ranks are separated by slashes, top rank first, no trailing slash."""
    return RANK_DELIMITER.join(
        _encode_rank(board, rank) for rank in range(BOARD_DIMENSIONS[1])
    )


def _encode_rank(board: Board, rank: int) -> str:
    """PosEnc string of a single rank"""
    characters: list[str] = []
    empty_count = 0
    for file in range(BOARD_DIMENSIONS[0]):
        piece = board.piece(Square(file, rank))

        if piece.is_empty:
            empty_count += 1
            continue

        if empty_count > 0:
            characters.append(str(empty_count))
            empty_count = 0
        characters.append(piece.to_fen())

    # a rank ending on empty squares (or an entirely empty rank) still needs its digit
    if empty_count > 0:
        characters.append(str(empty_count))
    return "".join(characters)


def is_valid_posenc(text: str) -> bool:
    """Same checks as decode, without raising."""
    try:
        decode(text)
    except MalformedEncodingError:
        return False
    return True


def parse_record_fen(fen: str) -> tuple[str, Color]:
    """Split a full FEN (as stored in the dataset) into the PosEnc and the color to move.

    Everything after the second field (castling rights, en passant, clocks) is ignored.
    """
    parts = fen.strip().split()
    if len(parts) < 2:
        raise MalformedEncodingError(
            f"FEN needs at least a position and a side to move: {fen!r}"
        )

    position, active_color = parts[0], parts[1]
    if active_color not in COLOR_CODES:
        raise MalformedEncodingError(
            f"Side to move must be one of {','.join(COLOR_CODES)}, got {active_color!r}"
        )

    # validate the position part as well, so bad records fail early
    decode(position)
    return position, COLOR_CODES[active_color]
