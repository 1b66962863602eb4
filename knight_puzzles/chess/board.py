"""The Board is the explicit 8x8 grid behind a PosEnc string. Converting between the two is done in posenc.py"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Self

from knight_puzzles.chess.pieces import Color, Piece, PieceType
from knight_puzzles.chess.square import Square, all_squares


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def empty(cls) -> Self:
        return cls({square: Piece.empty() for square in all_squares()})

    def piece(self, square: Square) -> Piece:
        return self.position[square]

    def place_piece(self, square: Square, piece: Piece) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.position[square] = Piece.empty()

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Whatever stood on to_square gets overwritten (captured)"""
        piece_that_moved = self.piece(from_square)
        self.remove_piece(from_square)
        self.place_piece(to_square, piece_that_moved)

    def is_empty(self, square: Square) -> bool:
        return self.piece(square).is_empty

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        target = Piece(piece_type, color)
        return [square for square, piece in self.position.items() if piece == target]

    def copy(self) -> Self:
        return deepcopy(self)
