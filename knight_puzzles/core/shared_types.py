"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE: the domain layer (knight_puzzles/chess/pieces.py) has its own Color enum that also knows about empty squares.
# --- This one is the transport-safe version: the names as they are stored and sent across boundaries.
class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"
