"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from knight_puzzles.chess.moves import is_valid_uci
from knight_puzzles.core.exceptions import InvalidRequestError
from knight_puzzles.core.shared_types import Color

ChannelId = str


# --- REQUEST MODELS ---
class NewPuzzleRequest(BaseModel):
    channel_id: ChannelId
    rating: Optional[int] = None  # service falls back to the configured default rating

    @field_validator("channel_id")
    @classmethod
    def validate_channel_id(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("A puzzle needs a channel to be played in.")
        return value


class AnswerRequest(BaseModel):
    channel_id: ChannelId
    move: str

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        value = value.strip()
        if not is_valid_uci(value):
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r} as UCI notation. E.g. e2e4, or e7e8q to promote."
            )
        return value


# --- RESPONSE MODELS ---
class PuzzleResponse(BaseModel):
    channel_id: ChannelId
    position: str
    playing_as: Color
    rating: Optional[int]
    last_move: str
    moves_left: int


class AnswerResponse(BaseModel):
    channel_id: ChannelId
    move: str
    accepted: bool
    solved: bool
    opponent_move: Optional[str] = None
    position: str
