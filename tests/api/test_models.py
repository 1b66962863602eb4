"""Unit tests for knight_puzzles/api/models.py"""

import pytest

from knight_puzzles.api.models import AnswerRequest, NewPuzzleRequest, PuzzleResponse
from knight_puzzles.core.exceptions import InvalidRequestError
from knight_puzzles.core.shared_types import Color


# -- Validation - NewPuzzleRequest --
def test_rating_is_optional() -> None:
    request = NewPuzzleRequest(channel_id="1234")
    assert request.rating is None


def test_rating_given() -> None:
    request = NewPuzzleRequest(channel_id="1234", rating=2200)
    assert request.rating == 2200


def test_blank_channel() -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewPuzzleRequest(channel_id="   ", rating=1500)


# -- Validation - AnswerRequest --
@pytest.mark.parametrize("move", ["e2e4", "e7e8q", "a1h8", " g1f3 "])
def test_valid_moves(move: str) -> None:
    request = AnswerRequest(channel_id="1234", move=move)
    assert request.move == move.strip()


@pytest.mark.parametrize("move", ["Nf3", "e2-e4", "e2e4e5", "e9e4", "O-O", ""])
def test_invalid_moves(move: str) -> None:
    """Only UCI notation is understood"""
    with pytest.raises(InvalidRequestError):
        _ = AnswerRequest(channel_id="1234", move=move)


# -- Response --
def test_puzzle_response_serializes_color() -> None:
    response = PuzzleResponse(
        channel_id="1234",
        position="8/8/8/8/8/8/8/8",
        playing_as=Color.BLACK,
        rating=None,
        last_move="e2e4",
        moves_left=3,
    )
    assert response.model_dump()["playing_as"] == "black"
