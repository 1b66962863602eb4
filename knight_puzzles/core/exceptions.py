"""Custom exceptions. Every layer raises a subclass of PuzzleError so callers can catch a single top-level type."""


class PuzzleError(Exception):
    """Base class for all puzzle related errors"""


class MalformedEncodingError(PuzzleError):
    """Board position (or FEN record) does not follow the rank/file grammar."""


class InvalidMoveNotationError(PuzzleError):
    """Move text cannot be read as UCI notation."""


class EmptyMoveQueueError(PuzzleError):
    """Tried to play a move on a puzzle that has no moves left (already solved)."""


class RepositoryError(PuzzleError):
    """Requested record could not be found in the persistence layer."""


class PuzzleInProgressError(PuzzleError):
    """A scope (channel) can only have one active puzzle at a time."""


class NoPuzzleInProgressError(PuzzleError):
    """Answer submitted in a scope without an active puzzle."""


class InvalidRequestError(PuzzleError):
    """Request data failed validation."""
