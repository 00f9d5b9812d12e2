"""Ten-pin bowling scoring."""

from .exceptions import (
    BowlingError,
    FrameLookupError,
    GameInProgress,
    GameOver,
    InvalidPinCount,
    TooManyPinsInFrame,
)
from .scoring import Frame, Game

__all__ = [
    "BowlingError",
    "Frame",
    "FrameLookupError",
    "Game",
    "GameInProgress",
    "GameOver",
    "InvalidPinCount",
    "TooManyPinsInFrame",
]
