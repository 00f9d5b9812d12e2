"""Ten-pin bowling scoring engine."""

from . import bowling
from .frame import Frame, FrameProtocol
from .game import MAX_FRAME_COUNT, BowlingProtocol, Game

__all__ = [
    "bowling",
    "BowlingProtocol",
    "Frame",
    "FrameProtocol",
    "Game",
    "MAX_FRAME_COUNT",
]
