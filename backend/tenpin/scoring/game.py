"""Ten-frame game orchestration on top of :class:`~tenpin.scoring.frame.Frame`."""

import logging
from typing import Optional, Protocol, Sequence, Tuple

from ..exceptions import FrameLookupError, GameInProgress, GameOver
from ..services.validation import validate_pins
from .frame import Frame, FrameProtocol

logger = logging.getLogger(__name__)

MAX_FRAME_COUNT = 10


class BowlingProtocol(Protocol):
    def roll(self, pins: int) -> None:
        ...

    def score(self) -> int:
        ...


def default_frames() -> list[Frame]:
    return [
        Frame(is_tenth_frame=index == MAX_FRAME_COUNT - 1)
        for index in range(MAX_FRAME_COUNT)
    ]


class Game:
    """Sequences ten frames and credits bonus pins to earlier frames.

    Each roll is first offered to every finished frame still owed bonus
    pins, then recorded in the frame in progress. The active frame only
    moves forward, one frame at a time, and never past the tenth.
    """

    def __init__(self, frames: Optional[Sequence[FrameProtocol]] = None) -> None:
        if frames is None:
            frames = default_frames()
        if len(frames) != MAX_FRAME_COUNT:
            raise ValueError(
                f"a game needs exactly {MAX_FRAME_COUNT} frames, got {len(frames)}"
            )
        self._frames: Tuple[FrameProtocol, ...] = tuple(frames)
        self._current_frame_index = 0

    @property
    def frames(self) -> Tuple[FrameProtocol, ...]:
        return self._frames

    @property
    def current_frame_index(self) -> int:
        return self._current_frame_index

    @property
    def current_frame(self) -> FrameProtocol:
        if not 0 <= self._current_frame_index < len(self._frames):
            raise FrameLookupError(self._current_frame_index, len(self._frames))
        return self._frames[self._current_frame_index]

    @property
    def is_complete(self) -> bool:
        return sum(1 for frame in self._frames if frame.is_finished) == MAX_FRAME_COUNT

    @property
    def running_score(self) -> int:
        """Sum of every frame's score so far, bonuses applied to date."""
        return sum(frame.score for frame in self._frames)

    def roll(self, pins: int) -> None:
        if self.is_complete:
            logger.debug("Rejecting roll of %r: game is over", pins)
            raise GameOver()
        validate_pins(pins)

        self._credit_unsettled_frames(pins)

        frame = self.current_frame
        frame.roll(pins)
        frame.check_too_many_pins()

        self._advance()

    def score(self) -> int:
        if not self.current_frame.is_finished:
            raise GameInProgress()
        return self.running_score

    def _credit_unsettled_frames(self, pins: int) -> None:
        for frame in self._frames:
            if not frame.is_finished or frame.is_settled:
                continue
            frame.set_spare_additional_score(pins)
            frame.set_strike_additional_score(pins)

    def _advance(self) -> None:
        frame = self.current_frame
        if not frame.is_finished:
            return
        if frame.is_tenth_frame:
            logger.info("Game complete with a score of %d", self.running_score)
            return
        self._current_frame_index += 1
        logger.debug("Advanced to frame %d", self._current_frame_index + 1)
