from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class BowlingError(Exception):
    """Base class for recoverable scoring errors."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def to_problem(self, instance: str | None = None) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            status=self.status_code,
            instance=instance,
            code=self.code,
        )


class InvalidPinCount(BowlingError):
    def __init__(self, pins: object) -> None:
        super().__init__(
            status_code=400,
            title="Invalid pin count",
            detail=f"a roll must knock down between 0 and 10 pins, got {pins!r}",
            code="invalid_pin_count",
        )
        self.pins = pins


class TooManyPinsInFrame(BowlingError):
    def __init__(self, rolls: tuple[int, ...]) -> None:
        super().__init__(
            status_code=400,
            title="Too many pins in frame",
            detail=f"rolls {list(rolls)} knock down more pins than the frame holds",
            code="too_many_pins_in_frame",
        )
        self.rolls = rolls


class GameInProgress(BowlingError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game in progress",
            detail="score is unavailable until the current frame is finished",
            code="game_in_progress",
        )


class GameOver(BowlingError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Game over",
            detail="all ten frames are finished; no more rolls are accepted",
            code="game_over",
        )


class FrameLookupError(AssertionError):
    """The current frame index points outside the frame sequence.

    This is a programming error, not one of the recoverable
    :class:`BowlingError` kinds; bounded index advancement means it should
    never be raised.
    """

    def __init__(self, index: int, frame_count: int) -> None:
        super().__init__(f"frame at index {index} not found (have {frame_count})")
        self.index = index
