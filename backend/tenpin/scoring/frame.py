"""A single ten-pin frame: its rolls, bonus credits and settlement state."""

from typing import List, Protocol, Tuple

from ..exceptions import TooManyPinsInFrame
from ..services.validation import MAX_PINS, validate_pins

# A normal frame allows two rolls; the tenth gets a third after a strike or spare.
MAX_ROLLS = 2
MAX_ROLLS_WITH_BONUS = 3

# Number of following rolls credited to a strike or a spare.
STRIKE_BONUS_ROLLS = 2
SPARE_BONUS_ROLLS = 1


class FrameProtocol(Protocol):
    is_tenth_frame: bool

    def roll(self, pins: int) -> None:
        ...

    def check_too_many_pins(self) -> None:
        ...

    def set_strike_additional_score(self, pins: int) -> None:
        ...

    def set_spare_additional_score(self, pins: int) -> None:
        ...

    @property
    def is_settled(self) -> bool:
        ...

    @property
    def is_finished(self) -> bool:
        ...

    @property
    def score(self) -> int:
        ...


class Frame:
    """Roll history and bonus accounting for one frame.

    Rolls are recorded first and validated afterwards: ``roll`` only rejects
    pin counts outside ``0..10``, while :meth:`check_too_many_pins` reports a
    frame whose recorded rolls knock down more pins than the rack allows.

    Bonus pins from later rolls arrive through
    :meth:`set_strike_additional_score` and :meth:`set_spare_additional_score`.
    Each is a no-op once the frame has absorbed everything it is owed, so the
    game can offer every roll to every unsettled frame.
    """

    def __init__(self, is_tenth_frame: bool = False) -> None:
        self.is_tenth_frame = is_tenth_frame
        self._rolls: List[int] = []
        self._strike_bonus = 0
        self._spare_bonus = 0
        self._strike_bonus_rolls_applied = 0
        self._spare_bonus_rolls_applied = 0
        self._is_settled = False

    def __repr__(self) -> str:
        return (
            f"Frame(rolls={self._rolls}, tenth={self.is_tenth_frame}, "
            f"score={self.score}, settled={self._is_settled})"
        )

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def has_spare(self) -> bool:
        if len(self._rolls) < 2:
            return False
        return sum(self._rolls[:2]) == MAX_PINS

    @property
    def has_strike(self) -> bool:
        return MAX_PINS in self._rolls

    @property
    def rolls_sum(self) -> int:
        return sum(self._rolls)

    @property
    def strike_bonus(self) -> int:
        return self._strike_bonus

    @property
    def spare_bonus(self) -> int:
        return self._spare_bonus

    @property
    def score(self) -> int:
        return self.rolls_sum + self._strike_bonus + self._spare_bonus

    @property
    def is_settled(self) -> bool:
        return self._is_settled

    @property
    def can_have_bonus_roll(self) -> bool:
        return self.is_tenth_frame and (self.has_spare or self.has_strike)

    @property
    def is_finished(self) -> bool:
        if self.has_strike and not self.is_tenth_frame:
            return True
        if self.can_have_bonus_roll:
            return len(self._rolls) == MAX_ROLLS_WITH_BONUS
        return len(self._rolls) == MAX_ROLLS

    def roll(self, pins: int) -> None:
        self._rolls.append(validate_pins(pins))
        self._update_settlement()

    def check_too_many_pins(self) -> None:
        if not self.is_tenth_frame:
            if self.rolls_sum > MAX_PINS:
                raise TooManyPinsInFrame(self.rolls)
            return

        # Only the trailing two rolls are inspected.
        last_two = self._rolls[-2:]
        if sum(last_two) <= MAX_PINS:
            return
        if self.has_strike and self._rack_reset_before(len(self._rolls) - 1):
            return
        raise TooManyPinsInFrame(self.rolls)

    def set_strike_additional_score(self, pins: int) -> None:
        if not self.has_strike or self.has_spare:
            return
        if self._strike_bonus_rolls_applied >= STRIKE_BONUS_ROLLS:
            return
        self._strike_bonus_rolls_applied += 1
        self._strike_bonus += pins
        self._update_settlement()

    def set_spare_additional_score(self, pins: int) -> None:
        if not self.has_spare:
            return
        if self._spare_bonus_rolls_applied >= SPARE_BONUS_ROLLS:
            return
        self._spare_bonus_rolls_applied += 1
        self._spare_bonus += pins
        self._update_settlement()

    def _rack_reset_before(self, index: int) -> bool:
        """Whether a fresh rack of ten pins stood before roll ``index``."""

        standing = MAX_PINS
        for pins in self._rolls[:index]:
            standing -= pins
            if standing <= 0:
                standing = MAX_PINS
        return standing == MAX_PINS

    def _update_settlement(self) -> None:
        # Spare takes priority: 0 then 10 is a spare, not a strike.
        if self.has_spare:
            self._is_settled = self._spare_bonus_rolls_applied == SPARE_BONUS_ROLLS
        elif self.has_strike:
            self._is_settled = self._strike_bonus_rolls_applied == STRIKE_BONUS_ROLLS
        else:
            self._is_settled = True
