from typing import Any, List, Sequence

from ..exceptions import InvalidPinCount

MAX_PINS = 10


class ValidationError(Exception):
    """Raised when a submitted roll sequence is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def validate_pins(pins: Any) -> int:
    """Return ``pins`` if it is a legal single-roll pin count.

    Booleans are rejected even though ``bool`` is a subclass of ``int``.
    """

    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidPinCount(pins)
    if pins < 0 or pins > MAX_PINS:
        raise InvalidPinCount(pins)
    return pins


def validate_roll_sequence(rolls: Sequence[Any]) -> List[int]:
    """Normalise a sequence of raw roll values to a list of pin counts.

    Rules:
    - ``rolls`` must be a sequence (strings and bytes are rejected)
    - Each roll must be an integer (booleans are rejected)
    - Each roll must be between 0 and 10 inclusive

    Frame structure (spares, strikes, game length) is left to the game.
    """

    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise ValidationError("Rolls must be provided as a sequence of integers.")

    normalized: List[int] = []
    for index, raw in enumerate(rolls, start=1):
        if isinstance(raw, bool):
            raise ValidationError(f"Roll #{index} must be an integer (not a boolean).")
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"Roll #{index} must be an integer.")
        if value != raw:
            raise ValidationError(f"Roll #{index} must be an integer.")
        if value < 0 or value > MAX_PINS:
            raise ValidationError(
                f"Roll #{index} must be between 0 and {MAX_PINS} pins."
            )
        normalized.append(value)

    return normalized
