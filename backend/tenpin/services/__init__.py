"""Internal services (pure helpers, no I/O)."""

from .validation import ValidationError, validate_pins, validate_roll_sequence

__all__ = [
    "ValidationError",
    "validate_pins",
    "validate_roll_sequence",
]
