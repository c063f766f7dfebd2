"""Core value types and helpers exposed by the goat interop demo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

UINT32_MODULUS = 2**32
UINT32_MAX = UINT32_MODULUS - 1


class UInt32RangeError(ValueError):
    """Raised when a value does not fit in an unsigned 32-bit integer."""

    def __init__(self, value: int) -> None:
        """Initialise the range error with the offending value."""
        super().__init__(
            f"Value {value} is outside the unsigned 32-bit range [0, {UINT32_MAX}].",
        )
        self.value = value


def _require_uint32(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Expected an unsigned integer, got {type(value).__name__}"
        raise TypeError(msg)
    if not 0 <= value <= UINT32_MAX:
        raise UInt32RangeError(value)
    return value


@dataclass(slots=True)
class Goat:
    """A goat that keeps count of its horns.

    The count is an unsigned 32-bit value. It only ever grows, wrapping back
    to zero after ``UINT32_MAX`` increments.
    """

    horns: int = 0

    def __post_init__(self) -> None:
        """Validate the initial horn count."""
        _require_uint32(self.horns)

    @classmethod
    def new(cls) -> Self:
        """Return a goat with no horns."""
        return cls()

    def increment(self) -> None:
        """Grow one more horn."""
        self.horns = (self.horns + 1) % UINT32_MODULUS

    def describe(self) -> str:
        """Return a sentence describing the current horn count."""
        suffix = "" if self.horns == 1 else "s"
        return f"This goat has {self.horns} horn{suffix}."


def do_math(a: int) -> int:
    """Return ``a * 3`` with unsigned 32-bit wraparound."""
    return (_require_uint32(a) * 3) % UINT32_MODULUS


compute_triple = do_math


__all__ = [
    "UINT32_MAX",
    "UINT32_MODULUS",
    "Goat",
    "UInt32RangeError",
    "compute_triple",
    "do_math",
]
