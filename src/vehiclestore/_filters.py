"""Inclusive numeric ranges used by the range filters."""

from __future__ import annotations

import re
from dataclasses import dataclass

# A "-" joining two numbers: preceded by a digit or a dot, so the sign of an
# exponent ("1e-05") or of the low end ("-1-5") is never taken for it.
_SEPARATOR = re.compile(r"(?<=[0-9.])-")


@dataclass(frozen=True)
class Bounds:
    """An inclusive ``[low, high]`` range.

    Usage:
        Bounds(1.5, 4.0).contains(2.0)   # True
        Bounds.parse("1.5-4.0")          # Bounds(low=1.5, high=4.0)
        Bounds(1.5, 4.0).to_param()      # "1.5-4.0"
    """

    low: float
    high: float

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    @property
    def is_positive(self) -> bool:
        """True when both ends are strictly positive."""
        return self.low > 0 and self.high > 0

    @property
    def is_ordered(self) -> bool:
        return self.low <= self.high

    def to_param(self) -> str:
        """Render as the ``min-max`` query string form, without losing precision."""
        return f"{float(self.low)!r}-{float(self.high)!r}"

    @classmethod
    def parse(cls, value: str) -> Bounds:
        """Parse a ``min-max`` string.

        Raises:
            ValueError: if the string is not two numbers joined by ``-``.
        """
        parts = _SEPARATOR.split(value)
        if len(parts) != 2:
            raise ValueError(f"Invalid range {value!r}, expected 'min-max'")
        return cls(float(parts[0]), float(parts[1]))


def text_matches(candidate: str, wanted: str) -> bool:
    """Case-insensitive text equality."""
    return candidate.casefold() == wanted.casefold()
