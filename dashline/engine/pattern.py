"""Immutable dash pattern: starting offset plus cyclic dash/gap lengths."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dashline.engine.errors import InvalidPattern


@dataclass(frozen=True)
class DashPattern:
    """Starting phase and repeating segment lengths.

    Even indices of ``array`` are dashes, odd indices are gaps. Any iterable of
    numbers is accepted for ``array``; it is stored as a tuple of floats.
    """

    initial_offset: float
    array: tuple[float, ...]

    def __post_init__(self) -> None:
        lengths = tuple(float(x) for x in self.array)
        offset = float(self.initial_offset)
        if not lengths:
            raise InvalidPattern("Dash array must not be empty")
        for i, x in enumerate(lengths):
            if not math.isfinite(x) or x <= 0.0:
                raise InvalidPattern(f"Dash array element {i} must be a positive finite number, got {x!r}")
        if not math.isfinite(offset):
            raise InvalidPattern(f"Dash offset must be finite, got {offset!r}")
        object.__setattr__(self, "initial_offset", offset)
        object.__setattr__(self, "array", lengths)

    @property
    def cycle_length(self) -> float:
        return sum(self.array)

    @property
    def is_odd(self) -> bool:
        return len(self.array) % 2 == 1

    def evened(self) -> DashPattern:
        """Double an odd-length array so dashes and gaps keep alternating across cycles."""
        if not self.is_odd:
            return self
        return DashPattern(self.initial_offset, self.array * 2)
