"""DashCursor: distance-based position tracker inside a repeating dash pattern.

The cursor lives in the pattern's cumulative-length space. ``advance(d)``
consumes up to ``d`` units, stopping early at the next pattern-segment
boundary, and reports whether the consumed span was drawn (dash) or
skipped (gap). Callers feed ``remaining_distance`` back in until it hits 0.
"""

from __future__ import annotations

import bisect
import enum
import logging
from dataclasses import dataclass

import numpy as np

from dashline.engine.errors import CursorConsistencyError
from dashline.engine.pattern import DashPattern

logger = logging.getLogger(__name__)


class DashKind(enum.StrEnum):
    DASH = "dash"
    GAP = "gap"

    @classmethod
    def for_index(cls, index: int) -> DashKind:
        return cls.DASH if index % 2 == 0 else cls.GAP


@dataclass(frozen=True)
class DashAction:
    """Result of one ``DashCursor.advance`` step."""

    # Portion of the requested distance consumed by this step
    length: float
    # Feed back into advance() to keep walking; 0 when the request was absorbed
    remaining_distance: float
    kind: DashKind


def cumulate(array: tuple[float, ...]) -> list[float]:
    """Running sums of the pattern lengths; the last entry is the cycle length."""
    return [float(x) for x in np.cumsum(np.asarray(array, dtype=np.float64))]


def find_index(offset: float, cumulative_array: list[float]) -> int:
    """Smallest index whose cumulative length is strictly greater than ``offset``."""
    index = bisect.bisect_right(cumulative_array, offset)
    if index >= len(cumulative_array):
        raise CursorConsistencyError(
            f"Offset {offset!r} is not below cycle length {cumulative_array[-1]!r}"
        )
    return index


class DashCursor:
    """Stateful walker over a DashPattern.

    A boundary-crossing step takes its kind from ``(current_index + 1) % 2``
    after the update. For an odd-length pattern that labels the last segment
    of every wrapped cycle with the wrong kind. ``consumed_index_parity``
    classifies by the index that was actually consumed instead.
    """

    def __init__(self, pattern: DashPattern, *, consumed_index_parity: bool = False) -> None:
        self._array = pattern.array
        self._cumulative = cumulate(pattern.array)
        self.consumed_index_parity = consumed_index_parity

        offset = pattern.initial_offset % self._cumulative[-1]
        index = find_index(offset, self._cumulative)

        self._initial_offset = offset
        self._initial_index = index
        self._offset = offset
        self._index = index
        logger.debug(
            "Cursor: %d segments, cycle %.6g, start index %d offset %.6g",
            len(self._array),
            self.cycle_length,
            index,
            offset,
        )

    @property
    def array(self) -> tuple[float, ...]:
        return self._array

    @property
    def cumulative_array(self) -> list[float]:
        return list(self._cumulative)

    @property
    def cycle_length(self) -> float:
        return self._cumulative[-1]

    @property
    def initial_offset(self) -> float:
        return self._initial_offset

    @property
    def initial_index(self) -> int:
        return self._initial_index

    @property
    def current_offset(self) -> float:
        return self._offset

    @property
    def current_index(self) -> int:
        return self._index

    def reset(self) -> None:
        """Rewind to the normalised starting phase."""
        self._offset = self._initial_offset
        self._index = self._initial_index

    def advance(self, distance: float) -> DashAction:
        """Consume up to ``distance``, stopping at the next segment boundary."""
        distance_to_boundary = self._cumulative[self._index] - self._offset

        if distance_to_boundary <= distance:
            consumed_index = self._index
            if self._index < len(self._cumulative) - 1:
                self._offset = self._cumulative[self._index]
                self._index += 1
            else:
                # Wrap the cycle
                self._index = 0
                self._offset = 0.0

            if self.consumed_index_parity:
                kind = DashKind.for_index(consumed_index)
            else:
                kind = DashKind.for_index(self._index + 1)

            return DashAction(
                length=distance_to_boundary,
                remaining_distance=distance - distance_to_boundary,
                kind=kind,
            )

        self._offset += distance
        return DashAction(length=distance, remaining_distance=0.0, kind=DashKind.for_index(self._index))
