"""PathDasher: drive a DashCursor along straight path segments.

Each line is walked with repeated ``cursor.advance`` calls. Dash spans are
cut out of the line geometrically; gap spans are reported by length only.
Results are produced lazily: the cursor moves only as the caller pulls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dashline.engine.config import DasherConfig
from dashline.engine.cursor import DashCursor, DashKind
from dashline.engine.errors import UnsupportedSegmentKind
from dashline.engine.pattern import DashPattern
from dashline.svg.events import CURVE_EVENTS, Begin, End, Line, PathEvent
from dashline.utils.geometry import LineSegment, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dash:
    start: Point
    end: Point
    distance: float

    @property
    def kind(self) -> DashKind:
        return DashKind.DASH


@dataclass(frozen=True)
class Gap:
    distance: float

    @property
    def kind(self) -> DashKind:
        return DashKind.GAP


DashOrGap = Dash | Gap


class PathDasher:
    """Consumes path events, emits Dash/Gap results.

    Dash phase is continuous across the lines of one subpath and is reset
    at every subpath begin.
    """

    def __init__(self, cursor: DashCursor) -> None:
        self.cursor = cursor

    def on_subpath_begin(self) -> None:
        self.cursor.reset()

    def on_line(self, start: Point, end: Point) -> Iterator[DashOrGap]:
        line = LineSegment(start, end)
        line_length = line.length()
        if line_length == 0.0:
            return

        relative_position = 0.0
        remaining = line_length
        while remaining > 0.0:
            action = self.cursor.advance(remaining)
            next_relative_position = relative_position + action.length
            if action.kind is DashKind.DASH:
                piece = line.split_range(relative_position / line_length, next_relative_position / line_length)
                output: DashOrGap = Dash(piece.start, piece.end, action.length)
            else:
                output = Gap(action.length)
            logger.debug("Yield %s", output)
            yield output
            remaining = action.remaining_distance
            relative_position = next_relative_position

    def on_subpath_close(self, last: Point, first: Point) -> Iterator[DashOrGap]:
        return self.on_line(last, first)

    def process(self, event: PathEvent) -> Iterator[DashOrGap]:
        """Handle one path event. Begin and curve checks happen immediately."""
        if isinstance(event, Begin):
            self.on_subpath_begin()
            return iter(())
        if isinstance(event, Line):
            return self.on_line(event.start, event.end)
        if isinstance(event, End):
            if event.close:
                return self.on_subpath_close(event.last, event.first)
            return iter(())
        if isinstance(event, CURVE_EVENTS):
            raise UnsupportedSegmentKind(
                f"PathDasher cannot handle {type(event).__name__} events; flatten curves first"
            )
        raise UnsupportedSegmentKind(f"Unknown path event: {event!r}")

    def dash(self, events: Iterable[PathEvent]) -> Iterator[DashOrGap]:
        for event in events:
            yield from self.process(event)


def make_dasher(pattern: DashPattern, config: DasherConfig | None = None) -> PathDasher:
    config = config or DasherConfig()
    if config.duplicate_odd_patterns:
        pattern = pattern.evened()
    cursor = DashCursor(pattern, consumed_index_parity=config.consumed_index_parity)
    return PathDasher(cursor)


def dash_path(
    events: Iterable[PathEvent],
    pattern: DashPattern,
    config: DasherConfig | None = None,
) -> Iterator[DashOrGap]:
    """Lazily dash a whole event stream with a fresh cursor."""
    return make_dasher(pattern, config).dash(events)
