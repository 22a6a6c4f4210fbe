"""Path construction events and a small builder that emits them.

A path is a flat sequence of events: every subpath opens with ``Begin`` and
finishes with ``End``. ``End(close=True)`` means the edge from ``last`` back
to ``first`` is part of the outline but was not emitted as a ``Line``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dashline.utils.geometry import Point, as_point


@dataclass(frozen=True)
class Begin:
    at: Point


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point


@dataclass(frozen=True)
class Quadratic:
    start: Point
    ctrl: Point
    end: Point


@dataclass(frozen=True)
class Cubic:
    start: Point
    ctrl1: Point
    ctrl2: Point
    end: Point


@dataclass(frozen=True)
class Arc:
    start: Point
    end: Point
    # Interior points along the arc, for measuring only
    samples: tuple[Point, ...] = ()


@dataclass(frozen=True)
class End:
    last: Point
    first: Point
    close: bool = False


PathEvent = Begin | Line | Quadratic | Cubic | Arc | End

CURVE_EVENTS = (Quadratic, Cubic, Arc)


class PathBuilder:
    """Accumulates events. ``build()`` ends any open subpath and returns them."""

    def __init__(self) -> None:
        self._events: list[PathEvent] = []
        self._first: Point | None = None
        self._current: Point | None = None

    def begin(self, at: Point) -> PathBuilder:
        if self._first is not None:
            self.end()
        at = as_point(at)
        self._events.append(Begin(at))
        self._first = at
        self._current = at
        return self

    def line_to(self, to: Point) -> PathBuilder:
        start = self._require_open("line_to")
        to = as_point(to)
        self._events.append(Line(start, to))
        self._current = to
        return self

    def quadratic_to(self, ctrl: Point, to: Point) -> PathBuilder:
        start = self._require_open("quadratic_to")
        to = as_point(to)
        self._events.append(Quadratic(start, as_point(ctrl), to))
        self._current = to
        return self

    def cubic_to(self, ctrl1: Point, ctrl2: Point, to: Point) -> PathBuilder:
        start = self._require_open("cubic_to")
        to = as_point(to)
        self._events.append(Cubic(start, as_point(ctrl1), as_point(ctrl2), to))
        self._current = to
        return self

    def close(self) -> PathBuilder:
        self._finish(close=True)
        return self

    def end(self) -> PathBuilder:
        self._finish(close=False)
        return self

    def build(self) -> list[PathEvent]:
        if self._first is not None:
            self.end()
        return list(self._events)

    def _require_open(self, op: str) -> Point:
        if self._current is None:
            raise ValueError(f"{op}() called before begin()")
        return self._current

    def _finish(self, close: bool) -> None:
        last = self._require_open("close" if close else "end")
        self._events.append(End(last, self._first, close=close))
        self._first = None
        self._current = None


def polyline_events(points: Iterable[Point], closed: bool = False) -> list[PathEvent]:
    """Events for a single subpath through ``points``."""
    pts = [as_point(p) for p in points]
    if not pts:
        return []
    builder = PathBuilder().begin(pts[0])
    for p in pts[1:]:
        builder.line_to(p)
    if closed:
        builder.close()
    return builder.build()
