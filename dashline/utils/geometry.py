"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# (x, y) in user units
Point = tuple[float, float]


def as_point(value: complex | tuple[float, float]) -> Point:
    """Coerce a complex number (svgpathtools) or pair into a Point."""
    if isinstance(value, complex):
        return (float(value.real), float(value.imag))
    x, y = value
    return (float(x), float(y))


def distance(a: Point, b: Point) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def lerp(a: Point, b: Point, t: float) -> Point:
    """Point at parameter ``t`` along a→b (t=0 → a, t=1 → b)."""
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    def length(self) -> float:
        return distance(self.start, self.end)

    def sample(self, t: float) -> Point:
        return lerp(self.start, self.end, t)

    def split_range(self, t0: float, t1: float) -> LineSegment:
        """Sub-segment between fractional positions ``t0`` and ``t1``."""
        return LineSegment(self.sample(t0), self.sample(t1))


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of an Nx2 polyline. 0 for fewer than two points."""
    if len(points) < 2:
        return 0.0
    return float(arc_lengths(points)[-1])


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bezier_points(controls: list[Point], samples: int = 16) -> NDArray[np.float64]:
    """Evaluate a Bezier curve of any degree at ``samples + 1`` even steps of t."""
    ctrl = np.asarray(controls, dtype=np.float64)
    degree = len(ctrl) - 1
    t = np.linspace(0.0, 1.0, samples + 1)[:, None]
    basis = [math.comb(degree, i) * t**i * (1.0 - t) ** (degree - i) for i in range(degree + 1)]
    return sum(b * p for b, p in zip(basis, ctrl))
