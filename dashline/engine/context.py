"""DashContext: the mutable state object flowing through the dash pipeline.

Per-element results → DashedElement.results / features
Document-level results → DashContext.errors, completed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from dashline.engine.dasher import Dash, DashOrGap, Gap
from dashline.engine.pattern import DashPattern
from dashline.svg.events import Arc, Begin, Cubic, End, Line, PathEvent, Quadratic
from dashline.utils.geometry import bbox, bezier_points, polyline_length


def _sampled(points: NDArray[np.float64]) -> list[tuple[float, float]]:
    # First sample repeats the current point
    return [(float(x), float(y)) for x, y in points[1:]]


@dataclass
class DashedElement:
    """A single stroked SVG element and its dash output."""

    id: str
    tag: str = "path"
    # Path construction events (Begin / Line / curves / End)
    events: list[PathEvent] = field(default_factory=list)
    # Original SVG attributes
    attributes: dict[str, str] = field(default_factory=dict)
    # None = solid stroke, nothing to dash
    pattern: DashPattern | None = None
    # Z-order index (SVG document order)
    z_order: int = 0
    # Dash/gap output in emission order
    results: list[DashOrGap] = field(default_factory=list)
    features: dict[str, Any] = field(default_factory=dict)

    @property
    def is_solid(self) -> bool:
        return self.pattern is None

    @property
    def dashes(self) -> list[Dash]:
        return [r for r in self.results if isinstance(r, Dash)]

    @property
    def gaps(self) -> list[Gap]:
        return [r for r in self.results if isinstance(r, Gap)]

    @property
    def dash_count(self) -> int:
        return len(self.dashes)

    @property
    def total_dash_length(self) -> float:
        return float(sum(d.distance for d in self.dashes))

    @property
    def total_gap_length(self) -> float:
        return float(sum(g.distance for g in self.gaps))

    def subpath_points(self) -> list[NDArray[np.float64]]:
        """Vertices of each subpath, closing edge included.

        Curves contribute sampled points, so lengths and bounds of curved
        subpaths are polyline approximations.
        """
        runs: list[NDArray[np.float64]] = []
        current: list[tuple[float, float]] = []
        for event in self.events:
            if isinstance(event, Begin):
                current = [event.at]
            elif isinstance(event, Line):
                current.append(event.end)
            elif isinstance(event, Quadratic):
                current.extend(_sampled(bezier_points([event.start, event.ctrl, event.end])))
            elif isinstance(event, Cubic):
                current.extend(_sampled(bezier_points([event.start, event.ctrl1, event.ctrl2, event.end])))
            elif isinstance(event, Arc):
                current.extend(event.samples)
                current.append(event.end)
            elif isinstance(event, End):
                if event.close:
                    current.append(event.first)
                runs.append(np.array(current, dtype=np.float64))
                current = []
        return runs

    @property
    def path_length(self) -> float:
        return float(sum(polyline_length(pts) for pts in self.subpath_points()))

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        runs = [pts for pts in self.subpath_points() if len(pts)]
        if not runs:
            return (0.0, 0.0, 0.0, 0.0)
        return bbox(np.concatenate(runs))


@dataclass
class DashContext:
    """Shared state for one SVG document."""

    # Raw SVG code
    svg_raw: str = ""
    # Canvas dimensions from viewBox
    canvas_width: float = 24.0
    canvas_height: float = 24.0
    # Parsed stroked elements
    elements: list[DashedElement] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_elements(self) -> int:
        return len(self.elements)

    def get_element(self, element_id: str) -> DashedElement | None:
        for el in self.elements:
            if el.id == element_id:
                return el
        return None
