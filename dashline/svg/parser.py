"""SVG parser: facade over svgpathtools + regex tag scanning.

Converts raw SVG string → DashContext with one DashedElement per stroked
shape (path, line, polyline, polygon, rect), in document order. Shapes
inside defs, clipPath, mask, marker, pattern and symbol are not drawn in
place and are skipped.
"""

from __future__ import annotations

import logging
import re

import numpy as np
from svgpathtools import Arc as SvgArc
from svgpathtools import CubicBezier, QuadraticBezier, parse_path
from svgpathtools import Line as SvgLine

from dashline.engine.context import DashContext, DashedElement
from dashline.engine.errors import InvalidPattern
from dashline.svg.events import Arc, Begin, Cubic, End, Line, PathEvent, Quadratic, polyline_events
from dashline.svg.style import pattern_from_attributes
from dashline.utils.geometry import Point, as_point

logger = logging.getLogger(__name__)

# Regex for extracting viewBox
_VIEWBOX_RE = re.compile(r'viewBox\s*=\s*"([^"]+)"')
_WIDTH_RE = re.compile(r'<svg[^>]*\swidth\s*=\s*"([^"]*?)"', re.IGNORECASE)
_HEIGHT_RE = re.compile(r'<svg[^>]*\sheight\s*=\s*"([^"]*?)"', re.IGNORECASE)
_SHAPE_TAG_RE = re.compile(r"<(path|line|polyline|polygon|rect)\b[^>]*/?\s*>", re.IGNORECASE)
# Containers whose children are never drawn in place
_HIDDEN_CONTAINER_RE = re.compile(
    r"<(defs|clipPath|mask|marker|pattern|symbol)\b[^>]*(?<!/)>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_ATTR_RE = re.compile(r'(\w[\w:-]*)\s*=\s*"([^"]*)"')
_NUMBER_SPLIT_RE = re.compile(r"[\s,]+")

# Points measured along each elliptical arc
_ARC_SAMPLES = 16


def parse_svg(svg_text: str) -> DashContext:
    """Parse raw SVG string into a DashContext."""
    ctx = DashContext(svg_raw=svg_text)
    _read_canvas(svg_text, ctx)

    hidden = [m.span() for m in _HIDDEN_CONTAINER_RE.finditer(svg_text)]

    z_order = 0
    for match in _SHAPE_TAG_RE.finditer(svg_text):
        if any(lo <= match.start() < hi for lo, hi in hidden):
            continue
        tag = match.group(1).lower()
        attrs = _extract_attrs(match.group(0))

        try:
            events = _events_for(tag, attrs)
        except (KeyError, ValueError, IndexError) as e:
            logger.warning("Failed to read <%s>: %s", tag, e)
            continue
        if not events:
            continue

        el = DashedElement(id=f"E{z_order + 1}", tag=tag, events=events, attributes=attrs, z_order=z_order)
        try:
            el.pattern = pattern_from_attributes(attrs)
        except InvalidPattern as e:
            # Left solid; the error travels with the context
            ctx.errors[el.id] = str(e)
            logger.warning("Invalid dash pattern on %s: %s", el.id, e)

        ctx.elements.append(el)
        z_order += 1

    dashed = sum(1 for el in ctx.elements if not el.is_solid)
    logger.info(
        "Parsed SVG: %d elements (%d dashed), canvas %.0f×%.0f",
        ctx.num_elements,
        dashed,
        ctx.canvas_width,
        ctx.canvas_height,
    )
    return ctx


def parse_path_events(d: str) -> list[PathEvent]:
    """Convert SVG path data into path events, one Begin/End pair per subpath.

    svgpathtools already materialises the ``Z`` edge as a line segment, so
    subpaths end with ``End(close=False)``.
    """
    path = parse_path(d)
    events: list[PathEvent] = []
    if not path:
        return events

    for subpath in path.continuous_subpaths():
        if not subpath:
            continue
        first = as_point(subpath.start)
        events.append(Begin(first))
        for seg in subpath:
            events.append(_segment_event(seg))
        events.append(End(as_point(subpath.end), first, close=False))
    return events


def _segment_event(seg) -> PathEvent:
    start, end = as_point(seg.start), as_point(seg.end)
    if isinstance(seg, SvgLine):
        return Line(start, end)
    if isinstance(seg, QuadraticBezier):
        return Quadratic(start, as_point(seg.control), end)
    if isinstance(seg, CubicBezier):
        return Cubic(start, as_point(seg.control1), as_point(seg.control2), end)
    if isinstance(seg, SvgArc):
        samples = tuple(as_point(seg.point(float(t))) for t in np.linspace(0.0, 1.0, _ARC_SAMPLES + 1)[1:-1])
        return Arc(start, end, samples)
    raise ValueError(f"Unknown svgpathtools segment: {type(seg).__name__}")


def _events_for(tag: str, attrs: dict[str, str]) -> list[PathEvent]:
    if tag == "path":
        return parse_path_events(attrs["d"])
    if tag == "line":
        a = (float(attrs["x1"]), float(attrs["y1"]))
        b = (float(attrs["x2"]), float(attrs["y2"]))
        return polyline_events([a, b])
    if tag == "rect":
        return _rect_events(attrs)
    # polyline / polygon
    return polyline_events(_parse_points(attrs["points"]), closed=(tag == "polygon"))


def _rect_events(attrs: dict[str, str]) -> list[PathEvent]:
    """Closed outline of a rect. Rounded corners go through the path parser as arcs."""
    x = float(attrs.get("x", 0))
    y = float(attrs.get("y", 0))
    w = float(attrs.get("width", 0))
    h = float(attrs.get("height", 0))
    if w <= 0 or h <= 0:
        # Not rendered
        return []

    rx = attrs.get("rx")
    ry = attrs.get("ry")
    rx_f = float(rx if rx is not None else (ry or 0))
    ry_f = float(ry if ry is not None else (rx or 0))
    rx_f = min(max(rx_f, 0.0), w / 2)
    ry_f = min(max(ry_f, 0.0), h / 2)
    if rx_f == 0 or ry_f == 0:
        return polyline_events([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], closed=True)

    corner = f"A{rx_f},{ry_f} 0 0 1"
    d = (
        f"M{x + rx_f},{y} H{x + w - rx_f} {corner} {x + w},{y + ry_f} "
        f"V{y + h - ry_f} {corner} {x + w - rx_f},{y + h} "
        f"H{x + rx_f} {corner} {x},{y + h - ry_f} "
        f"V{y + ry_f} {corner} {x + rx_f},{y} Z"
    )
    return parse_path_events(d)


def _parse_points(text: str) -> list[Point]:
    values = [float(v) for v in _NUMBER_SPLIT_RE.split(text.strip()) if v]
    if len(values) % 2:
        raise ValueError(f"Odd number of coordinates in points={text!r}")
    return [(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def _read_canvas(svg_text: str, ctx: DashContext) -> None:
    vb_match = _VIEWBOX_RE.search(svg_text)
    if vb_match:
        parts = vb_match.group(1).replace(",", " ").split()
        if len(parts) >= 4:
            ctx.canvas_width = float(parts[2])
            ctx.canvas_height = float(parts[3])
        return

    w_match = _WIDTH_RE.search(svg_text)
    h_match = _HEIGHT_RE.search(svg_text)
    if w_match:
        try:
            ctx.canvas_width = float(w_match.group(1).replace("px", "").replace("pt", ""))
        except ValueError:
            pass
    if h_match:
        try:
            ctx.canvas_height = float(h_match.group(1).replace("px", "").replace("pt", ""))
        except ValueError:
            pass


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract key attributes from an SVG tag string."""
    return {m.group(1): m.group(2) for m in _ATTR_RE.finditer(tag_text)}
