"""Dash settings from SVG presentation attributes and inline style."""

from __future__ import annotations

import re

from dashline.engine.errors import InvalidPattern
from dashline.engine.pattern import DashPattern

_SPLIT_RE = re.compile(r"[\s,]+")
_UNIT_RE = re.compile(r"(px|pt)$", re.IGNORECASE)


def parse_style(style: str) -> dict[str, str]:
    """Split ``style="a: b; c: d"`` into a dict."""
    decls: dict[str, str] = {}
    for part in style.split(";"):
        if ":" not in part:
            continue
        key, _, value = part.partition(":")
        decls[key.strip().lower()] = value.strip()
    return decls


def _number(text: str, what: str) -> float:
    try:
        return float(_UNIT_RE.sub("", text))
    except ValueError:
        raise InvalidPattern(f"Cannot parse {what} value {text!r}") from None


def parse_dasharray(text: str | None) -> list[float] | None:
    """Parse a stroke-dasharray value. ``none`` or empty → None."""
    if text is None:
        return None
    text = text.strip()
    if not text or text.lower() == "none":
        return None
    values = [_number(v, "stroke-dasharray") for v in _SPLIT_RE.split(text) if v]
    if any(v < 0 for v in values):
        raise InvalidPattern(f"Negative stroke-dasharray value in {text!r}")
    return values


def dash_properties(attrs: dict[str, str]) -> tuple[str | None, str | None]:
    """(dasharray, dashoffset) text; inline style wins over attributes."""
    dasharray = attrs.get("stroke-dasharray")
    dashoffset = attrs.get("stroke-dashoffset")
    if "style" in attrs:
        decls = parse_style(attrs["style"])
        dasharray = decls.get("stroke-dasharray", dasharray)
        dashoffset = decls.get("stroke-dashoffset", dashoffset)
    return dasharray, dashoffset


def pattern_from_attributes(attrs: dict[str, str]) -> DashPattern | None:
    """Build the element's DashPattern, or None for a solid stroke."""
    dasharray, dashoffset = dash_properties(attrs)
    values = parse_dasharray(dasharray)
    # All-zero arrays render solid
    if not values or all(v == 0 for v in values):
        return None
    offset = _number(dashoffset.strip(), "stroke-dashoffset") if dashoffset else 0.0
    return DashPattern(offset, values)
