"""Write SVG output where dash patterns have been turned into geometry."""

from __future__ import annotations

from typing import Any

from dashline.engine.context import DashContext, DashedElement

# Attributes that describe the input geometry or its pattern, not the stroke look
_GEOMETRY_ATTRS = {
    "d", "x1", "y1", "x2", "y2", "points", "x", "y", "width", "height", "rx", "ry", "id",
    "stroke-dasharray", "stroke-dashoffset",
}


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
) -> str:
    """Generate clean SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def _stroke_attrs(el: DashedElement) -> dict[str, str]:
    attrs = {k: v for k, v in el.attributes.items() if k not in _GEOMETRY_ATTRS}
    if "style" in attrs:
        decls = [d for d in attrs["style"].split(";") if d.strip() and not d.strip().startswith("stroke-dash")]
        if decls:
            attrs["style"] = ";".join(d.strip() for d in decls)
        else:
            del attrs["style"]
    return attrs


def _fmt(v: float) -> str:
    return f"{round(v, 4):g}"


def original_element(el: DashedElement) -> dict[str, Any]:
    """The element as it was read, geometry and pattern attributes included."""
    out: dict[str, Any] = {"tag": el.tag, **el.attributes}
    out.setdefault("id", el.id)
    return out


def dashes_to_elements(el: DashedElement) -> list[dict[str, Any]]:
    """One ``<line>`` per dash; solid elements are written back as read."""
    if el.is_solid:
        return [original_element(el)]

    style = _stroke_attrs(el)
    out: list[dict[str, Any]] = []
    for dash in el.dashes:
        # Rounding in the cursor can leave an empty dash at a boundary
        if dash.distance == 0.0:
            continue
        out.append({
            "tag": "line",
            "id": f"{el.id}-d{len(out) + 1}",
            "x1": _fmt(dash.start[0]),
            "y1": _fmt(dash.start[1]),
            "x2": _fmt(dash.end[0]),
            "y2": _fmt(dash.end[1]),
            **style,
        })
    return out


def serialize_dashed(ctx: DashContext, title: str = "") -> str:
    """Whole document with dash geometry in place of dash patterns.

    Elements that failed to dash are kept unchanged.
    """
    elements: list[dict[str, Any]] = []
    for el in ctx.elements:
        if el.id in ctx.errors:
            elements.append(original_element(el))
        else:
            elements.extend(dashes_to_elements(el))
    return serialize_svg(elements, ctx.canvas_width, ctx.canvas_height, title=title)
