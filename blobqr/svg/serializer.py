"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape

Element = dict[str, Any]


def fmt(value: float) -> str:
    """Compact number: at most 2 decimals, no trailing zeros, no negative zero."""
    rounded = round(float(value), 2) + 0.0
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.2f}".rstrip("0")


def rect(x: float, y: float, width: float, height: float, fill: str, **extra: Any) -> Element:
    elem: Element = {
        "tag": "rect",
        "x": fmt(x),
        "y": fmt(y),
        "width": fmt(width),
        "height": fmt(height),
    }
    elem.update(extra)
    elem["fill"] = fill
    return elem


def background_rect(width: float, height: float, fill: str) -> Element:
    """Full-canvas rectangle anchored at the origin."""
    return {"tag": "rect", "width": fmt(width), "height": fmt(height), "fill": fill}


def _attr_str(elem: Element) -> str:
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
    return " ".join(f'{k}="{escape(str(v), {chr(34): "&quot;"})}"' for k, v in attrs.items())


def _serialize_element(elem: Element, indent: str) -> list[str]:
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    opening = f"{indent}<{tag} {attr_str}" if attr_str else f"{indent}<{tag}"
    children = elem.get("children")
    if not children:
        return [f"{opening} />"]

    lines = [f"{opening}>"]
    for child in children:
        lines.extend(_serialize_element(child, indent + "  "))
    lines.append(f"{indent}</{tag}>")
    return lines


def serialize_svg(
    elements: list[Element],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    shape_rendering: str | None = "crispEdges",
) -> str:
    """Generate a standalone SVG document from element definitions."""
    header = (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {fmt(canvas_w)} {fmt(canvas_h)}"'
        f' width="{fmt(canvas_w)}" height="{fmt(canvas_h)}"'
    )
    if shape_rendering:
        header += f' shape-rendering="{shape_rendering}"'
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', header + ">"]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        lines.extend(_serialize_element(elem, "  "))

    lines.append("</svg>")
    return "\n".join(lines)
