"""Write SVG documents from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

from devmetrics.svg.path_builder import format_number


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float,
    canvas_h: float,
    title: str = "",
    description: str = "",
    precision: int = 2,
) -> str:
    """Generate SVG markup. An element's ``text`` key becomes its content."""
    w = format_number(canvas_w, precision)
    h = format_number(canvas_h, precision)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img" style="overflow: visible">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        if "text" in elem:
            lines.append(f"  <{tag} {attr_str}>{escape(str(elem['text']))}</{tag}>")
        else:
            lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
