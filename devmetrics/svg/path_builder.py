"""Ring-segment path commands from rendered segment geometry."""

from __future__ import annotations

from devmetrics.models.chart import Point2D, RenderedSegment

DEFAULT_PRECISION = 4


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Fixed-point, locale-independent number for path data."""
    text = f"{value:.{precision}f}"
    # -0.0000 and 0.0000 are the same coordinate; keep output stable.
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def _pt(p: Point2D, precision: int) -> str:
    return f"{format_number(p.x, precision)} {format_number(p.y, precision)}"


def to_path_command(segment: RenderedSegment, precision: int = DEFAULT_PRECISION) -> str:
    """Annulus sector: outer arc clockwise, inner arc back counter-clockwise."""
    large = 1 if segment.is_large_arc else 0
    r_out = format_number(segment.outer_radius, precision)
    r_in = format_number(segment.inner_radius, precision)
    return " ".join([
        f"M {_pt(segment.outer_arc_start, precision)}",
        f"A {r_out} {r_out} 0 {large} 1 {_pt(segment.outer_arc_end, precision)}",
        f"L {_pt(segment.inner_arc_end, precision)}",
        f"A {r_in} {r_in} 0 {large} 0 {_pt(segment.inner_arc_start, precision)}",
        "Z",
    ])
