"""Render a semi-donut chart: segments → path elements → SVG document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from devmetrics.chart.config import ChartConfig, ChartTheme
from devmetrics.chart.legend import build_legend
from devmetrics.chart.semi_donut import chart_center, layout_semi_donut
from devmetrics.models.chart import ChartInput, LegendEntry, RenderedSegment
from devmetrics.svg.path_builder import DEFAULT_PRECISION, format_number, to_path_command
from devmetrics.svg.path_check import is_closed_ring
from devmetrics.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

# Legend rows drawn under the arc when requested.
_LEGEND_ROW_H = 20.0
_LEGEND_DOT_R = 5.0


@dataclass(frozen=True)
class RenderedChart:
    """Everything a canvas needs to draw the chart."""

    width: float
    height: float
    segments: list[RenderedSegment] = field(default_factory=list)
    path_commands: list[str] = field(default_factory=list)
    legend: list[LegendEntry] = field(default_factory=list)
    svg: str = ""


def drawable_segments(segments: list[RenderedSegment], precision: int = DEFAULT_PRECISION) -> list[RenderedSegment]:
    """Segments whose path survives formatting as a closed two-arc ring.

    A sweep too small for the output precision collapses to identical
    endpoints, which is degenerate path data.
    """
    kept: list[RenderedSegment] = []
    for seg in segments:
        if is_closed_ring(to_path_command(seg, precision)):
            kept.append(seg)
        else:
            logger.debug(
                "Dropping degenerate segment %r (sweep %.3g deg)", seg.source_slice.label, seg.sweep_deg,
            )
    return kept


def segment_elements(
    segments: list[RenderedSegment],
    theme: ChartTheme,
    precision: int = DEFAULT_PRECISION,
) -> list[dict[str, Any]]:
    """One filled ``<path>`` per segment."""
    return [
        {
            "tag": "path",
            "d": to_path_command(seg, precision),
            "fill": seg.source_slice.color,
            "stroke": theme.stroke,
            "stroke-width": format_number(theme.stroke_width, 1),
        }
        for seg in segments
    ]


def legend_elements(
    legend: list[LegendEntry],
    left: float,
    top: float,
    theme: ChartTheme,
) -> list[dict[str, Any]]:
    """Dot + label rows, one per legend entry."""
    elements: list[dict[str, Any]] = []
    for i, entry in enumerate(legend):
        cy = top + (i + 0.5) * _LEGEND_ROW_H
        elements.append({
            "tag": "circle",
            "cx": format_number(left + _LEGEND_DOT_R, 2),
            "cy": format_number(cy, 2),
            "r": format_number(_LEGEND_DOT_R, 2),
            "fill": entry.color,
        })
        elements.append({
            "tag": "text",
            "x": format_number(left + 3 * _LEGEND_DOT_R, 2),
            "y": format_number(cy, 2),
            "dominant-baseline": "middle",
            "fill": theme.text_color,
            "font-family": theme.font_family,
            "font-size": "12",
            "text": entry.text,
        })
    return elements


def render_semi_donut(
    chart: ChartInput,
    theme: ChartTheme | None = None,
    precision: int = DEFAULT_PRECISION,
    title: str = "",
    with_legend: bool = False,
    config: ChartConfig | None = None,
) -> RenderedChart:
    """Lay out ``chart`` and build its SVG.

    Segments too narrow to survive the output precision are left out of
    the drawing but stay in the legend. Raises InvalidConfiguration (from
    the layout step) before anything is rendered.
    """
    theme = theme or ChartTheme()
    config = config or ChartConfig()

    segments = drawable_segments(layout_semi_donut(chart, config), precision)
    legend = build_legend(chart.slices)
    center = chart_center(chart, config)

    width = chart.outer_radius * 2 * config.padding_factor
    height = center.y + config.bottom_margin

    elements = segment_elements(segments, theme, precision)
    if with_legend:
        elements.extend(legend_elements(legend, 0.0, height, theme))
        height += _LEGEND_ROW_H * len(legend)

    path_commands = [e["d"] for e in elements if e["tag"] == "path"]
    description = ", ".join(entry.text for entry in legend)

    svg = serialize_svg(elements, width, height, title=title, description=description)
    logger.debug("Rendered semi-donut: %d paths, %d legend entries", len(segments), len(legend))

    return RenderedChart(
        width=width,
        height=height,
        segments=segments,
        path_commands=path_commands,
        legend=legend,
        svg=svg,
    )
