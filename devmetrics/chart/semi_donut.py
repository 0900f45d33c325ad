"""Arc geometry engine — proportional ring segments over a 180° arc.

Slices are laid out clockwise from the top of the circle (0°) to the bottom
(180°), each taking ``value / total_value`` of the half turn. The output is
pure geometry; turning it into path commands is ``devmetrics.svg.path_builder``'s job.
"""

from __future__ import annotations

import logging
import math

from devmetrics.chart.config import ANGLE_SNAP_TOL, ARC_SPAN_DEG, ChartConfig
from devmetrics.errors import InvalidConfiguration
from devmetrics.models.chart import ChartInput, Point2D, RenderedSegment, Slice
from devmetrics.utils.geometry import polar_to_cartesian

logger = logging.getLogger(__name__)


def validate_chart_input(chart: ChartInput) -> None:
    """Raise InvalidConfiguration if the input cannot be laid out."""
    if not math.isfinite(chart.outer_radius) or chart.outer_radius <= 0:
        raise InvalidConfiguration(f"outer_radius must be positive, got {chart.outer_radius}")
    ratio = chart.inner_thickness_ratio
    if not math.isfinite(ratio) or not 0 < ratio < 1:
        raise InvalidConfiguration(f"inner_thickness_ratio must be in (0, 1), got {ratio}")
    if not math.isfinite(chart.total_value):
        raise InvalidConfiguration(f"total_value must be finite, got {chart.total_value}")
    for sl in chart.slices:
        if not math.isfinite(sl.value) or sl.value < 0:
            raise InvalidConfiguration(f"slice {sl.label!r} has invalid value {sl.value}")
    if chart.center is not None and not (math.isfinite(chart.center.x) and math.isfinite(chart.center.y)):
        raise InvalidConfiguration(f"center must be finite, got {chart.center}")


def chart_center(chart: ChartInput, config: ChartConfig | None = None) -> Point2D:
    """Explicit center, or the middle of the padded canvas box."""
    if chart.center is not None:
        return chart.center
    config = config or ChartConfig()
    offset = chart.outer_radius * config.padding_factor
    return Point2D(x=offset, y=offset)


def slice_percentage(value: float, total_value: float) -> float:
    """Fraction of the arc a slice occupies. Zero when there is no total."""
    if total_value <= 0:
        return 0.0
    return value / total_value


def layout_semi_donut(chart: ChartInput, config: ChartConfig | None = None) -> list[RenderedSegment]:
    """Partition the half circle among ``chart.slices``.

    Zero-value slices produce no segment and do not move the cumulative
    angle. The last end angle is snapped to exactly 180° to absorb rounding
    drift, and nothing is ever drawn past 180°.
    """
    validate_chart_input(chart)

    center = chart_center(chart, config)
    outer_r = chart.outer_radius
    inner_r = outer_r * chart.inner_thickness_ratio

    percentages = [slice_percentage(sl.value, chart.total_value) for sl in chart.slices]
    last_index = max((i for i, p in enumerate(percentages) if p > 0), default=-1)

    segments: list[RenderedSegment] = []
    cumulative = 0.0

    for i, (sl, pct) in enumerate(zip(chart.slices, percentages)):
        if pct <= 0:
            continue

        start = cumulative
        end = start + pct * ARC_SPAN_DEG
        if end > ARC_SPAN_DEG or (i == last_index and abs(end - ARC_SPAN_DEG) <= ANGLE_SNAP_TOL):
            end = ARC_SPAN_DEG

        # Degenerate (zero-width) rings are invalid path data; the arc may
        # also already be full when total_value undercounts the slices.
        if end <= start:
            continue

        segments.append(_build_segment(sl, center, outer_r, inner_r, start, end))
        cumulative = end

    logger.debug(
        "Semi-donut layout: %d segments from %d slices (total=%s)",
        len(segments),
        len(chart.slices),
        chart.total_value,
    )
    return segments


def _build_segment(
    sl: Slice,
    center: Point2D,
    outer_r: float,
    inner_r: float,
    start: float,
    end: float,
) -> RenderedSegment:
    def point(radius: float, angle: float) -> Point2D:
        x, y = polar_to_cartesian(center.x, center.y, radius, angle)
        return Point2D(x=x, y=y)

    return RenderedSegment(
        source_slice=sl,
        outer_arc_start=point(outer_r, start),
        outer_arc_end=point(outer_r, end),
        inner_arc_start=point(inner_r, start),
        inner_arc_end=point(inner_r, end),
        start_angle_deg=start,
        end_angle_deg=end,
        # A full half turn joins diametrically opposite points; either flag
        # draws the same semicircle, and the full-span segment is marked large.
        is_large_arc=(end - start) >= ARC_SPAN_DEG,
        outer_radius=outer_r,
        inner_radius=inner_r,
    )
