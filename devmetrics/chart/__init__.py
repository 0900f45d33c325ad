"""Semi-donut arc geometry engine."""

from devmetrics.chart.legend import build_legend
from devmetrics.chart.renderer import RenderedChart, render_semi_donut
from devmetrics.chart.semi_donut import layout_semi_donut

__all__ = [
    "build_legend",
    "layout_semi_donut",
    "render_semi_donut",
    "RenderedChart",
]
