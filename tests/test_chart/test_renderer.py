"""Tests for the legend projection and chart renderer."""

from __future__ import annotations

import dataclasses

import pytest

from devmetrics.chart import build_legend, render_semi_donut
from devmetrics.chart.config import ChartTheme
from devmetrics.chart.renderer import drawable_segments
from devmetrics.chart.semi_donut import layout_semi_donut
from devmetrics.models.chart import LegendEntry, Slice
from devmetrics.svg.path_check import is_closed_ring
from tests.conftest import STORY_SLICES, make_chart


def test_legend_keeps_zero_slices():
    slices = [
        Slice(label="Open", value=0, color="#ef5350"),
        Slice(label="Closed", value=4, color="#66bb6a"),
    ]
    legend = build_legend(slices)
    assert legend == [
        LegendEntry(label="Open", value=0, color="#ef5350"),
        LegendEntry(label="Closed", value=4, color="#66bb6a"),
    ]
    assert [e.text for e in legend] == ["Open (0)", "Closed (4)"]


def test_legend_text_fractional_value():
    entry = LegendEntry(label="Load", value=2.5, color="#fff")
    assert entry.text == "Load (2.5)"


def test_legend_serializes_text():
    entry = build_legend(STORY_SLICES)[1]
    assert entry.model_dump()["text"] == "In Progress (12)"


def test_render_canvas_size(story_chart):
    rendered = render_semi_donut(story_chart)
    assert rendered.width == pytest.approx(220.0)
    assert rendered.height == pytest.approx(115.0)
    assert len(rendered.segments) == 3
    assert len(rendered.path_commands) == 3
    assert len(rendered.legend) == 3


def test_render_svg_uses_slice_colors_and_theme_stroke(story_chart):
    theme = ChartTheme(stroke="#abcdef", stroke_width=3)
    rendered = render_semi_donut(story_chart, theme)
    assert rendered.svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert rendered.svg.count("<path ") == 3
    for sl in STORY_SLICES:
        assert f'fill="{sl.color}"' in rendered.svg
    assert 'stroke="#abcdef"' in rendered.svg
    assert 'stroke-width="3.0"' in rendered.svg


def test_render_paths_are_closed_rings(story_chart):
    rendered = render_semi_donut(story_chart)
    assert all(is_closed_ring(d) for d in rendered.path_commands)


def test_render_zero_slice_has_legend_but_no_path():
    slices = [Slice(label="Open", value=0, color="#ef5350"), Slice(label="Closed", value=3, color="#66bb6a")]
    rendered = render_semi_donut(make_chart(slices))
    assert len(rendered.path_commands) == 1
    assert [e.label for e in rendered.legend] == ["Open", "Closed"]
    assert 'fill="#ef5350"' not in rendered.svg


def test_render_with_legend_grows_canvas(story_chart):
    plain = render_semi_donut(story_chart)
    with_legend = render_semi_donut(story_chart, with_legend=True)
    assert with_legend.height == pytest.approx(plain.height + 20.0 * 3)
    assert "In Progress (12)" in with_legend.svg
    assert with_legend.svg.count("<circle ") == 3


def test_render_title_is_escaped(story_chart):
    rendered = render_semi_donut(story_chart, title="Stories <Q3> & more")
    assert "<title>Stories &lt;Q3&gt; &amp; more</title>" in rendered.svg


def test_render_empty_chart():
    rendered = render_semi_donut(make_chart([], total=0))
    assert rendered.path_commands == []
    assert "<path" not in rendered.svg


def test_render_drops_sweep_below_output_precision():
    slices = [
        Slice(label="Sliver", value=1e-13, color="#ef5350"),
        Slice(label="Bulk", value=1, color="#66bb6a"),
    ]
    chart = make_chart(slices, total=1 + 1e-13)
    # the engine still reports the sliver; it is the renderer that drops it
    assert len(layout_semi_donut(chart)) == 2

    rendered = render_semi_donut(chart)
    assert [seg.source_slice.label for seg in rendered.segments] == ["Bulk"]
    assert len(rendered.path_commands) == 1
    assert all(is_closed_ring(d) for d in rendered.path_commands)
    assert 'fill="#ef5350"' not in rendered.svg
    assert [e.label for e in rendered.legend] == ["Sliver", "Bulk"]


def test_drawable_segments_depends_on_precision():
    slices = [Slice(label="a", value=1e-7, color="#111"), Slice(label="b", value=1, color="#222")]
    segments = layout_semi_donut(make_chart(slices))
    assert len(drawable_segments(segments, precision=2)) == 1
    assert len(drawable_segments(segments, precision=10)) == 2


def test_render_description_lists_legend(story_chart):
    rendered = render_semi_donut(story_chart)
    assert "<desc>Open (5), In Progress (12), Closed (45)</desc>" in rendered.svg


def test_rendered_chart_is_immutable(story_chart):
    rendered = render_semi_donut(story_chart)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rendered.svg = ""
