"""Shared test fixtures."""

from __future__ import annotations

import pytest

from devmetrics.models.chart import ChartInput, Point2D, Slice

# Story status counts used by the dashboard demo
STORY_SLICES = (
    Slice(label="Open", value=5, color="#ef5350"),
    Slice(label="In Progress", value=12, color="#ffb300"),
    Slice(label="Closed", value=45, color="#66bb6a"),
)

SPLIT_30_70 = (
    Slice(label="A", value=30, color="#03a9f4"),
    Slice(label="B", value=70, color="#8e24aa"),
)

ORIGIN = Point2D(x=0.0, y=0.0)


def make_chart(slices, total=None, radius=100.0, ratio=0.5, center=None) -> ChartInput:
    if total is None:
        total = sum(s.value for s in slices)
    return ChartInput(
        slices=tuple(slices),
        total_value=total,
        outer_radius=radius,
        inner_thickness_ratio=ratio,
        center=center,
    )


@pytest.fixture
def story_chart() -> ChartInput:
    return make_chart(STORY_SLICES)


@pytest.fixture
def split_chart() -> ChartInput:
    return make_chart(SPLIT_30_70, total=100)
