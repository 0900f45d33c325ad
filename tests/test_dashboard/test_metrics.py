"""Tests for derived metric arithmetic and formatting."""

from __future__ import annotations

import pytest

from devmetrics.dashboard.metrics import (
    UserMetricsData,
    compute_derived_metrics,
    format_count,
    format_fixed,
    format_metric,
    safe_ratio,
)
from devmetrics.dashboard.sample_data import SAMPLE_USER
from devmetrics.dashboard.theme import DARK_THEME, status_color
from devmetrics.models.chart import Slice


def test_sample_user_totals():
    assert SAMPLE_USER.total_lines_changed == 6000
    assert SAMPLE_USER.total_stories == 62
    assert SAMPLE_USER.closed_stories == 45


@pytest.mark.parametrize(
    "name, expected",
    [
        ("copilot_acceptance_rate", "55.6"),
        ("refactoring_adoption_rate", "6.0"),
        ("commit_efficiency_ratio", "133.33"),
        ("avg_lines_per_commit", "103"),
        ("story_point_velocity", "60.0"),
        ("defect_density", "0.20"),
        ("review_effectiveness", "5.2"),
        ("reopened_rate", "4.4"),
        ("pr_creation_speed_hrs", "8.5"),
        ("impact_score", "1552"),
    ],
)
def test_sample_metrics_formatted(name, expected):
    metrics = compute_derived_metrics(SAMPLE_USER)
    assert format_metric(metrics, name) == expected


def test_zero_denominators_are_missing():
    user = UserMetricsData(user_name="new hire")
    metrics = compute_derived_metrics(user)
    assert metrics.copilot_acceptance_rate is None
    assert metrics.avg_lines_per_commit is None
    assert metrics.defect_density is None
    assert metrics.reopened_rate is None
    assert metrics.pr_creation_speed_hrs == 0.0
    assert format_metric(metrics, "impact_score") == "N/A"


def test_closed_stories_found_by_label():
    user = UserMetricsData(
        user_name="x",
        story_reopened_count=1,
        jira_stories=[
            Slice(label="Closed", value=4, color="#66bb6a"),
            Slice(label="Open", value=10, color="#ef5350"),
        ],
    )
    assert compute_derived_metrics(user).reopened_rate == pytest.approx(25.0)


def test_helpers():
    assert safe_ratio(1, 0) is None
    assert safe_ratio(3, 4) == 0.75
    assert format_fixed(None, 2) == "N/A"
    assert format_fixed(2.0, 2) == "2.00"
    assert format_count(4200) == "4,200"


def test_status_colors():
    assert status_color("Active") == "#66bb6a"
    assert status_color("Inactive") == "#ef5350"
    assert status_color("Unknown") == "#ffb300"
    assert status_color("Suspended") == "#555"


def test_theme_card_background_and_chart_theme():
    assert DARK_THEME.card_background(True) == "#212B36"
    assert DARK_THEME.card_background(False) == DARK_THEME.paper
    assert DARK_THEME.chart_theme().stroke == DARK_THEME.paper
