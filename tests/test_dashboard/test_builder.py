"""Tests for dashboard view assembly."""

from __future__ import annotations

import pytest

from devmetrics.config import Settings
from devmetrics.dashboard.builder import build_dashboard, build_story_chart
from devmetrics.dashboard.metrics import UserMetricsData
from devmetrics.dashboard.sample_data import SAMPLE_USER
from devmetrics.dashboard.theme import DARK_THEME


def _cards(view):
    return {card.title: card for section in view.sections for card in section.cards}


def test_dashboard_header_and_statuses():
    view = build_dashboard(SAMPLE_USER)
    assert view.title == "User Metrics Dashboard"
    assert view.user_name == "Nivi"
    assert [(b.source, b.status, b.color) for b in view.statuses] == [
        ("GitHub", "Active", "#66bb6a"),
        ("Copilot", "Active", "#66bb6a"),
        ("JIRA", "Active", "#66bb6a"),
    ]


def test_dashboard_sections():
    view = build_dashboard(SAMPLE_USER)
    assert [s.title for s in view.sections] == [
        "Productivity & Velocity (Output Volume)",
        "Flow & Quality (JIRA/Defect Focus)",
        "Collaboration & Delivery (GitHub PR Focus)",
        "AI Adoption & Workflow Status",
    ]
    assert [len(s.cards) for s in view.sections[:3]] == [4, 4, 4]


def test_dashboard_card_values():
    cards = _cards(build_dashboard(SAMPLE_USER))
    assert cards["Total Commits"].value == "58"
    assert cards["Total Lines Changed"].value == "6,000"
    assert cards["Avg Story Cycle Time"].value == "3.5"
    assert cards["Total Blocked Time"].value == "15"
    assert cards["Reopened Story Rate"].value == "4.4%"
    assert cards["PR Review Contribution"].value == "15 / 78"
    assert cards["Code Impact Score"].value == "1552"


def test_calculated_cards_use_calculated_background():
    cards = _cards(build_dashboard(SAMPLE_USER))
    assert cards["Defect Density"].is_calculated
    assert cards["Defect Density"].background == DARK_THEME.calculated_paper
    assert not cards["Total Commits"].is_calculated
    assert cards["Total Commits"].background == DARK_THEME.paper


def test_progress_cards():
    acceptance, refactoring = build_dashboard(SAMPLE_USER).progress_cards
    assert acceptance.value == "55.6%"
    assert 55.5 < acceptance.progress < 55.6
    assert acceptance.caption == "2,500 accepted out of 4,500"
    assert acceptance.footnote == "Last Used: 2 days ago"
    assert refactoring.value == "6.0%"
    assert refactoring.color == "#ff4081"


def test_story_chart_card():
    card = build_dashboard(SAMPLE_USER).story_chart
    assert card.title == "JIRA Story Completion Status (Total: 62)"
    assert card.total == 62
    assert len(card.segments) == 3
    assert card.segments[-1].end_angle_deg == 180.0
    assert [e.text for e in card.legend] == ["Open (5)", "In Progress (12)", "Closed (45)"]
    assert card.svg.count("<path ") == 3


def test_story_chart_respects_settings():
    card = build_story_chart(SAMPLE_USER, DARK_THEME, Settings(chart_radius=50, path_precision=1))
    assert card.width == pytest.approx(110.0)
    assert card.segments[0].outer_radius == 50
    assert card.path_commands[0].startswith("M 55.0 5.0 ")


def test_dashboard_for_user_without_data():
    view = build_dashboard(UserMetricsData(user_name="new hire"))
    cards = _cards(view)
    assert cards["Avg Lines Per Commit"].value == "N/A"
    assert cards["Reopened Story Rate"].value == "N/A"
    assert view.progress_cards[0].progress == 0.0
    assert view.story_chart.segments == []
    assert view.story_chart.title == "JIRA Story Completion Status (Total: 0)"
