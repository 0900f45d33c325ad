"""Assemble the dashboard view model from raw user counters.

Four sections, mirroring how the page reads top to bottom:
  1. Productivity & Velocity -- commit volume and story throughput
  2. Flow & Quality -- cycle time, blocked time, defects, reopen rate
  3. Collaboration & Delivery -- PR review and lead-time metrics
  4. AI Adoption & Workflow Status -- Copilot cards and the story status chart
"""

from __future__ import annotations

import logging

from devmetrics.chart.renderer import render_semi_donut
from devmetrics.config import Settings, settings as default_settings
from devmetrics.dashboard.metrics import (
    DerivedMetrics,
    UserMetricsData,
    compute_derived_metrics,
    format_count,
    format_metric,
)
from devmetrics.dashboard.theme import DARK_THEME, DashboardTheme, status_color
from devmetrics.models.chart import ChartInput
from devmetrics.models.dashboard import (
    ChartCard,
    DashboardSection,
    DashboardView,
    MetricCard,
    ProgressCard,
    StatusBadge,
)

logger = logging.getLogger(__name__)

REFACTORING_COLOR = "#ff4081"


def _card(
    theme: DashboardTheme,
    title: str,
    value: str,
    unit: str,
    explanation: str,
    color: str,
    is_calculated: bool = False,
) -> MetricCard:
    return MetricCard(
        title=title,
        value=value,
        unit=unit,
        explanation=explanation,
        color=color,
        background=theme.card_background(is_calculated),
        is_calculated=is_calculated,
    )


def _num(value: float) -> str:
    """Raw counter as shown on a card: 3.5 stays 3.5, 15.0 prints as 15."""
    return str(int(value)) if float(value).is_integer() else str(value)


def _progress(value: float | None) -> float:
    if value is None:
        return 0.0
    return max(0.0, min(100.0, value))


def build_status_row(user: UserMetricsData) -> list[StatusBadge]:
    return [
        StatusBadge(source=source, status=status, color=status_color(status))
        for source, status in (
            ("GitHub", user.github_status),
            ("Copilot", user.copilot_status),
            ("JIRA", user.jira_status),
        )
    ]


def build_sections(user: UserMetricsData, m: DerivedMetrics, theme: DashboardTheme) -> list[DashboardSection]:
    productivity = DashboardSection(
        title="Productivity & Velocity (Output Volume)",
        cards=[
            _card(theme, "Total Commits", _num(user.total_commits), "Commits",
                  "The raw count of total Git commits pushed by the user in the time period.",
                  "#03a9f4"),
            _card(theme, "Total Lines Changed", format_count(user.total_lines_changed), "Lines",
                  "The sum of all lines added and deleted. (Measure of total coding effort volume)",
                  "#4caf50"),
            _card(theme, "Story Point Velocity", format_metric(m, "story_point_velocity"), "Points/Sprint",
                  "Calculation: (Total Story Points Closed) / (Total Sprints Completed). "
                  "A measure of team output predictability.",
                  "#8e24aa", is_calculated=True),
            _card(theme, "Avg Lines Per Commit", format_metric(m, "avg_lines_per_commit"), "Lines/Commit",
                  "Calculation: (Total Additions + Total Deletions) / (Total Commits). "
                  "A proxy for commit size; indicates frequency of check-ins.",
                  "#00bcd4", is_calculated=True),
        ],
    )

    reopened = format_metric(m, "reopened_rate")
    flow = DashboardSection(
        title="Flow & Quality (JIRA/Defect Focus)",
        cards=[
            _card(theme, "Avg Story Cycle Time", _num(user.avg_cycle_time_days), "Days",
                  "Calculation: Average duration a story spends between 'In Progress' and 'Closed' "
                  "status. Key for workflow predictability.",
                  "#3f51b5"),
            _card(theme, "Total Blocked Time", _num(user.blocked_time_hours), "Hours",
                  "Calculation: Cumulative time a story was in a 'Blocked' or 'Waiting' status. "
                  "Measures impediments encountered by the individual.",
                  "#e57373"),
            _card(theme, "Defect Density", format_metric(m, "defect_density"), "Defects/1K LOC",
                  "Calculation: (Total Defects Found) / (Total Lines of Code / 1000). "
                  "A high value indicates lower code quality.",
                  "#c62828", is_calculated=True),
            _card(theme, "Reopened Story Rate", f"{reopened}%" if m.reopened_rate is not None else reopened,
                  "Rate",
                  "Calculation: (Stories Reopened) / (Total Stories Closed) * 100. "
                  "Measures completeness and quality of delivery.",
                  "#ffb300", is_calculated=True),
        ],
    )

    collaboration = DashboardSection(
        title="Collaboration & Delivery (GitHub PR Focus)",
        cards=[
            _card(theme, "PR Review Contribution", f"{user.pr_reviewed} / {user.review_comments}",
                  "PRs/Comments",
                  "Raw count of Total Pull Requests Reviewed and Total Comments Provided. "
                  "Measures contribution to team code quality.",
                  theme.secondary),
            _card(theme, "Review Effectiveness", format_metric(m, "review_effectiveness"), "Comments/PR",
                  "Calculation: (Total Review Comments) / (Total PRs Reviewed). "
                  "A higher value suggests more detailed code review feedback.",
                  "#4dd0e1", is_calculated=True),
            _card(theme, "PR Submission Lead Time", format_metric(m, "pr_creation_speed_hrs"), "Hours",
                  "Calculation: Average time from the first commit on a branch to the Pull Request "
                  "being opened. Measures speed of work packaging.",
                  "#ff9800"),
            _card(theme, "Code Impact Score", format_metric(m, "impact_score"), "Weighted Score",
                  "Calculation: (Total Lines Changed * Total PRs Reviewed) / (Total Commits). "
                  "A composite score attempting to quantify delivery velocity combined with "
                  "quality contribution.",
                  "#ff7043", is_calculated=True),
        ],
    )

    return [productivity, flow, collaboration]


def build_progress_cards(user: UserMetricsData, m: DerivedMetrics, theme: DashboardTheme) -> list[ProgressCard]:
    acceptance = format_metric(m, "copilot_acceptance_rate")
    refactoring = format_metric(m, "refactoring_adoption_rate")
    return [
        ProgressCard(
            title="Copilot Acceptance Rate",
            value=f"{acceptance}%" if m.copilot_acceptance_rate is not None else acceptance,
            progress=_progress(m.copilot_acceptance_rate),
            caption=(
                f"{format_count(user.copilot_suggestions_accepted)} accepted out of "
                f"{format_count(user.copilot_suggestions_offered)}"
            ),
            explanation=(
                "Calculation: (Total Suggestions Accepted) / (Total Suggestions Offered) * 100. "
                "Indicates effective AI utilization and trust in Copilot."
            ),
            color=theme.primary,
            footnote=f"Last Used: {user.copilot_last_activity}" if user.copilot_last_activity else "",
        ),
        ProgressCard(
            title="Refactoring Adoption Rate",
            value=f"{refactoring}%" if m.refactoring_adoption_rate is not None else refactoring,
            progress=_progress(m.refactoring_adoption_rate),
            caption=f"{format_count(user.refactoring_suggestions_accepted)} refactoring suggestions accepted.",
            explanation=(
                "Calculation: (Refactoring Suggestions Accepted) / (Total Suggestions Accepted) * 100. "
                "Measures the reliance on Copilot for quality improvements and code cleanup."
            ),
            color=REFACTORING_COLOR,
        ),
    ]


def build_story_chart(user: UserMetricsData, theme: DashboardTheme, cfg: Settings) -> ChartCard:
    """Story status semi-donut, normalised against the sum of all statuses."""
    total = user.total_stories
    chart = ChartInput(
        slices=tuple(user.jira_stories),
        total_value=total,
        outer_radius=cfg.chart_radius,
    )
    title = f"JIRA Story Completion Status (Total: {_num(total)})"
    rendered = render_semi_donut(chart, theme.chart_theme(), precision=cfg.path_precision, title=title)
    return ChartCard(
        title=title,
        explanation=(
            "Calculation: Raw count of stories in each status (Open, In Progress, Closed) "
            "divided by the total count of assigned stories."
        ),
        total=total,
        width=rendered.width,
        height=rendered.height,
        svg=rendered.svg,
        path_commands=rendered.path_commands,
        segments=rendered.segments,
        legend=rendered.legend,
    )


def build_dashboard(
    user: UserMetricsData,
    theme: DashboardTheme = DARK_THEME,
    cfg: Settings | None = None,
) -> DashboardView:
    cfg = cfg or default_settings
    metrics = compute_derived_metrics(user)

    sections = build_sections(user, metrics, theme)
    sections.append(DashboardSection(title="AI Adoption & Workflow Status"))

    view = DashboardView(
        user_name=user.user_name,
        statuses=build_status_row(user),
        sections=sections,
        progress_cards=build_progress_cards(user, metrics, theme),
        story_chart=build_story_chart(user, theme, cfg),
    )
    logger.info(
        "Built dashboard for %s: %d sections, %d chart segments",
        user.user_name,
        len(view.sections),
        len(view.story_chart.segments) if view.story_chart else 0,
    )
    return view
