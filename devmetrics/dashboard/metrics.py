"""Raw user counters and the ratios derived from them."""

from __future__ import annotations

from pydantic import BaseModel, Field

from devmetrics.models.chart import Slice

NOT_AVAILABLE = "N/A"
CLOSED_STATUS = "Closed"


class UserMetricsData(BaseModel):
    """Counters collected for one user over a reporting period."""

    user_name: str
    github_status: str = "Unknown"
    copilot_status: str = "Unknown"
    jira_status: str = "Unknown"

    # Volume
    total_commits: int = 0
    total_additions: int = 0
    total_deletions: int = 0
    story_points_closed: float = 0
    total_sprints: int = 0

    # Collaboration / quality
    pr_reviewed: int = 0
    review_comments: int = 0
    total_defects_found: int = 0
    total_code_base_lines: int = 0
    time_to_first_review_hrs: float = 0.0
    story_reopened_count: int = 0
    blocked_time_hours: float = 0.0
    pr_submission_lead_time_hrs: float = 0.0

    # AI adoption
    refactoring_suggestions_accepted: int = 0
    copilot_last_activity: str = ""
    copilot_suggestions_accepted: int = 0
    copilot_suggestions_offered: int = 0

    # Flow
    avg_cycle_time_days: float = 0.0
    jira_stories: list[Slice] = Field(default_factory=list)

    @property
    def total_lines_changed(self) -> int:
        return self.total_additions + self.total_deletions

    @property
    def total_stories(self) -> float:
        return sum(s.value for s in self.jira_stories)

    @property
    def closed_stories(self) -> float:
        return sum(s.value for s in self.jira_stories if s.label == CLOSED_STATUS)


class DerivedMetrics(BaseModel):
    """Ratios; ``None`` where the denominator is zero."""

    copilot_acceptance_rate: float | None = None
    refactoring_adoption_rate: float | None = None
    commit_efficiency_ratio: float | None = None
    avg_lines_per_commit: float | None = None
    story_point_velocity: float | None = None
    defect_density: float | None = None
    review_effectiveness: float | None = None
    reopened_rate: float | None = None
    pr_creation_speed_hrs: float | None = None
    impact_score: float | None = None


# Display decimals per metric.
METRIC_DECIMALS: dict[str, int] = {
    "copilot_acceptance_rate": 1,
    "refactoring_adoption_rate": 1,
    "commit_efficiency_ratio": 2,
    "avg_lines_per_commit": 0,
    "story_point_velocity": 1,
    "defect_density": 2,
    "review_effectiveness": 1,
    "reopened_rate": 1,
    "pr_creation_speed_hrs": 1,
    "impact_score": 0,
}


def safe_ratio(numerator: float, denominator: float) -> float | None:
    if denominator == 0:
        return None
    return numerator / denominator


def percent(numerator: float, denominator: float) -> float | None:
    ratio = safe_ratio(numerator, denominator)
    return None if ratio is None else ratio * 100


def format_fixed(value: float | None, decimals: int) -> str:
    """Fixed decimals without locale grouping; N/A for missing values."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}"


def format_count(value: float) -> str:
    """Integer with thousands separators (4,200)."""
    return f"{value:,.0f}"


def compute_derived_metrics(user: UserMetricsData) -> DerivedMetrics:
    lines = user.total_lines_changed
    closed = user.closed_stories
    return DerivedMetrics(
        copilot_acceptance_rate=percent(user.copilot_suggestions_accepted, user.copilot_suggestions_offered),
        refactoring_adoption_rate=percent(user.refactoring_suggestions_accepted, user.copilot_suggestions_accepted),
        commit_efficiency_ratio=safe_ratio(lines, closed),
        avg_lines_per_commit=safe_ratio(lines, user.total_commits),
        story_point_velocity=safe_ratio(user.story_points_closed, user.total_sprints),
        defect_density=safe_ratio(user.total_defects_found, user.total_code_base_lines / 1000),
        review_effectiveness=safe_ratio(user.review_comments, user.pr_reviewed),
        reopened_rate=percent(user.story_reopened_count, closed),
        pr_creation_speed_hrs=user.pr_submission_lead_time_hrs,
        impact_score=safe_ratio(lines * user.pr_reviewed, user.total_commits),
    )


def format_metric(metrics: DerivedMetrics, name: str) -> str:
    """Display string for one derived metric, e.g. ``55.6``."""
    return format_fixed(getattr(metrics, name), METRIC_DECIMALS[name])
