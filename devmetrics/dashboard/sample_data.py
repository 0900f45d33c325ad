"""Static demo user shown by the dashboard."""

from __future__ import annotations

from devmetrics.dashboard.metrics import UserMetricsData
from devmetrics.models.chart import Slice

SAMPLE_USER = UserMetricsData(
    user_name="Nivi",
    github_status="Active",
    copilot_status="Active",
    jira_status="Active",
    total_commits=58,
    total_additions=4200,
    total_deletions=1800,
    story_points_closed=120,
    total_sprints=2,
    pr_reviewed=15,
    review_comments=78,
    total_defects_found=3,
    total_code_base_lines=15000,
    time_to_first_review_hrs=4.2,
    story_reopened_count=2,
    blocked_time_hours=15,
    pr_submission_lead_time_hrs=8.5,
    refactoring_suggestions_accepted=150,
    copilot_last_activity="2 days ago",
    copilot_suggestions_accepted=2500,
    copilot_suggestions_offered=4500,
    avg_cycle_time_days=3.5,
    jira_stories=[
        Slice(label="Open", value=5, color="#ef5350"),
        Slice(label="In Progress", value=12, color="#ffb300"),
        Slice(label="Closed", value=45, color="#66bb6a"),
    ],
)
