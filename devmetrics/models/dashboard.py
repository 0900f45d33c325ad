"""Dashboard view model: what the page displays, already formatted."""

from __future__ import annotations

from pydantic import BaseModel, Field

from devmetrics.models.chart import LegendEntry, RenderedSegment


class StatusBadge(BaseModel):
    source: str
    status: str
    color: str


class MetricCard(BaseModel):
    title: str
    value: str
    unit: str = ""
    explanation: str = ""
    color: str
    background: str
    is_calculated: bool = False


class ProgressCard(BaseModel):
    """Percentage card with a determinate progress bar."""

    title: str
    value: str
    progress: float = Field(0.0, ge=0.0, le=100.0)
    caption: str = ""
    explanation: str = ""
    color: str
    footnote: str = ""


class ChartCard(BaseModel):
    title: str
    explanation: str = ""
    total: float
    width: float
    height: float
    svg: str
    path_commands: list[str] = Field(default_factory=list)
    segments: list[RenderedSegment] = Field(default_factory=list)
    legend: list[LegendEntry] = Field(default_factory=list)


class DashboardSection(BaseModel):
    title: str
    cards: list[MetricCard] = Field(default_factory=list)


class DashboardView(BaseModel):
    title: str = "User Metrics Dashboard"
    user_name: str
    statuses: list[StatusBadge] = Field(default_factory=list)
    sections: list[DashboardSection] = Field(default_factory=list)
    progress_cards: list[ProgressCard] = Field(default_factory=list)
    story_chart: ChartCard | None = None
