"""Dark dashboard palette and status badge colors."""

from __future__ import annotations

from dataclasses import dataclass

from devmetrics.chart.config import ChartTheme

STATUS_COLORS: dict[str, str] = {
    "Active": "#66bb6a",
    "Inactive": "#ef5350",
    "Unknown": "#ffb300",
}
_STATUS_FALLBACK = "#555"


def status_color(status: str) -> str:
    """Badge color for an integration status; grey for anything unrecognised."""
    return STATUS_COLORS.get(status, _STATUS_FALLBACK)


@dataclass(frozen=True)
class DashboardTheme:
    primary: str = "#66bb6a"
    secondary: str = "#ffa726"
    background: str = "#121212"
    paper: str = "#1e1e1e"
    text_primary: str = "#e0e0e0"
    text_secondary: str = "#b3b3b3"
    # Cards that show a derived (calculated) metric
    calculated_paper: str = "#212B36"
    font_family: str = "Inter, sans-serif"

    def card_background(self, is_calculated: bool) -> str:
        return self.calculated_paper if is_calculated else self.paper

    def chart_theme(self) -> ChartTheme:
        return ChartTheme(stroke=self.paper, text_color=self.text_primary, font_family=self.font_family)


DARK_THEME = DashboardTheme()
