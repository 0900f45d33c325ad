"""GET /api/dashboard — static dashboard for the demo user."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from devmetrics.config import Settings
from devmetrics.dashboard.builder import build_dashboard, build_story_chart
from devmetrics.dashboard.sample_data import SAMPLE_USER
from devmetrics.dashboard.theme import DARK_THEME
from devmetrics.dependencies import get_settings
from devmetrics.models.dashboard import DashboardView

router = APIRouter(prefix="/dashboard")


@router.get("", response_model=DashboardView)
async def dashboard(cfg: Settings = Depends(get_settings)) -> DashboardView:
    return build_dashboard(SAMPLE_USER, DARK_THEME, cfg)


@router.get("/chart.svg")
async def story_chart_svg(cfg: Settings = Depends(get_settings)) -> Response:
    card = build_story_chart(SAMPLE_USER, DARK_THEME, cfg)
    return Response(content=card.svg, media_type="image/svg+xml")
