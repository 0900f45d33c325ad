"""POST /api/chart/semi-donut: lay out and render an arbitrary chart."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from devmetrics.chart.renderer import render_semi_donut
from devmetrics.config import Settings
from devmetrics.dashboard.theme import DARK_THEME
from devmetrics.dependencies import get_settings
from devmetrics.models.requests import ChartLayoutRequest
from devmetrics.models.responses import ChartLayoutResponse

router = APIRouter(prefix="/chart")
logger = logging.getLogger(__name__)


@router.post("/semi-donut", response_model=ChartLayoutResponse)
async def semi_donut(req: ChartLayoutRequest, cfg: Settings = Depends(get_settings)) -> ChartLayoutResponse:
    precision = cfg.path_precision if req.precision is None else req.precision
    rendered = render_semi_donut(
        req.chart,
        DARK_THEME.chart_theme(),
        precision=precision,
        title=req.title,
        with_legend=req.with_legend,
    )
    logger.info("Semi-donut request: %d slices → %d segments", len(req.chart.slices), len(rendered.segments))
    return ChartLayoutResponse(
        segments=rendered.segments,
        path_commands=rendered.path_commands,
        legend=rendered.legend,
        width=rendered.width,
        height=rendered.height,
        svg=rendered.svg,
    )
