"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from devmetrics import __version__
from devmetrics.config import Settings
from devmetrics.dependencies import get_settings
from devmetrics.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, environment=cfg.devmetrics_env)
