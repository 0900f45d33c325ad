"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from devmetrics.models.chart import LegendEntry, RenderedSegment


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class ChartLayoutResponse(BaseModel):
    segments: list[RenderedSegment] = Field(default_factory=list)
    path_commands: list[str] = Field(default_factory=list)
    legend: list[LegendEntry] = Field(default_factory=list)
    width: float = 0.0
    height: float = 0.0
    svg: str = ""


class ErrorResponse(BaseModel):
    error: str
    detail: str = ""
