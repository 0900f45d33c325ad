"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from devmetrics.models.chart import ChartInput


class ChartLayoutRequest(BaseModel):
    chart: ChartInput = Field(..., description="Slices, total and ring geometry")
    title: str = Field(default="", description="Optional <title> for the SVG")
    with_legend: bool = Field(default=False, description="Draw legend rows under the arc")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=10,
        description="Decimals in path data (defaults to the server setting)",
    )
