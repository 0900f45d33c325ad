"""Semi-donut chart models. All frozen: recomputed on every render."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Point2D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Slice(BaseModel):
    """One category to plot."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    # Sign is checked by the layout engine, not here, so that a negative
    # magnitude surfaces as InvalidConfiguration.
    value: float
    color: str = Field(..., description="Any CSS/SVG color token")


class ChartInput(BaseModel):
    """Everything the arc engine needs for one layout."""

    model_config = ConfigDict(frozen=True)

    slices: tuple[Slice, ...] = ()
    # Explicit normalizer; may be a superset of sum(slice.value).
    total_value: float
    outer_radius: float
    inner_thickness_ratio: float = 0.5
    # None = center of the padded box (outer_radius * 1.1 on both axes)
    center: Point2D | None = None


class RenderedSegment(BaseModel):
    """Ring-segment geometry for a single non-zero slice."""

    model_config = ConfigDict(frozen=True)

    source_slice: Slice
    outer_arc_start: Point2D
    outer_arc_end: Point2D
    inner_arc_start: Point2D
    inner_arc_end: Point2D
    start_angle_deg: float
    end_angle_deg: float
    is_large_arc: bool
    outer_radius: float
    inner_radius: float

    @property
    def sweep_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg


class LegendEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: float
    color: str

    @computed_field
    @property
    def text(self) -> str:
        """``Label (value)``; integral values print without a decimal point."""
        value = int(self.value) if float(self.value).is_integer() else self.value
        return f"{self.label} ({value})"
