"""Quadrant input models: the snapshot returned by the metrics backend.

Parsing is lenient at the point level: a point with a missing
or non-finite coordinate still parses (coordinate becomes None) so the
engine can drop it without failing the whole response.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.dates import parse_date
from app.utils.math_helpers import is_finite_number

AxisKey = Literal["x", "y"]


def _coerce_coordinate(value: Any) -> float | None:
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not is_finite_number(value):
        return None
    return float(value)


class QuadrantAxis(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric: str
    label: str = ""
    unit: str = ""

    @property
    def display_name(self) -> str:
        label = self.label or self.metric
        return f"{label} ({self.unit})" if self.unit else label


class QuadrantAxes(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: QuadrantAxis
    y: QuadrantAxis

    @property
    def metrics(self) -> tuple[str, str]:
        return (self.x.metric, self.y.metric)


class TrajectoryStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float | None = None
    y: float | None = None
    window: date | None = None

    coerce_xy = field_validator("x", "y", mode="before")(_coerce_coordinate)

    @field_validator("window", mode="before")
    @classmethod
    def parse_window(cls, value: Any) -> date | None:
        return parse_date(value)

    @property
    def is_plottable(self) -> bool:
        return self.x is not None and self.y is not None


class QuadrantPoint(BaseModel):
    """One entity's position for one window, optionally with history."""

    model_config = ConfigDict(frozen=True)

    entity_id: str
    entity_label: str = ""
    x: float | None = None
    y: float | None = None
    window_start: date | None = None
    window_end: date | None = None
    evidence_link: str | None = None
    trajectory: list[TrajectoryStep] = Field(default_factory=list)

    coerce_xy = field_validator("x", "y", mode="before")(_coerce_coordinate)

    @field_validator("window_start", "window_end", mode="before")
    @classmethod
    def parse_window(cls, value: Any) -> date | None:
        return parse_date(value)

    @field_validator("evidence_link", mode="before")
    @classmethod
    def blank_link(cls, value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @field_validator("trajectory", mode="before")
    @classmethod
    def null_trajectory(cls, value: Any) -> Any:
        return value or []

    @property
    def display_label(self) -> str:
        return self.entity_label or self.entity_id

    @property
    def is_plottable(self) -> bool:
        return self.x is not None and self.y is not None

    def coordinate(self, axis: AxisKey) -> float | None:
        return self.x if axis == "x" else self.y


class QuadrantAnnotation(BaseModel):
    """Externally supplied shaded region."""

    model_config = ConfigDict(frozen=True)

    type: str = ""
    description: str = ""
    x_range: tuple[float, float]
    y_range: tuple[float, float]


class QuadrantResponse(BaseModel):
    """Immutable snapshot for one scope / time-window query."""

    model_config = ConfigDict(frozen=True)

    axes: QuadrantAxes
    points: list[QuadrantPoint] = Field(default_factory=list)
    annotations: list[QuadrantAnnotation] = Field(default_factory=list)

    @field_validator("points", "annotations", mode="before")
    @classmethod
    def null_list(cls, value: Any) -> Any:
        return value or []
