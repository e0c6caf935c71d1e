"""Render model: a declarative, surface-agnostic description of the quadrant.

Any 2D scatter/line surface can paint it: two point series, trajectory
lines, shaded overlay regions. Each point datum carries a stable ``id``
(the entity id) for click/hover correlation.

Tooltips are a tagged union on ``kind`` so formatters never have to sniff
the shape of what they were given.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from app.models.zones import LensInfo, ZoneOverlay


class AxisValue(BaseModel):
    label: str
    value: float
    formatted: str


class ZoneTooltip(BaseModel):
    kind: Literal["zone"] = "zone"
    zone_id: str
    label: str
    description: str = ""
    signals: list[str] = Field(default_factory=list)
    investigations: list[str] = Field(default_factory=list)
    disclaimer: str


class PointTooltip(BaseModel):
    kind: Literal["point"] = "point"
    point_id: str
    title: str
    x: AxisValue
    y: AxisValue
    window_days: int | None = None
    window_start: str | None = None
    window_end: str | None = None
    window_text: str
    zones: list[str] = Field(default_factory=list)


class AnnotationTooltip(BaseModel):
    kind: Literal["annotation"] = "annotation"
    annotation_type: str = ""
    description: str = ""


Tooltip = Annotated[
    Union[ZoneTooltip, PointTooltip, AnnotationTooltip],
    Field(discriminator="kind"),
]


class AxisSpec(BaseModel):
    metric: str
    name: str
    unit: str = ""
    line_color: str = ""
    label_color: str = ""
    split_line_color: str = ""


class PointDatum(BaseModel):
    id: str
    value: tuple[float, float]
    label: str | None = None
    tooltip: PointTooltip


class PointSeries(BaseModel):
    id: Literal["background", "focus"]
    symbol: str = "circle"
    symbol_size: int
    color: str
    opacity: float = 1.0
    show_labels: bool = False
    z: int = 3
    data: list[PointDatum] = Field(default_factory=list)


class TrajectoryStepDatum(BaseModel):
    value: tuple[float, float]
    window: str | None = None


class TrajectorySeries(BaseModel):
    id: str
    point_id: str
    name: str
    color: str
    width: int = 2
    symbol: str = "circle"
    symbol_size: int = 6
    z: int = 2
    data: list[TrajectoryStepDatum] = Field(default_factory=list)


class OverlayRegion(BaseModel):
    id: str
    kind: Literal["annotation", "zone"]
    label: str
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    color: str
    tooltip: Tooltip


class QuadrantRenderModel(BaseModel):
    status: Literal["ready", "unavailable"] = "ready"
    placeholder: str | None = None
    scope: str = "org"
    x_axis: AxisSpec | None = None
    y_axis: AxisSpec | None = None
    background: PointSeries | None = None
    focus: PointSeries | None = None
    trajectories: list[TrajectorySeries] = Field(default_factory=list)
    regions: list[OverlayRegion] = Field(default_factory=list)
    zone_overlay: ZoneOverlay | None = None
    lens: LensInfo | None = None
    dropped_points: int = 0

    @property
    def point_ids(self) -> list[str]:
        ids: list[str] = []
        for series in (self.background, self.focus):
            if series is not None:
                ids.extend(d.id for d in series.data)
        return ids
