"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.filters import MetricFilter
from app.models.quadrant import QuadrantResponse
from app.models.theme import ChartTheme


class RenderRequest(BaseModel):
    data: QuadrantResponse | None = Field(default=None, description="Quadrant snapshot; null renders a placeholder")
    scope: str = Field(default="org", description="org, team, repo, person (developer is an alias of person)")
    focus_ids: list[str] = Field(default_factory=list, description="Explicitly highlighted entity IDs")
    theme: ChartTheme | None = Field(default=None, description="Chart colors; defaults to the light theme")


class ZonesRequest(BaseModel):
    data: QuadrantResponse | None = None


class SelectRequest(BaseModel):
    data: QuadrantResponse | None = None
    entity_id: str = Field(..., description="Stable point id from the render model")
    scope: str = "org"
    focus_ids: list[str] = Field(default_factory=list)
    filters: MetricFilter = Field(default_factory=MetricFilter)
