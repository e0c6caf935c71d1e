"""Selection event models: what the router receives when a point is chosen."""

from __future__ import annotations

from pydantic import BaseModel

from app.models.quadrant import QuadrantPoint


class SelectionLinks(BaseModel):
    explain: str
    heatmap: str
    evidence: str | None = None


class SelectionEvent(BaseModel):
    point: QuadrantPoint
    links: SelectionLinks
