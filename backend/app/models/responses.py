"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from app.models.selection import SelectionEvent
from app.models.zones import ZoneOverlay


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    zone_templates: int = 0


class ZonesResponse(BaseModel):
    overlay: ZoneOverlay | None = None


class SelectResponse(BaseModel):
    selected: bool = False
    event: SelectionEvent | None = None
