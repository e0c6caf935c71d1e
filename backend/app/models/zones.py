"""Zone overlay models: interpretive templates instantiated with data-derived ranges."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ZoneRegion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str = ""
    signals: list[str] = Field(default_factory=list)
    investigations: list[str] = Field(default_factory=list)
    color: str = ""
    x_range: tuple[float, float]
    y_range: tuple[float, float]


class ZoneOverlay(BaseModel):
    """Full set of zones for one response."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    zones: list[ZoneRegion] = Field(default_factory=list)


class LensInfo(BaseModel):
    """Reading guide for a metric pairing: what the view highlights and what to ask next."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    lens: str
    framing: str
    habits: list[str] = Field(default_factory=list)
    questions: list[str] = Field(default_factory=list)
    next: str = ""
    notes: list[str] = Field(default_factory=list)
