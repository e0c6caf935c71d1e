"""Filter context carried into navigation links."""

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field

ScopeLevel = Literal["org", "team", "repo", "service", "developer", "person"]


class TimeFilter(BaseModel):
    range_days: int = 14
    compare_days: int = 14
    start_date: date | None = None
    end_date: date | None = None


class ScopeFilter(BaseModel):
    level: ScopeLevel = "org"
    ids: list[str] = Field(default_factory=list)


class MetricFilter(BaseModel):
    time: TimeFilter = Field(default_factory=TimeFilter)
    scope: ScopeFilter = Field(default_factory=ScopeFilter)
    who: dict[str, Any] = Field(default_factory=dict)
    what: dict[str, Any] = Field(default_factory=dict)
    why: dict[str, Any] = Field(default_factory=dict)
    how: dict[str, Any] = Field(default_factory=dict)
