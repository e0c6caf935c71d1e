"""Chart theme: passed explicitly into the render-model builder."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHART_COLORS = [
    "#1e88e5",
    "#3949ab",
    "#8e24aa",
    "#00897b",
    "#43a047",
    "#7cb342",
    "#f9a825",
    "#fb8c00",
    "#f4511e",
    "#e53935",
]


class ChartTheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    grid: str = "#e7e0ec"
    muted: str = "#49454f"
    accent1: str = "#3b82f6"
    colors: list[str] = Field(default_factory=lambda: list(DEFAULT_CHART_COLORS))

    def color(self, index: int) -> str:
        """Palette color by index, wrapping around."""
        palette = self.colors or DEFAULT_CHART_COLORS
        return palette[index % len(palette)]
