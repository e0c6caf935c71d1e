"""Landscape configuration: controls band derivation and marker styling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LandscapeConfig:
    """Tunable constants for the quadrant landscape."""

    # Axis bands: low band tops out at p55, high band starts at p45.
    low_band_percentile: float = 0.55
    high_band_percentile: float = 0.45
    min_distinct_values: int = 2

    # Point markers
    focus_symbol_size: int = 14
    background_symbol_size: int = 10
    background_focused_symbol_size: int = 8
    background_focused_opacity: float = 0.35

    # Trajectories
    trajectory_width: int = 2
    trajectory_symbol_size: int = 6
    min_trajectory_steps: int = 2

    # Tooltip formatting
    value_precision: int = 1

    # Annotation shading
    annotation_color: str = "rgba(148, 163, 184, 0.08)"
