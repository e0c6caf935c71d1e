"""AxisBandBuilder: distribution-relative low/high bands for one axis.

  values → finite only → need ≥2 distinct → sort
  low_max  = p55 (linear interpolation between order statistics)
  high_min = p45
  both clamped into [min, max]

The p45..p55 overlap is an ambiguity band around the middle of the cohort:
points there belong to both the low and the high band.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from app.engine.config import LandscapeConfig
from app.models.quadrant import AxisKey, QuadrantPoint
from app.utils.math_helpers import clamp, finite_array, percentile_from_sorted

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisBands:
    min: float
    max: float
    low_max: float
    high_min: float

    @property
    def low(self) -> tuple[float, float]:
        return (self.min, self.low_max)

    @property
    def high(self) -> tuple[float, float]:
        return (self.high_min, self.max)

    @property
    def is_collapsed(self) -> bool:
        """True when either band has zero width."""
        return self.low_max <= self.min or self.high_min >= self.max

    def range_for(self, level: str) -> tuple[float, float]:
        if level == "low":
            return self.low
        if level == "high":
            return self.high
        raise ValueError(f"Unknown band level: {level!r}")


def axis_values(points: Sequence[QuadrantPoint], axis: AxisKey) -> list[float]:
    """Values of one axis across the plottable points of the cohort."""
    return [p.coordinate(axis) for p in points if p.is_plottable]


def build_axis_bands(
    values: Iterable[object],
    config: LandscapeConfig | None = None,
) -> AxisBands | None:
    """Return bands for the values, or None when the axis has too little variation."""
    config = config or LandscapeConfig()
    arr = finite_array(values)
    distinct = np.unique(arr).size
    if distinct < max(2, config.min_distinct_values):
        logger.debug("Axis bands unavailable: %d distinct finite values", distinct)
        return None

    sorted_values = np.sort(arr)
    lo = float(sorted_values[0])
    hi = float(sorted_values[-1])
    low_max = percentile_from_sorted(sorted_values, config.low_band_percentile)
    high_min = percentile_from_sorted(sorted_values, config.high_band_percentile)

    return AxisBands(
        min=lo,
        max=hi,
        low_max=clamp(low_max, lo, hi),
        high_min=clamp(high_min, lo, hi),
    )
