"""Math helpers: finite filtering, percentiles, value formatting. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray


def is_finite_number(value: object) -> bool:
    """True for real ints/floats that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def finite_array(values: Iterable[object]) -> NDArray[np.float64]:
    """Keep only finite numeric values, as a float64 array."""
    return np.array([float(v) for v in values if is_finite_number(v)], dtype=np.float64)


def percentile_from_sorted(sorted_values: NDArray[np.float64], fraction: float) -> float:
    """Linear interpolation between order statistics at position (n-1) * fraction.

    Matches numpy's default "linear" method. Takes a fraction, not a 0-100 percentile.
    """
    if sorted_values.size == 0:
        return 0.0
    return float(np.percentile(sorted_values, fraction * 100.0))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def format_value(value: float | None, unit: str, precision: int = 1) -> str:
    """Format an axis value by its unit: 12.3%, 4.0d, 6.5h, or value + unit."""
    if value is None or not is_finite_number(value):
        return "--"
    if unit == "%":
        return f"{value:.{precision}f}%"
    if unit == "days":
        return f"{value:.{precision}f}d"
    if unit == "hours":
        return f"{value:.{precision}f}h"
    return f"{value:.{precision}f} {unit}".strip()
