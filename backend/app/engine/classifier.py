"""ZoneClassifier: concrete labeled rectangles from bands + the template library.

Each template names a level (low/high) per metric. The metric's level is
resolved against the bands of whichever physical axis carries it, so the
same template lands in the correct corner whether churn is on x or on y.

Returns None (overlay omitted, never an error) when:
  - the axes are not exactly {churn, throughput}
  - either axis has fewer than 2 distinct finite values
  - a band collapses to zero width (e.g. [1, 1, 1, 2], where p55 == min)
"""

from __future__ import annotations

import logging

from app.engine.bands import AxisBands, axis_values, build_axis_bands
from app.engine.config import LandscapeConfig
from app.engine.templates import resolve_definition, resolve_templates
from app.models.quadrant import QuadrantPoint, QuadrantResponse
from app.models.zones import ZoneOverlay, ZoneRegion

logger = logging.getLogger(__name__)


def classify_zones(
    response: QuadrantResponse | None,
    config: LandscapeConfig | None = None,
) -> ZoneOverlay | None:
    """Zones for the response, with bands taken from every plottable point in it."""
    if response is None or not response.points:
        return None

    definition = resolve_definition(response.axes)
    if definition is None:
        logger.debug("No zone templates for axes %s x %s", *response.axes.metrics)
        return None

    x_bands = build_axis_bands(axis_values(response.points, "x"), config)
    y_bands = build_axis_bands(axis_values(response.points, "y"), config)
    if x_bands is None or y_bands is None:
        logger.debug("Zone overlay omitted: insufficient variation")
        return None
    if x_bands.is_collapsed or y_bands.is_collapsed:
        logger.debug("Zone overlay omitted: a band has zero width (%s, %s)", x_bands, y_bands)
        return None

    x_metric, y_metric = response.axes.metrics
    bands_by_metric: dict[str, AxisBands] = {x_metric: x_bands, y_metric: y_bands}

    zones: list[ZoneRegion] = []
    for template in resolve_templates(definition.zone_ids):
        x_level = template.levels.get(x_metric)
        y_level = template.levels.get(y_metric)
        if x_level is None or y_level is None:
            continue
        zones.append(
            ZoneRegion(
                id=template.id,
                label=template.label,
                description=template.description,
                signals=list(template.signals),
                investigations=list(template.investigations),
                color=template.color,
                x_range=bands_by_metric[x_metric].range_for(x_level),
                y_range=bands_by_metric[y_metric].range_for(y_level),
            )
        )

    return ZoneOverlay(id=definition.id, label=definition.label, zones=zones)


def find_zone_matches(overlay: ZoneOverlay | None, point: QuadrantPoint) -> list[ZoneRegion]:
    """Zones whose closed rectangle contains the point. Overlap band → several matches."""
    if overlay is None or not point.is_plottable:
        return []
    return [
        zone
        for zone in overlay.zones
        if zone.x_range[0] <= point.x <= zone.x_range[1]
        and zone.y_range[0] <= point.y <= zone.y_range[1]
    ]
