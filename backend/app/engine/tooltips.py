"""Tooltip content: built by the producer, formatted by kind.

Zone tooltips always carry the disclaimer. Point tooltips under person
scope never show an entity label, only "Your position".
"""

from __future__ import annotations

from app.engine.classifier import find_zone_matches
from app.engine.config import LandscapeConfig
from app.engine.templates import ZONE_DISCLAIMER
from app.models.quadrant import QuadrantAnnotation, QuadrantAxes, QuadrantPoint
from app.models.render import AnnotationTooltip, AxisValue, PointTooltip, Tooltip, ZoneTooltip
from app.models.zones import ZoneOverlay, ZoneRegion
from app.utils.dates import diff_days_inclusive, format_window_span
from app.utils.math_helpers import format_value

PERSON_TITLE = "Your position"
PERSON_LABEL = "You"
WINDOW_PLACEHOLDER = "Window unavailable"


def zone_tooltip(zone: ZoneRegion) -> ZoneTooltip:
    return ZoneTooltip(
        zone_id=zone.id,
        label=zone.label,
        description=zone.description,
        signals=list(zone.signals),
        investigations=list(zone.investigations),
        disclaimer=ZONE_DISCLAIMER,
    )


def annotation_tooltip(annotation: QuadrantAnnotation) -> AnnotationTooltip:
    return AnnotationTooltip(
        annotation_type=annotation.type,
        description=annotation.description,
    )


def point_tooltip(
    point: QuadrantPoint,
    axes: QuadrantAxes,
    *,
    person_scope: bool = False,
    overlay: ZoneOverlay | None = None,
    config: LandscapeConfig | None = None,
) -> PointTooltip:
    config = config or LandscapeConfig()
    precision = config.value_precision
    start, end = point.window_start, point.window_end
    has_window = start is not None and end is not None

    return PointTooltip(
        point_id=point.entity_id,
        title=PERSON_TITLE if person_scope else point.display_label,
        x=AxisValue(
            label=axes.x.label or axes.x.metric,
            value=point.x,
            formatted=format_value(point.x, axes.x.unit, precision),
        ),
        y=AxisValue(
            label=axes.y.label or axes.y.metric,
            value=point.y,
            formatted=format_value(point.y, axes.y.unit, precision),
        ),
        window_days=diff_days_inclusive(start, end) if has_window else None,
        window_start=start.isoformat() if start else None,
        window_end=end.isoformat() if end else None,
        window_text=format_window_span(start, end, WINDOW_PLACEHOLDER),
        zones=[z.label for z in find_zone_matches(overlay, point)],
    )


def format_tooltip(tooltip: Tooltip) -> list[str]:
    """Plain-text lines for any surface."""
    if tooltip.kind == "zone":
        lines = [tooltip.label]
        if tooltip.description:
            lines.append(tooltip.description)
        if tooltip.signals:
            lines.append("Signals: " + ", ".join(tooltip.signals))
        for question in tooltip.investigations:
            lines.append(f"Investigate: {question}")
        lines.append(tooltip.disclaimer)
        return lines

    if tooltip.kind == "point":
        lines = [
            tooltip.title,
            f"{tooltip.x.label}: {tooltip.x.formatted}",
            f"{tooltip.y.label}: {tooltip.y.formatted}",
            f"Window: {tooltip.window_text}",
        ]
        if tooltip.zones:
            lines.append("Zones: " + ", ".join(tooltip.zones))
        return lines

    lines = [tooltip.description] if tooltip.description else []
    if tooltip.annotation_type:
        lines.append(f"Type: {tooltip.annotation_type}")
    return lines
