"""Zone template library: static interpretive text for the churn x throughput lens.

Templates are descriptive, not evaluative: each names a pattern, what it
typically signals, and questions worth asking. Nothing here is computed
from data; ranges are attached later by the classifier.

Templates are stored in an ID-keyed map and referenced by ID from the
definition, so a malformed definition (unknown or repeated IDs) can be
resolved without loops or duplicates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.models.quadrant import QuadrantAxes
from app.models.zones import LensInfo

logger = logging.getLogger(__name__)

CHURN = "churn"
THROUGHPUT = "throughput"

LOW = "low"
HIGH = "high"


@dataclass(frozen=True)
class ZoneTemplate:
    id: str
    label: str
    description: str
    levels: dict[str, str]
    signals: tuple[str, ...]
    investigations: tuple[str, ...]
    color: str


@dataclass(frozen=True)
class QuadrantDefinition:
    id: str
    label: str
    metrics: frozenset[str]
    lens: LensInfo
    zone_ids: tuple[str, ...] = field(default_factory=tuple)


SHARED_NOTES = (
    "Coordination across lenses is expected; views are complementary, not contradictory.",
    "This lens highlights a dominant pressure, not the whole system.",
)

ZONE_DISCLAIMER = (
    "Zones describe a pattern, not a conclusion. "
    "Validate with further evidence before acting."
)


_ZONE_TEMPLATES: dict[str, ZoneTemplate] = {
    t.id: t
    for t in (
        ZoneTemplate(
            id="stability-dominant",
            label="Stability-Dominant Zone",
            description="Stability dominates while delivery remains steady.",
            levels={CHURN: LOW, THROUGHPUT: HIGH},
            signals=("Low churn", "Steady throughput", "Few rework loops"),
            investigations=(
                "Is stability intentional or a pause in change?",
                "Are architectural risks building silently?",
            ),
            color="rgba(34, 197, 94, 0.12)",
        ),
        ZoneTemplate(
            id="expansion-pressure",
            label="Expansion Pressure Zone",
            description="Expansion and steady delivery coexist as change and delivery remain high.",
            levels={CHURN: HIGH, THROUGHPUT: HIGH},
            signals=("Rising churn", "Strong throughput", "Parallel refactors"),
            investigations=(
                "Is churn planned or reactive rework?",
                "Are dependencies discovered late in cycles?",
            ),
            color="rgba(59, 130, 246, 0.12)",
        ),
        ZoneTemplate(
            id="coordination-pressure",
            label="Saturation / Coordination Pressure Zone",
            description="High change with lagging delivery suggests coordination pressure.",
            levels={CHURN: HIGH, THROUGHPUT: LOW},
            signals=("High churn", "Flat throughput", "Handoff delays"),
            investigations=(
                "Are reviews slowing down conversion?",
                "Is rework discovered late in the window?",
            ),
            color="rgba(244, 63, 94, 0.12)",
        ),
        ZoneTemplate(
            id="constrained-underutilized",
            label="Constrained / Underutilized Zone",
            description="Flow is limited by potential constraints or intentional pauses.",
            levels={CHURN: LOW, THROUGHPUT: LOW},
            signals=("Low churn", "Low throughput", "Blocked intake"),
            investigations=(
                "Are external constraints limiting delivery?",
                "Is demand muted or scope unclear?",
            ),
            color="rgba(249, 115, 22, 0.12)",
        ),
    )
}


CHURN_THROUGHPUT = QuadrantDefinition(
    id="churn-throughput",
    label="Churn x Throughput",
    metrics=frozenset({CHURN, THROUGHPUT}),
    lens=LensInfo(
        id="churn-throughput",
        label="Churn x Throughput",
        lens="Change strategy and system stability",
        framing="This view differentiates refactor-heavy and delivery-heavy operating modes.",
        habits=[
            "Architectural evolution and platform shifts",
            "Technical debt repayment cadence",
            "Shifting product requirements or scope changes",
            "Late discovery of dependencies and rework loops",
            "Intentional stabilization periods",
        ],
        questions=[
            "Is churn intentional or reactive?",
            "Is rework discovered early or late?",
            "Does change convert into durable progress?",
        ],
        next=(
            "Use code and work heatmaps, flame diagrams, and metric explain views "
            "to see where change concentrates."
        ),
        notes=list(SHARED_NOTES),
    ),
    zone_ids=(
        "stability-dominant",
        "expansion-pressure",
        "coordination-pressure",
        "constrained-underutilized",
    ),
)


def template_count() -> int:
    return len(_ZONE_TEMPLATES)


def resolve_definition(axes: QuadrantAxes) -> QuadrantDefinition | None:
    """The definition whose metric pair is exactly the response's axes, in either order."""
    x_metric, y_metric = axes.metrics
    if x_metric == y_metric:
        return None
    if {x_metric, y_metric} == CHURN_THROUGHPUT.metrics:
        return CHURN_THROUGHPUT
    return None


def resolve_templates(
    zone_ids: tuple[str, ...],
    templates: dict[str, ZoneTemplate] | None = None,
) -> list[ZoneTemplate]:
    """Look up templates by ID in declaration order, skipping unknown and repeated IDs."""
    pool = templates if templates is not None else _ZONE_TEMPLATES
    visited: set[str] = set()
    resolved: list[ZoneTemplate] = []
    for zone_id in zone_ids:
        if zone_id in visited:
            logger.debug("Zone template %s listed twice, skipping", zone_id)
            continue
        visited.add(zone_id)
        template = pool.get(zone_id)
        if template is None:
            logger.warning("Unknown zone template %r, skipping", zone_id)
            continue
        resolved.append(template)
    return resolved


def get_lens(axes: QuadrantAxes) -> LensInfo | None:
    definition = resolve_definition(axes)
    return definition.lens if definition else None
