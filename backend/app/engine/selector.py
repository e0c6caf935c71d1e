"""PointSelector: partition the cohort into focus and background.

Person scope is an isolation boundary, not a styling choice: the output
holds only the viewer's own point(s) and nothing else. Every other scope
keeps the whole cohort, split by the explicit focus IDs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from app.models.quadrant import QuadrantPoint

logger = logging.getLogger(__name__)

ScopeType = Literal["org", "team", "repo", "person"]

_SCOPE_ALIASES: dict[str, ScopeType] = {
    "org": "org",
    "team": "team",
    "repo": "repo",
    "person": "person",
    "developer": "person",
}


def scope_type_from_level(level: str | None) -> ScopeType:
    """Map a filter scope level onto a render scope. Unknown levels render as org."""
    return _SCOPE_ALIASES.get((level or "").lower(), "org")


@dataclass
class PointSelection:
    scope: ScopeType
    focus: list[QuadrantPoint] = field(default_factory=list)
    background: list[QuadrantPoint] = field(default_factory=list)
    # Team scope labels background points for orientation.
    label_background: bool = False
    dropped: int = 0

    @property
    def is_person_scope(self) -> bool:
        return self.scope == "person"

    @property
    def has_focus(self) -> bool:
        return bool(self.focus)

    @property
    def priority(self) -> list[QuadrantPoint]:
        """The group trajectories are drawn for: focus if any, else background."""
        return self.focus if self.focus else self.background

    @property
    def visible(self) -> list[QuadrantPoint]:
        return self.background + self.focus

    def find(self, entity_id: str) -> QuadrantPoint | None:
        for point in self.visible:
            if point.entity_id == entity_id:
                return point
        return None


def _valid_unique(points: Iterable[QuadrantPoint]) -> tuple[list[QuadrantPoint], int]:
    seen: set[str] = set()
    kept: list[QuadrantPoint] = []
    dropped = 0
    for point in points:
        if not point.is_plottable:
            logger.debug("Dropping point %s: non-finite coordinates", point.entity_id)
            dropped += 1
            continue
        if point.entity_id in seen:
            logger.debug("Dropping duplicate point for %s", point.entity_id)
            dropped += 1
            continue
        seen.add(point.entity_id)
        kept.append(point)
    return kept, dropped


def select_points(
    points: Sequence[QuadrantPoint],
    scope: ScopeType = "org",
    focus_ids: Iterable[str] | None = None,
) -> PointSelection:
    candidates, dropped = _valid_unique(points)
    focus_set = {fid for fid in (focus_ids or []) if fid}

    if scope == "person":
        if focus_set:
            focus = [p for p in candidates if p.entity_id in focus_set]
        elif len(candidates) == 1:
            # Person-scoped queries return the viewer alone; accept the sole point.
            focus = list(candidates)
        else:
            if candidates:
                logger.warning(
                    "Person scope without focus id and %d candidate points; rendering none",
                    len(candidates),
                )
            focus = []
        return PointSelection(scope=scope, focus=focus, dropped=dropped)

    label_background = scope == "team"
    if not focus_set:
        return PointSelection(
            scope=scope,
            background=candidates,
            label_background=label_background,
            dropped=dropped,
        )

    focus = [p for p in candidates if p.entity_id in focus_set]
    background = [p for p in candidates if p.entity_id not in focus_set]
    return PointSelection(
        scope=scope,
        focus=focus,
        background=background,
        label_background=label_background,
        dropped=dropped,
    )
