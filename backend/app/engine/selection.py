"""SelectionController: the one selected point and the links derived from it.

Lifecycle:
  set_response(new snapshot)  → selection cleared, even if the same entity reappears
  select(point) / select_id() → replaces any prior selection, returns a SelectionEvent
  clear()                     → nothing selected

Only points visible under the current scope can be selected; a person-scoped
view never resolves another identity from a click. No network calls here:
the links are handed to an external router.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from app.engine.selector import PointSelection, ScopeType, select_points
from app.engine.templates import CHURN
from app.models.filters import MetricFilter
from app.models.quadrant import QuadrantAxes, QuadrantPoint, QuadrantResponse
from app.models.selection import SelectionEvent, SelectionLinks
from app.utils.urls import build_explore_url, with_filter_param

logger = logging.getLogger(__name__)

# Metrics computed from code changes rather than work items.
CODE_METRICS = frozenset({CHURN})


@dataclass(frozen=True)
class NavigationPaths:
    explore: str = "/explore"
    code_heatmap: str = "/code"
    work_heatmap: str = "/work"
    pr_drilldown_api: str = "/api/v1/drilldown/prs"
    issue_drilldown_api: str = "/api/v1/drilldown/issues"


def _explained_metric(evidence_link: str) -> str | None:
    values = parse_qs(urlsplit(evidence_link).query).get("metric")
    return values[0] if values else None


def heatmap_path(axes: QuadrantAxes, paths: NavigationPaths | None = None) -> str:
    """Code view when churn is on either axis, work view otherwise."""
    paths = paths or NavigationPaths()
    if any(metric in CODE_METRICS for metric in axes.metrics):
        return paths.code_heatmap
    return paths.work_heatmap


def derive_links(
    point: QuadrantPoint,
    axes: QuadrantAxes,
    filters: MetricFilter | None = None,
    paths: NavigationPaths | None = None,
) -> SelectionLinks:
    filters = filters or MetricFilter()
    paths = paths or NavigationPaths()

    if point.evidence_link:
        explain = build_explore_url(filters, api=point.evidence_link, explore_path=paths.explore)
    else:
        explain = build_explore_url(filters, metric=axes.y.metric, explore_path=paths.explore)

    evidence = None
    if point.evidence_link:
        metric = _explained_metric(point.evidence_link) or axes.y.metric
        drilldown = paths.pr_drilldown_api if metric in CODE_METRICS else paths.issue_drilldown_api
        evidence = build_explore_url(filters, metric=metric, api=drilldown, explore_path=paths.explore)

    return SelectionLinks(
        explain=explain,
        heatmap=with_filter_param(heatmap_path(axes, paths), filters),
        evidence=evidence,
    )


class SelectionController:
    """Owns the currently selected point for one page view."""

    def __init__(
        self,
        filters: MetricFilter | None = None,
        paths: NavigationPaths | None = None,
    ) -> None:
        self.filters = filters or MetricFilter()
        self.paths = paths or NavigationPaths()
        self._response: QuadrantResponse | None = None
        self._visible: PointSelection | None = None
        self._selected: QuadrantPoint | None = None

    @property
    def response(self) -> QuadrantResponse | None:
        return self._response

    @property
    def selected(self) -> QuadrantPoint | None:
        return self._selected

    def set_response(
        self,
        response: QuadrantResponse | None,
        scope: ScopeType = "org",
        focus_ids: Iterable[str] | None = None,
    ) -> None:
        if response is not self._response:
            self._selected = None
        self._response = response
        self._visible = select_points(response.points, scope, focus_ids) if response else None
        if self._selected is not None and self._find(self._selected.entity_id) is None:
            self._selected = None

    def set_filters(self, filters: MetricFilter) -> None:
        self.filters = filters

    def clear(self) -> None:
        self._selected = None

    def select(self, point: QuadrantPoint) -> SelectionEvent | None:
        visible = self._find(point.entity_id)
        if visible is None:
            logger.debug("Ignoring selection of %s: not visible in current view", point.entity_id)
            return None
        self._selected = visible
        return self.event()

    def select_id(self, entity_id: str) -> SelectionEvent | None:
        point = self._find(entity_id)
        if point is None:
            logger.debug("Ignoring selection of %s: not visible in current view", entity_id)
            return None
        return self.select(point)

    def event(self) -> SelectionEvent | None:
        if self._selected is None or self._response is None:
            return None
        links = derive_links(self._selected, self._response.axes, self.filters, self.paths)
        return SelectionEvent(point=self._selected, links=links)

    def _find(self, entity_id: str) -> QuadrantPoint | None:
        if self._visible is None:
            return None
        return self._visible.find(entity_id)
