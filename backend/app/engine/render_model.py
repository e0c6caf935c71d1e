"""QuadrantRenderModel builder: bands, zones, selection and annotations in one model.

  response ─┬─ select_points ──── background / focus series, trajectories
            └─ classify_zones ─── zone regions ┐
  annotations ─────────────────── regions ─────┴─ overlay regions

The builder never draws and never raises on data-quality problems: an
absent or empty response becomes an "unavailable" model with a placeholder.
Zone bands always come from the whole response. Person scope limits which
identities appear (points, labels, trajectories), not the aggregate edges.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from app.engine.classifier import classify_zones
from app.engine.config import LandscapeConfig
from app.engine.selector import PointSelection, ScopeType, select_points
from app.engine.templates import get_lens
from app.engine.tooltips import PERSON_LABEL, annotation_tooltip, point_tooltip, zone_tooltip
from app.models.quadrant import QuadrantAxis, QuadrantPoint, QuadrantResponse
from app.models.render import (
    AxisSpec,
    OverlayRegion,
    PointDatum,
    PointSeries,
    QuadrantRenderModel,
    TrajectorySeries,
    TrajectoryStepDatum,
)
from app.models.theme import ChartTheme
from app.models.zones import ZoneOverlay

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Quadrant data unavailable."


class RenderModelBuilder:
    """Assembles a QuadrantRenderModel from one response snapshot."""

    def __init__(
        self,
        theme: ChartTheme | None = None,
        config: LandscapeConfig | None = None,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ) -> None:
        self.theme = theme or ChartTheme()
        self.config = config or LandscapeConfig()
        self.placeholder = placeholder

    def build(
        self,
        response: QuadrantResponse | None,
        scope: ScopeType = "org",
        focus_ids: Iterable[str] | None = None,
    ) -> QuadrantRenderModel:
        if response is None:
            return QuadrantRenderModel(status="unavailable", placeholder=self.placeholder, scope=scope)

        start = time.perf_counter()
        x_axis = self._axis_spec(response.axes.x)
        y_axis = self._axis_spec(response.axes.y)
        if not response.points:
            return QuadrantRenderModel(
                status="unavailable",
                placeholder=self.placeholder,
                scope=scope,
                x_axis=x_axis,
                y_axis=y_axis,
            )

        selection = select_points(response.points, scope, focus_ids)
        overlay = classify_zones(response, self.config)

        model = QuadrantRenderModel(
            status="ready",
            scope=scope,
            x_axis=x_axis,
            y_axis=y_axis,
            background=self._background_series(response, selection, overlay),
            focus=self._focus_series(response, selection, overlay),
            trajectories=self._trajectories(selection),
            regions=self._regions(response, overlay),
            zone_overlay=overlay,
            lens=get_lens(response.axes),
            dropped_points=selection.dropped,
        )

        logger.info(
            "Render model: %d focus, %d background, %d trajectories, %d regions in %.1fms",
            len(selection.focus),
            len(selection.background),
            len(model.trajectories),
            len(model.regions),
            (time.perf_counter() - start) * 1000,
        )
        return model

    def _axis_spec(self, axis: QuadrantAxis) -> AxisSpec:
        return AxisSpec(
            metric=axis.metric,
            name=axis.display_name,
            unit=axis.unit,
            line_color=self.theme.grid,
            label_color=self.theme.muted,
            split_line_color=self.theme.grid,
        )

    def _datum(
        self,
        point: QuadrantPoint,
        response: QuadrantResponse,
        selection: PointSelection,
        overlay: ZoneOverlay | None,
        labeled: bool,
    ) -> PointDatum:
        person = selection.is_person_scope
        label = None
        if labeled:
            label = PERSON_LABEL if person else point.display_label
        return PointDatum(
            id=point.entity_id,
            value=(point.x, point.y),
            label=label,
            tooltip=point_tooltip(
                point,
                response.axes,
                person_scope=person,
                overlay=overlay,
                config=self.config,
            ),
        )

    def _background_series(
        self,
        response: QuadrantResponse,
        selection: PointSelection,
        overlay: ZoneOverlay | None,
    ) -> PointSeries:
        cfg = self.config
        dimmed = selection.has_focus
        return PointSeries(
            id="background",
            symbol_size=cfg.background_focused_symbol_size if dimmed else cfg.background_symbol_size,
            color=self.theme.muted if dimmed else self.theme.color(0),
            opacity=cfg.background_focused_opacity if dimmed else 1.0,
            show_labels=selection.label_background,
            z=3,
            data=[
                self._datum(p, response, selection, overlay, labeled=selection.label_background)
                for p in selection.background
            ],
        )

    def _focus_series(
        self,
        response: QuadrantResponse,
        selection: PointSelection,
        overlay: ZoneOverlay | None,
    ) -> PointSeries:
        return PointSeries(
            id="focus",
            symbol_size=self.config.focus_symbol_size,
            color=self.theme.accent1,
            opacity=1.0,
            show_labels=True,
            z=4,
            data=[self._datum(p, response, selection, overlay, labeled=True) for p in selection.focus],
        )

    def _trajectories(self, selection: PointSelection) -> list[TrajectorySeries]:
        series: list[TrajectorySeries] = []
        for point in selection.priority:
            steps = [s for s in point.trajectory if s.is_plottable]
            if len(steps) < self.config.min_trajectory_steps:
                continue
            color = self.theme.color(len(series) + 2)
            series.append(
                TrajectorySeries(
                    id=f"trajectory:{point.entity_id}",
                    point_id=point.entity_id,
                    name=PERSON_LABEL if selection.is_person_scope else point.display_label,
                    color=color,
                    width=self.config.trajectory_width,
                    symbol_size=self.config.trajectory_symbol_size,
                    data=[
                        TrajectoryStepDatum(
                            value=(s.x, s.y),
                            window=s.window.isoformat() if s.window else None,
                        )
                        for s in steps
                    ],
                )
            )
        return series

    def _regions(self, response: QuadrantResponse, overlay: ZoneOverlay | None) -> list[OverlayRegion]:
        regions = [
            OverlayRegion(
                id=f"annotation:{i}",
                kind="annotation",
                label=a.description,
                x_range=a.x_range,
                y_range=a.y_range,
                color=self.config.annotation_color,
                tooltip=annotation_tooltip(a),
            )
            for i, a in enumerate(response.annotations)
        ]
        if overlay is not None:
            regions.extend(
                OverlayRegion(
                    id=f"zone:{z.id}",
                    kind="zone",
                    label=z.label,
                    x_range=z.x_range,
                    y_range=z.y_range,
                    color=z.color,
                    tooltip=zone_tooltip(z),
                )
                for z in overlay.zones
            )
        return regions


def build_render_model(
    response: QuadrantResponse | None,
    scope: ScopeType = "org",
    focus_ids: Iterable[str] | None = None,
    *,
    theme: ChartTheme | None = None,
    config: LandscapeConfig | None = None,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> QuadrantRenderModel:
    """Factory function for one-shot builds."""
    return RenderModelBuilder(theme=theme, config=config, placeholder=placeholder).build(
        response, scope, focus_ids
    )
