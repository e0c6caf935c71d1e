"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from app.models.quadrant import QuadrantResponse

CHURN_AXIS = {"metric": "churn", "label": "Churn", "unit": "%"}
THROUGHPUT_AXIS = {"metric": "throughput", "label": "Throughput", "unit": "items"}
CYCLE_AXIS = {"metric": "cycle_time", "label": "Cycle Time", "unit": "days"}

WINDOW = {"window_start": "2024-01-01", "window_end": "2024-01-14"}

# Four points, one per corner of the churn x throughput plane.
CORNER_POINTS = [
    {"entity_id": "stable", "entity_label": "Stable Team", "x": 5, "y": 90, **WINDOW},
    {"entity_id": "strained", "entity_label": "Strained Team", "x": 40, "y": 20, **WINDOW},
    {"entity_id": "expanding", "entity_label": "Expanding Team", "x": 42, "y": 85, **WINDOW},
    {"entity_id": "constrained", "entity_label": "Constrained Team", "x": 6, "y": 15, **WINDOW},
]


def make_point(entity_id: str, x: Any, y: Any, label: str | None = None, **extra: Any) -> dict[str, Any]:
    point = {
        "entity_id": entity_id,
        "entity_label": label if label is not None else entity_id.title(),
        "x": x,
        "y": y,
        **WINDOW,
        "evidence_link": "/api/v1/explain?metric=throughput",
    }
    point.update(extra)
    return point


def make_response(
    points: list[dict[str, Any]],
    x_axis: dict[str, str] | None = None,
    y_axis: dict[str, str] | None = None,
    annotations: list[dict[str, Any]] | None = None,
) -> QuadrantResponse:
    return QuadrantResponse.model_validate(
        {
            "axes": {"x": x_axis or CHURN_AXIS, "y": y_axis or THROUGHPUT_AXIS},
            "points": points,
            "annotations": annotations or [],
        }
    )


def people_points() -> list[dict[str, Any]]:
    """Three individuals, each with a two-step trajectory."""
    return [
        make_point(
            "alpha",
            1,
            2,
            "Alpha",
            trajectory=[
                {"x": 0.5, "y": 1.5, "window": "2023-12-15"},
                {"x": 1, "y": 2, "window": "2023-12-31"},
            ],
        ),
        make_point(
            "bravo",
            2,
            3,
            "Bravo",
            trajectory=[
                {"x": 1.5, "y": 2.5, "window": "2023-12-15"},
                {"x": 2, "y": 3, "window": "2023-12-31"},
            ],
        ),
        make_point(
            "charlie",
            3,
            4,
            "Charlie",
            trajectory=[
                {"x": 2.5, "y": 3.5, "window": "2023-12-15"},
                {"x": 3, "y": 4, "window": "2023-12-31"},
            ],
        ),
    ]


@pytest.fixture
def corner_response() -> QuadrantResponse:
    return make_response(CORNER_POINTS)


@pytest.fixture
def swapped_corner_response() -> QuadrantResponse:
    swapped = [{**p, "x": p["y"], "y": p["x"]} for p in CORNER_POINTS]
    return make_response(swapped, x_axis=THROUGHPUT_AXIS, y_axis=CHURN_AXIS)


@pytest.fixture
def people_response() -> QuadrantResponse:
    return make_response(people_points())
