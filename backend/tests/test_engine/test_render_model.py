"""Tests for the render-model builder."""

from app.engine.config import LandscapeConfig
from app.engine.render_model import DEFAULT_PLACEHOLDER, RenderModelBuilder, build_render_model
from app.engine.templates import ZONE_DISCLAIMER
from app.models.theme import ChartTheme
from tests.conftest import CORNER_POINTS, make_point, make_response


def _team_response():
    return make_response(
        [make_point("team-a", 10, 20, "Team A"), make_point("team-b", 30, 40, "Team B")]
    )


def test_team_scope_focus_and_labeled_background():
    model = build_render_model(_team_response(), "team", ["team-a"])
    assert model.status == "ready"
    assert [d.id for d in model.focus.data] == ["team-a"]
    assert [d.id for d in model.background.data] == ["team-b"]
    assert model.focus.data[0].label == "Team A"
    assert model.background.show_labels is True
    assert model.background.data[0].label == "Team B"
    # background dims when something is in focus
    assert model.background.opacity == 0.35
    assert model.background.symbol_size == 8
    assert model.focus.symbol_size == 14


def test_org_scope_background_unlabeled():
    model = build_render_model(_team_response(), "org", ["team-a"])
    assert model.background.show_labels is False
    assert model.background.data[0].label is None


def test_no_focus_background_is_full_strength():
    theme = ChartTheme()
    model = build_render_model(_team_response(), "org", theme=theme)
    assert model.focus.data == []
    assert model.background.opacity == 1.0
    assert model.background.color == theme.color(0)
    assert model.background.symbol_size == 10


def test_person_scope_never_leaks_other_identities(people_response):
    model = build_render_model(people_response, "person", ["bravo"])
    assert model.point_ids == ["bravo"]
    payload = model.model_dump_json()
    for other in ("Alpha", "Charlie", "alpha", "charlie"):
        assert other not in payload
    assert "Bravo" not in payload
    assert model.focus.data[0].label == "You"
    assert model.focus.data[0].tooltip.title == "Your position"
    assert [t.name for t in model.trajectories] == ["You"]


def test_person_scope_keeps_cohort_zones_without_other_identities():
    model = build_render_model(make_response(CORNER_POINTS), "person", ["stable"])
    assert model.point_ids == ["stable"]
    assert model.zone_overlay is not None
    assert len([r for r in model.regions if r.kind == "zone"]) == 4
    assert model.zone_overlay == build_render_model(make_response(CORNER_POINTS), "org").zone_overlay
    assert model.focus.data[0].tooltip.zones == ["Stability-Dominant Zone"]
    payload = model.model_dump_json()
    for other in ("Strained Team", "Expanding Team", "Constrained Team"):
        assert other not in payload
    assert "Stable Team" not in payload


def test_person_scope_ambiguous_without_focus_renders_nothing(people_response):
    model = build_render_model(people_response, "person")
    assert model.point_ids == []
    assert model.trajectories == []


def test_person_scope_single_candidate_without_focus():
    model = build_render_model(make_response([make_point("me", 1, 2, "Me")]), "person")
    assert model.point_ids == ["me"]
    assert model.focus.data[0].label == "You"


def test_trajectories_follow_focus(people_response):
    model = build_render_model(people_response, "team", ["charlie"])
    assert [t.point_id for t in model.trajectories] == ["charlie"]
    trajectory = model.trajectories[0]
    assert trajectory.name == "Charlie"
    assert [s.value for s in trajectory.data] == [(2.5, 3.5), (3, 4)]
    assert trajectory.data[0].window == "2023-12-15"


def test_trajectories_for_background_without_focus(people_response):
    theme = ChartTheme()
    model = build_render_model(people_response, "org", theme=theme)
    assert [t.point_id for t in model.trajectories] == ["alpha", "bravo", "charlie"]
    assert [t.color for t in model.trajectories] == [theme.color(2), theme.color(3), theme.color(4)]


def test_single_step_trajectory_not_drawn():
    point = make_point("solo", 1, 1, trajectory=[{"x": 1, "y": 1}, {"x": "bad", "y": 2}])
    model = build_render_model(make_response([point, make_point("other", 2, 2)]), "org")
    assert model.trajectories == []


def test_non_finite_points_dropped_from_every_series():
    points = [make_point("a", 1, 1), make_point("b", "NaN", 2), make_point("c", 2, 3)]
    model = build_render_model(make_response(points), "org")
    assert sorted(model.point_ids) == ["a", "c"]
    assert model.dropped_points == 1


def test_missing_window_uses_placeholder():
    point = make_point("a", 1, 1, window_start=None, window_end=None)
    model = build_render_model(make_response([point, make_point("b", 2, 2)]), "org")
    tooltip = next(d.tooltip for d in model.background.data if d.id == "a")
    assert tooltip.window_text == "Window unavailable"
    assert tooltip.window_days is None


def test_missing_response_is_unavailable():
    model = build_render_model(None)
    assert model.status == "unavailable"
    assert model.placeholder == DEFAULT_PLACEHOLDER
    assert model.point_ids == []


def test_empty_points_keep_axes():
    model = build_render_model(make_response([]), placeholder="Nothing to show")
    assert model.status == "unavailable"
    assert model.placeholder == "Nothing to show"
    assert model.x_axis.name == "Churn (%)"
    assert model.y_axis.metric == "throughput"


def test_regions_list_annotations_then_zones():
    annotations = [{"type": "incident", "description": "Outage", "x_range": [0, 10], "y_range": [0, 30]}]
    model = build_render_model(make_response(CORNER_POINTS, annotations=annotations), "org")
    assert [r.id for r in model.regions] == [
        "annotation:0",
        "zone:stability-dominant",
        "zone:expansion-pressure",
        "zone:coordination-pressure",
        "zone:constrained-underutilized",
    ]
    zone_regions = [r for r in model.regions if r.kind == "zone"]
    assert len(zone_regions) == 4
    assert all(r.tooltip.disclaimer == ZONE_DISCLAIMER for r in zone_regions)
    annotation = model.regions[0]
    assert annotation.tooltip.kind == "annotation"
    assert annotation.label == "Outage"
    assert model.lens is not None


def test_point_tooltips_list_their_zones():
    model = build_render_model(make_response(CORNER_POINTS), "org")
    stable = next(d for d in model.background.data if d.id == "stable")
    assert stable.tooltip.zones == ["Stability-Dominant Zone"]


def test_build_is_idempotent(corner_response):
    builder = RenderModelBuilder()
    first = builder.build(corner_response, "team", ["stable"])
    second = builder.build(corner_response, "team", ["stable"])
    assert first.model_dump_json() == second.model_dump_json()


def test_every_entity_rendered_once():
    points = [make_point("a", 1, 1), make_point("a", 5, 5), make_point("b", 2, 2)]
    model = build_render_model(make_response(points), "team", ["a"])
    assert sorted(model.point_ids) == ["a", "b"]
    assert model.focus.data[0].value == (1, 1)


def test_custom_theme_and_config_are_applied():
    theme = ChartTheme(accent1="#ff0000", muted="#999999")
    config = LandscapeConfig(focus_symbol_size=20, background_focused_opacity=0.2)
    model = RenderModelBuilder(theme=theme, config=config).build(_team_response(), "team", ["team-a"])
    assert model.focus.color == "#ff0000"
    assert model.focus.symbol_size == 20
    assert model.background.color == "#999999"
    assert model.background.opacity == 0.2


def test_axes_carry_theme_colors(corner_response):
    theme = ChartTheme(grid="#111111", muted="#222222")
    model = build_render_model(corner_response, theme=theme)
    for axis in (model.x_axis, model.y_axis):
        assert axis.line_color == "#111111"
        assert axis.split_line_color == "#111111"
        assert axis.label_color == "#222222"
    assert model.y_axis.name == "Throughput (items)"
