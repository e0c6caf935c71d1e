"""Landscape quadrant engine: bands, zones, point selection, render model."""

from app.engine.bands import AxisBands, build_axis_bands
from app.engine.classifier import classify_zones, find_zone_matches
from app.engine.config import LandscapeConfig
from app.engine.render_model import RenderModelBuilder, build_render_model
from app.engine.selection import SelectionController, derive_links
from app.engine.selector import PointSelection, select_points

__all__ = [
    "AxisBands",
    "build_axis_bands",
    "classify_zones",
    "find_zone_matches",
    "LandscapeConfig",
    "RenderModelBuilder",
    "build_render_model",
    "SelectionController",
    "derive_links",
    "PointSelection",
    "select_points",
]
