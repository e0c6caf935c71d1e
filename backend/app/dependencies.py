"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import Settings, settings
from app.engine.selection import NavigationPaths


def get_settings() -> Settings:
    return settings


def get_navigation_paths() -> NavigationPaths:
    return NavigationPaths(
        explore=settings.explore_path,
        code_heatmap=settings.code_heatmap_path,
        work_heatmap=settings.work_heatmap_path,
        pr_drilldown_api=settings.pr_drilldown_api,
        issue_drilldown_api=settings.issue_drilldown_api,
    )
