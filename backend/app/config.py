"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

API_VERSION = "0.1.0"


class Settings(BaseSettings):
    landscape_env: str = "development"
    landscape_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Navigation targets handed to the router
    explore_path: str = "/explore"
    code_heatmap_path: str = "/code"
    work_heatmap_path: str = "/work"
    pr_drilldown_api: str = "/api/v1/drilldown/prs"
    issue_drilldown_api: str = "/api/v1/drilldown/issues"

    empty_state_text: str = "Quadrant data unavailable."

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
