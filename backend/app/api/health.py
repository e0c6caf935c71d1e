"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from app.config import API_VERSION
from app.engine.templates import template_count
from app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(version=API_VERSION, zone_templates=template_count())
