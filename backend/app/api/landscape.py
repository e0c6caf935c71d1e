"""POST /api/landscape/*: stateless quadrant rendering and selection.

Each request carries the full snapshot; everything is recomputed per call.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.config import Settings
from app.dependencies import get_navigation_paths, get_settings
from app.engine.classifier import classify_zones
from app.engine.render_model import build_render_model
from app.engine.selection import NavigationPaths, SelectionController
from app.engine.selector import scope_type_from_level
from app.models.render import QuadrantRenderModel
from app.models.requests import RenderRequest, SelectRequest, ZonesRequest
from app.models.responses import SelectResponse, ZonesResponse

router = APIRouter(prefix="/landscape")


@router.post("/render", response_model=QuadrantRenderModel)
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> QuadrantRenderModel:
    return build_render_model(
        req.data,
        scope_type_from_level(req.scope),
        req.focus_ids,
        theme=req.theme,
        placeholder=settings.empty_state_text,
    )


@router.post("/zones", response_model=ZonesResponse)
async def zones(req: ZonesRequest) -> ZonesResponse:
    return ZonesResponse(overlay=classify_zones(req.data))


@router.post("/select", response_model=SelectResponse)
async def select(
    req: SelectRequest,
    paths: NavigationPaths = Depends(get_navigation_paths),
) -> SelectResponse:
    controller = SelectionController(filters=req.filters, paths=paths)
    controller.set_response(req.data, scope_type_from_level(req.scope), req.focus_ids)
    event = controller.select_id(req.entity_id)
    return SelectResponse(selected=event is not None, event=event)
