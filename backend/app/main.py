"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import API_VERSION, settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.landscape_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Landscape",
        description="Operating-mode classification and quadrant render models for engineering metrics",
        version=API_VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    from app.api.router import api_router

    app.include_router(api_router)
    logger.info("Landscape API ready (env=%s, origins=%s)", settings.landscape_env, settings.cors_origins)

    return app


app = create_app()
