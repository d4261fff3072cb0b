"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sims.api.dependencies import set_engine_manager
from sims.api.engine_manager import EngineManager
from sims.api.routes import api_router
from sims.config import SimulationConfig

logger = logging.getLogger(__name__)


def create_app(config: SimulationConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application.

    Logging is configured by the caller (``python -m sims``) before the app
    is built, so a bad log sink aborts startup before any world exists.
    """
    if config is None:
        config = SimulationConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        manager = EngineManager(_config)
        set_engine_manager(manager)
        if _config.initial_width > 0 and _config.initial_height > 0:
            manager.resize(_config.initial_width, _config.initial_height)
        if _config.autostart:
            manager.start()
        logger.info("----- starting simulation -----")
        yield
        manager.shutdown()
        set_engine_manager(None)
        logger.info("----- simulation ended -----")

    app = FastAPI(
        title="Sims",
        description=(
            "Minimal tick-driven spatial simulation — live text-grid API.\n\n"
            "## API Groups\n\n"
            "- **State** — Live world state: entities, events, rendered frame, counters\n"
            "- **Control** — Clock lifecycle (start, pause, resume, step, reset, speed) and input signals (resize, key)\n"
            "- **Config** — Read-only simulation configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Live simulation state polled by a display: entities, events, the rendered frame."},
            {"name": "Control", "description": "Tick clock controls plus the resize and key signals a display layer delivers."},
            {"name": "Config", "description": "Read-only simulation configuration parameters."},
        ],
    )

    # CORS — allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
