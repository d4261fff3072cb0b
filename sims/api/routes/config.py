"""GET /api/v1/config — expose simulation configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from sims.api.dependencies import get_engine_manager
from sims.api.engine_manager import EngineManager
from sims.api.schemas import SimulationConfigResponse

router = APIRouter()


@router.get("/config", response_model=SimulationConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationConfigResponse:
    cfg = manager.config
    return SimulationConfigResponse(
        world_seed=cfg.world_seed,
        tick_interval=cfg.tick_interval,
        spawn_chance=cfg.spawn_chance,
        slug_speed=cfg.slug_speed,
        slug_age_threshold=cfg.slug_age_threshold,
        slug_symbol=cfg.slug_symbol,
        tick_rate=manager.tick_rate,
    )
