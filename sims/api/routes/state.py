"""GET /api/v1/state, /events, /stats, /frame — dynamic world data (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from sims.api.dependencies import get_engine_manager
from sims.api.engine_manager import EngineManager
from sims.api.schemas import (
    EntitySchema,
    EventSchema,
    FrameResponse,
    SimulationStats,
    WorldStateResponse,
)

router = APIRouter()


@router.get("/state", response_model=WorldStateResponse)
def get_state(
    since_tick: int = Query(0, ge=0, description="Only return events since this tick"),
    manager: EngineManager = Depends(get_engine_manager),
) -> WorldStateResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")

    entities = [
        EntitySchema(id=e.id, kind=e.kind, x=e.x, y=e.y, age=e.age, direction=e.direction)
        for e in snapshot.entities
    ]
    events = [
        EventSchema(tick=ev.tick, category=ev.category, message=ev.message, entity_ids=list(ev.entity_ids))
        for ev in manager.event_log.since_tick(since_tick)
    ]
    return WorldStateResponse(
        tick=snapshot.tick,
        width=snapshot.width,
        height=snapshot.height,
        initialized=snapshot.initialized,
        alive_count=snapshot.alive_count,
        entities=entities,
        events=events,
    )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    count: int = Query(50, ge=1, le=2000, description="Number of most recent events"),
    manager: EngineManager = Depends(get_engine_manager),
) -> list[EventSchema]:
    return [
        EventSchema(tick=ev.tick, category=ev.category, message=ev.message, entity_ids=list(ev.entity_ids))
        for ev in manager.event_log.latest(count)
    ]


@router.get("/frame", response_class=PlainTextResponse)
def get_frame(manager: EngineManager = Depends(get_engine_manager)) -> str:
    """The rendered text grid, or the placeholder before the first resize."""
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")
    return snapshot.frame


@router.get("/frame/rows", response_model=FrameResponse)
def get_frame_rows(manager: EngineManager = Depends(get_engine_manager)) -> FrameResponse:
    snapshot = manager.get_snapshot()
    if snapshot is None or not snapshot.initialized:
        raise HTTPException(status_code=503, detail="Simulation not initialized yet.")
    rows = snapshot.frame.split("\n") if snapshot.height > 0 else []
    return FrameResponse(tick=snapshot.tick, width=snapshot.width, height=snapshot.height, rows=rows)


@router.get("/stats", response_model=SimulationStats)
def get_stats(
    manager: EngineManager = Depends(get_engine_manager),
) -> SimulationStats:
    snapshot = manager.get_snapshot()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No snapshot available yet.")

    return SimulationStats(
        tick=snapshot.tick,
        alive_count=snapshot.alive_count,
        total_spawned=snapshot.total_spawned,
        total_expired=snapshot.total_expired,
        total_culled=snapshot.total_culled,
        running=manager.running,
        paused=manager.paused,
        quit=manager.quit,
    )
