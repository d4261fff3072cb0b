"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entity ---

class EntitySchema(BaseModel):
    id: int
    kind: str
    x: int
    y: int
    age: int
    direction: str


# --- Events ---

class EventSchema(BaseModel):
    tick: int
    category: str
    message: str
    entity_ids: list[int] = Field(default_factory=list)


# --- State ---

class WorldStateResponse(BaseModel):
    tick: int
    width: int
    height: int
    initialized: bool
    alive_count: int
    entities: list[EntitySchema]
    events: list[EventSchema] = Field(default_factory=list)


class FrameResponse(BaseModel):
    tick: int
    width: int
    height: int
    rows: list[str]


# --- Control ---

class ResizeRequest(BaseModel):
    width: int = Field(..., ge=0, le=4096)
    height: int = Field(..., ge=0, le=4096)


class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0


# --- Config ---

class SimulationConfigResponse(BaseModel):
    world_seed: int
    tick_interval: float
    spawn_chance: int
    slug_speed: float
    slug_age_threshold: int
    slug_symbol: str
    tick_rate: float


# --- Stats ---

class SimulationStats(BaseModel):
    tick: int
    alive_count: int
    total_spawned: int
    total_expired: int
    total_culled: int
    running: bool
    paused: bool
    quit: bool
