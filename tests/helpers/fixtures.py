"""Shared builders for world/loop tests."""

from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sims.config import SimulationConfig
from sims.core.entities import Entity
from sims.core.models import Coordinates
from sims.core.world import World

# Spawn roll of 1 in a billion: effectively never spawns within a test run
QUIET_SPAWN_CHANCE = 1_000_000_000


def make_config(**overrides) -> SimulationConfig:
    defaults = dict(world_seed=42, spawn_chance=QUIET_SPAWN_CHANCE)
    defaults.update(overrides)
    return SimulationConfig(**defaults)


def make_world(width: int = 10, height: int = 10, **overrides) -> World:
    world = World(make_config(**overrides))
    world.resize(width, height)
    return world


class Marker(Entity):
    """Stationary entity with a fixed symbol that never expires."""

    kind = "marker"

    def __init__(self, x: int, y: int, symbol: str = "#") -> None:
        self.pos = Coordinates(x, y)
        self.symbol = symbol
        self.advanced = 0

    def advance(self) -> bool:
        self.advanced += 1
        return True

    def render_symbol(self) -> str:
        return self.symbol

    def discrete_position(self) -> Coordinates:
        return self.pos
