"""Immutable frame of the world, safe to hand to other threads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sims.core.renderer import Renderer
    from sims.core.world import World


@dataclass(frozen=True, slots=True)
class EntityView:
    id: int
    kind: str
    x: int
    y: int
    age: int
    direction: str


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Read-only copy of what the display layer needs for one frame."""

    tick: int
    seed: int
    width: int
    height: int
    initialized: bool
    frame: str
    entities: tuple[EntityView, ...]
    total_spawned: int = 0
    total_expired: int = 0
    total_culled: int = 0

    @classmethod
    def from_world(cls, world: World, renderer: Renderer) -> FrameSnapshot:
        views = []
        for e in world.entities:
            p = e.discrete_position()
            direction = getattr(e, "movement_direction", None)
            views.append(EntityView(
                id=e.id,
                kind=e.kind,
                x=p.x,
                y=p.y,
                age=getattr(e, "age", 0),
                direction=direction.name if direction is not None else "",
            ))
        return cls(
            tick=world.age,
            seed=world.seed,
            width=world.width,
            height=world.height,
            initialized=world.initialized,
            frame=renderer.snapshot(),
            entities=tuple(views),
            total_spawned=world.total_spawned,
            total_expired=world.total_expired,
            total_culled=world.total_culled,
        )

    @property
    def alive_count(self) -> int:
        return len(self.entities)
