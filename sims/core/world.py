"""Mutable authoritative world state and the per-tick update."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sims.core.entities import Entity, Slug
from sims.core.enums import Direction, Domain
from sims.core.models import PreciseCoordinates
from sims.core.registry import EntityRegistry
from sims.systems.rng import DeterministicRNG
from sims.utils.event_log import SimEvent

if TYPE_CHECKING:
    from sims.config import SimulationConfig

logger = logging.getLogger(__name__)


class World:
    """The single source of truth for the simulation.

    Starts Uninitialized (zero bounds); the first ``resize`` makes it Active.
    Owns the registry, the bounds, the tick counter and the RNG; nothing
    else mutates them.
    """

    __slots__ = (
        "age",
        "width",
        "height",
        "entities",
        "_config",
        "_rng",
        "_next_entity_id",
        "_initialized",
        "_tick_events",
        "total_spawned",
        "total_expired",
        "total_culled",
    )

    def __init__(self, config: SimulationConfig) -> None:
        self._config = config
        self._rng = DeterministicRNG(config.world_seed)
        self.age: int = 0
        self.width: int = 0
        self.height: int = 0
        self.entities: EntityRegistry[Entity] = EntityRegistry()
        self._next_entity_id: int = 1
        self._initialized = False
        self._tick_events: list[SimEvent] = []
        self.total_spawned: int = 0
        self.total_expired: int = 0
        self.total_culled: int = 0

    @property
    def seed(self) -> int:
        return self._rng.seed

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def tick_events(self) -> list[SimEvent]:
        """Events emitted by the most recent ``step`` or ``resize``."""
        return self._tick_events

    def resize(self, width: int, height: int) -> None:
        """Set the bounds. Entities now outside are culled on the next step."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid world size {width}x{height}")
        self.width, self.height = width, height
        self._initialized = True
        self._tick_events = [SimEvent(self.age, "resize", f"World resized to {width}x{height}")]
        logger.info("World resized to %dx%d at tick %d", width, height, self.age)

    def in_bounds(self, entity: Entity) -> bool:
        return entity.discrete_position().in_bounds(self.width, self.height)

    def add_entity(self, entity: Entity) -> None:
        if entity.id == 0:
            entity.id = self._allocate_entity_id()
        self.entities.append(entity)

    def step(self) -> None:
        """Advance the world by one tick: age, advance/cull, then maybe spawn."""
        self._tick_events = []
        self.age += 1
        self.entities.for_each_removable(self._should_remove)
        self._maybe_spawn()

    # -- internals --

    def _should_remove(self, entity: Entity) -> bool:
        if not entity.advance():
            self.total_expired += 1
            self._emit("expire", f"{entity.kind} #{entity.id} expired", entity)
            return True
        if not self.in_bounds(entity):
            self.total_culled += 1
            self._emit("cull", f"{entity.kind} #{entity.id} left the world at {entity.discrete_position()!r}", entity)
            return True
        return False

    def _maybe_spawn(self) -> None:
        cfg = self._config
        roll = self._rng.next_int(Domain.SPAWN_ROLL, 0, self.age, 0, cfg.spawn_chance - 1)
        if roll != 0 or self.width <= 0 or self.height <= 0:
            return

        eid = self._allocate_entity_id()
        x = self._rng.next_int(Domain.SPAWN_X, eid, self.age, 0, self.width - 1)
        y = self._rng.next_int(Domain.SPAWN_Y, eid, self.age, 0, self.height - 1)
        direction = Direction(self._rng.next_int(Domain.SPAWN_DIRECTION, eid, self.age, 0, len(Direction) - 1))
        slug = Slug(
            PreciseCoordinates(float(x), float(y)),
            direction,
            id=eid,
            speed=cfg.slug_speed,
            age_threshold=cfg.slug_age_threshold,
            symbol=cfg.slug_symbol,
        )
        self.entities.append(slug)
        self.total_spawned += 1
        self._emit("spawn", f"slug #{eid} spawned at ({x}, {y}) heading {direction.name}", slug)
        logger.debug("Tick %d: spawned %r", self.age, slug)

    def _allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def _emit(self, category: str, message: str, entity: Entity) -> None:
        self._tick_events.append(SimEvent(self.age, category, message, (entity.id,)))
