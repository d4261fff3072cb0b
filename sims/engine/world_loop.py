"""WorldLoop: dispatches host signals to the World, one at a time.

Signal handling:
  Tick    → World.step()
  Resize  → World.resize(width, height)
  Quit    → stop; every later signal is ignored
  Key     → ``ctrl+c`` quits, anything else is logged and ignored
  other   → logged and ignored
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from sims.core.renderer import Renderer
from sims.core.snapshot import FrameSnapshot
from sims.engine.signals import QUIT_KEYS, Key, Quit, Resize, Tick

if TYPE_CHECKING:
    from sims.config import SimulationConfig
    from sims.core.world import World
    from sims.utils.event_log import SimEvent

logger = logging.getLogger(__name__)


class WorldLoop:
    """The heartbeat of the simulation.

    Never reentrant: each signal is handled to completion before the next
    one is looked at, so a Resize that arrives between two Ticks is in
    effect for the second Tick's culling pass.
    """

    __slots__ = ("_config", "_world", "_renderer", "_stopped", "_tick_events")

    def __init__(
        self,
        config: SimulationConfig,
        world: World,
        renderer: Renderer | None = None,
    ) -> None:
        self._config = config
        self._world = world
        self._renderer = renderer or Renderer(
            world, empty=config.render_empty, placeholder=config.render_placeholder,
        )
        self._stopped = False
        self._tick_events: list[SimEvent] = []

    @property
    def world(self) -> World:
        return self._world

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def tick_events(self) -> list[SimEvent]:
        """Events emitted while handling the most recent signal."""
        return self._tick_events

    def handle(self, signal: object) -> bool:
        """Handle one signal. Returns False once the loop has been told to quit."""
        self._tick_events = []
        if self._stopped:
            logger.debug("Ignoring %r after quit", signal)
            return False

        match signal:
            case Tick():
                self._world.step()
                self._tick_events = list(self._world.tick_events)
            case Resize(width=width, height=height):
                self._world.resize(width, height)
                self._tick_events = list(self._world.tick_events)
            case Quit():
                self._quit()
            case Key(name=name) if name in QUIT_KEYS:
                self._quit()
            case Key(name=name):
                logger.info("update: [key] %s", name)
            case _:
                logger.warning("update: [%s] %r ignored", type(signal).__name__, signal)
        return not self._stopped

    def tick_once(self) -> bool:
        return self.handle(Tick())

    def render(self) -> str:
        return self._renderer.snapshot()

    def create_snapshot(self) -> FrameSnapshot:
        """Create an immutable snapshot of the current world state."""
        return FrameSnapshot.from_world(self._world, self._renderer)

    def run(self, signals: Iterable[object]) -> None:
        """Drain *signals* in order until exhausted or a quit is handled."""
        logger.info("=== Simulation started (seed=%d) ===", self._world.seed)
        for signal in signals:
            if not self.handle(signal):
                break
            if isinstance(signal, Tick) and self._world.age % 100 == 0:
                logger.info("Tick %d: %d entities alive", self._world.age, len(self._world.entities))
        logger.info("=== Simulation finished at tick %d ===", self._world.age)

    def _quit(self) -> None:
        self._stopped = True
        logger.info("Quit received at tick %d", self._world.age)
