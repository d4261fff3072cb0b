"""EngineManager: runs the WorldLoop's tick clock on a background thread.

Every signal (clock ticks from the engine thread, resizes and keys from API
handlers) goes through ``send``, which holds one lock while the WorldLoop
handles it. Signals are therefore processed one at a time in arrival order,
and readers only ever see the atomically-swapped immutable FrameSnapshot.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING

from sims.core.snapshot import FrameSnapshot
from sims.core.world import World
from sims.engine.signals import Key, Quit, Resize, Tick
from sims.engine.world_loop import WorldLoop
from sims.utils.event_log import EventLog

if TYPE_CHECKING:
    from sims.config import SimulationConfig

logger = logging.getLogger(__name__)


class EngineManager:
    """Manages the simulation lifecycle on a background thread.

    Provides thread-safe access to:
      - latest snapshot (atomic reference swap)
      - event log (lock-guarded ring buffer)
      - control commands (start / pause / resume / step / reset / quit)
    """

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self._tick_rate: float = 0.1
        self.tick_rate = config.tick_interval

        self._loop: WorldLoop | None = None
        self._last_size: tuple[int, int] | None = None

        # Thread-safe shared state
        self._signal_lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot: FrameSnapshot | None = None
        self._event_log = EventLog()

        # Control
        self._thread: threading.Thread | None = None
        self._running = threading.Event()
        self._paused = threading.Event()
        self._stop_requested = threading.Event()

        self._build()

    # -- public properties --

    @property
    def running(self) -> bool:
        return self._running.is_set()

    @property
    def paused(self) -> bool:
        return self._paused.is_set()

    @property
    def quit(self) -> bool:
        return self._loop is not None and self._loop.stopped

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @tick_rate.setter
    def tick_rate(self, value: float) -> None:
        self._tick_rate = max(0.01, min(value, 2.0))

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # -- snapshot access --

    def get_snapshot(self) -> FrameSnapshot | None:
        with self._snapshot_lock:
            return self._latest_snapshot

    # -- signals --

    def send(self, signal: object) -> bool:
        """Hand one signal to the WorldLoop and publish the resulting frame.

        Returns False once the loop has quit.
        """
        with self._signal_lock:
            keep_going = self._handle_locked(signal)
        if not keep_going:
            self._running.clear()
        return keep_going

    def resize(self, width: int, height: int) -> None:
        self._last_size = (width, height)
        self.send(Resize(width, height))

    def key(self, name: str) -> bool:
        return self.send(Key(name))

    def step(self) -> None:
        """Execute exactly one tick on the caller's thread (pauses the clock).

        The pause flag is set before the lock is taken and the clock re-checks
        it under the lock, so no clock Tick can slip in after this one.
        """
        if not self._paused.is_set():
            self.pause()
        self.send(Tick())

    # -- lifecycle --

    def start(self) -> None:
        if self._running.is_set() or self.quit:
            return
        self._stop_requested.clear()
        self._paused.clear()
        self._running.set()
        self._thread = threading.Thread(target=self._run_loop, name="engine-loop", daemon=True)
        self._thread.start()
        logger.info("EngineManager started (tick_rate=%.3fs)", self._tick_rate)

    def pause(self) -> None:
        self._paused.set()
        logger.info("EngineManager paused at tick %d", self._current_tick())

    def resume(self) -> None:
        self._paused.clear()
        logger.info("EngineManager resumed at tick %d", self._current_tick())

    def stop(self) -> None:
        self._stop_requested.set()
        self._paused.clear()
        self._running.clear()
        if self._thread and self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=5.0)
        logger.info("EngineManager stopped.")

    def shutdown(self) -> None:
        """Deliver a Quit signal and stop the clock."""
        if not self.quit:
            self.send(Quit())
        self.stop()

    def reset(self) -> None:
        """Stop and rebuild the world from config, leaving the clock stopped.

        The last known display size is re-applied to the fresh world.
        """
        self.stop()
        self._event_log.clear()
        self._build()
        if self._last_size is not None:
            self.send(Resize(*self._last_size))
        logger.info("EngineManager reset.")

    # -- internals --

    def _build(self) -> None:
        """Construct a fresh World and WorldLoop from config."""
        world = World(self.config)
        self._loop = WorldLoop(self.config, world)
        snap = self._loop.create_snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap

    def _run_loop(self) -> None:
        """Background thread main loop: one Tick per tick_rate seconds."""
        logger.info("Engine thread started.")

        try:
            while not self._stop_requested.is_set():
                if self._paused.is_set():
                    time.sleep(0.01)
                    continue

                if not self._clock_tick():
                    logger.info("Simulation ended at tick %d.", self._current_tick())
                    break

                time.sleep(self._tick_rate)
        except Exception:
            logger.exception("Engine thread crashed at tick %d", self._current_tick())
        finally:
            self._running.clear()
            logger.info("Engine thread exited.")

    def _clock_tick(self) -> bool:
        """Deliver one clock Tick unless a pause landed while waiting for the lock."""
        with self._signal_lock:
            if self._paused.is_set():
                return True
            keep_going = self._handle_locked(Tick())
        if not keep_going:
            self._running.clear()
        return keep_going

    def _handle_locked(self, signal: object) -> bool:
        """Handle *signal* and publish; the caller holds ``_signal_lock``."""
        assert self._loop is not None
        keep_going = self._loop.handle(signal)
        self._publish_snapshot_and_events()
        return keep_going

    def _publish_snapshot_and_events(self) -> None:
        """Swap snapshot + push events from the last handled signal."""
        assert self._loop is not None
        snap = self._loop.create_snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap

        events = self._loop.tick_events
        if events:
            self._event_log.append_many(events)

    def _current_tick(self) -> int:
        if self._loop:
            return self._loop.world.age
        return 0
