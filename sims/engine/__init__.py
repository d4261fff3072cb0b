"""Engine layer: signals and the world loop."""

from sims.engine.signals import Key, Quit, Resize, Signal, Tick
from sims.engine.world_loop import WorldLoop

__all__ = ["Key", "Quit", "Resize", "Signal", "Tick", "WorldLoop"]
