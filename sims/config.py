"""Simulation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable configuration for the simulation run."""

    # World
    world_seed: int = 0
    initial_width: int = 80
    initial_height: int = 24

    # Timing
    tick_interval: float = 0.1     # seconds between ticks
    max_ticks: int = 2000          # headless CLI runs only
    autostart: bool = True         # start the tick clock when the server boots

    # Spawning
    spawn_chance: int = 32         # 1-in-N chance per tick

    # Slug
    slug_speed: float = 0.12
    slug_age_threshold: int = 256
    slug_symbol: str = "S"

    # Rendering
    render_empty: str = " "
    render_placeholder: str = "not initialized"

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None
