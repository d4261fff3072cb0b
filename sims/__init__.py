"""sims: a minimal tick-driven spatial simulation."""

__version__ = "0.1.0"
