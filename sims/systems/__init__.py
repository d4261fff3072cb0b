"""Engine systems: RNG."""

from sims.systems.rng import DeterministicRNG

__all__ = ["DeterministicRNG"]
