"""Domain-separated deterministic RNG using xxhash.

The outcome of tick T depends ONLY on WorldSeed + state at T-1.

Formula: RNG_Value = Hash(WorldSeed, Domain, Key, Tick)
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

import xxhash

if TYPE_CHECKING:
    from sims.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, tick), so replaying
    the same seed yields bit-identical draws.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        if not -(1 << 63) <= seed < (1 << 63):
            raise ValueError(f"Seed {seed} does not fit in a signed 64-bit integer")
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, tick: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, tick)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, tick: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, tick) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, tick: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, tick)
        return low + int(f * (high - low + 1))
