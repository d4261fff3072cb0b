"""Core data models: Coordinates, PreciseCoordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sims.core.enums import Direction


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (4.5 -> 5, -4.5 -> -5).

    Used for both bounds checks and rendering so the two always agree.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Immutable 2D integer grid cell."""

    x: int = 0
    y: int = 0

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class PreciseCoordinates:
    """Immutable 2D continuous position, the authoritative location for motion."""

    x: float = 0.0
    y: float = 0.0

    def move(self, direction: Direction, distance: float) -> PreciseCoordinates:
        dx, dy = DIRECTION_OFFSETS[direction]
        return PreciseCoordinates(self.x + dx * distance, self.y + dy * distance)

    def rounded(self) -> Coordinates:
        return Coordinates(round_half_away(self.x), round_half_away(self.y))

    def __repr__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


# Unit displacement per Direction; North decreases y
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}
