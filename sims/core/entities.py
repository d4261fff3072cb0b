"""Entity contract and the Slug variant."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sims.core.enums import Direction
from sims.core.models import Coordinates, PreciseCoordinates

SLUG_SPEED: float = 0.12
SLUG_AGE_THRESHOLD: int = 256
SLUG_SYMBOL: str = "S"


class Entity(ABC):
    """Anything the world can advance, cull and draw."""

    __slots__ = ()

    id: int = 0
    kind: str = "entity"

    @abstractmethod
    def advance(self) -> bool:
        """Mutate state for one tick. Return False once the entity should be removed."""

    @abstractmethod
    def render_symbol(self) -> str:
        ...

    @abstractmethod
    def discrete_position(self) -> Coordinates:
        ...


class Slug(Entity):
    """Crawls in one fixed direction at constant speed until it gets too old."""

    __slots__ = ("id", "age", "position", "_direction", "speed", "age_threshold", "symbol")

    kind = "slug"

    def __init__(
        self,
        position: PreciseCoordinates,
        movement_direction: Direction,
        *,
        id: int = 0,
        speed: float = SLUG_SPEED,
        age_threshold: int = SLUG_AGE_THRESHOLD,
        symbol: str = SLUG_SYMBOL,
    ) -> None:
        self.id = id
        self.age: int = 0
        self.position = position
        self._direction = Direction(movement_direction)
        self.speed = speed
        self.age_threshold = age_threshold
        self.symbol = symbol

    @property
    def movement_direction(self) -> Direction:
        return self._direction

    @property
    def expired(self) -> bool:
        return self.age > self.age_threshold

    def advance(self) -> bool:
        self.age += 1
        if self.expired:
            return False
        self.position = self.position.move(self._direction, self.speed)
        return True

    def render_symbol(self) -> str:
        return self.symbol

    def discrete_position(self) -> Coordinates:
        return self.position.rounded()

    def __repr__(self) -> str:
        return f"Slug(#{self.id} {self.position!r} {self._direction.name} age={self.age})"
