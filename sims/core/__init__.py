"""Core data models and world representation."""

from sims.core.entities import Entity, Slug
from sims.core.enums import Direction, Domain
from sims.core.models import Coordinates, PreciseCoordinates
from sims.core.registry import EntityRegistry
from sims.core.renderer import Renderer
from sims.core.snapshot import EntityView, FrameSnapshot
from sims.core.world import World

__all__ = [
    "Coordinates",
    "Direction",
    "Domain",
    "Entity",
    "EntityRegistry",
    "EntityView",
    "FrameSnapshot",
    "PreciseCoordinates",
    "Renderer",
    "Slug",
    "World",
]
