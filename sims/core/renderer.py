"""Rasterizes live entities onto a fixed-size character grid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sims.core.entities import Entity
    from sims.core.world import World

RENDER_EMPTY = " "
RENDER_NEWLINE = "\n"
RENDER_PLACEHOLDER = "not initialized"


class Renderer:
    """Builds the text frame for a World.

    Rows are joined with a newline; the last row carries no terminator.
    Two entities on one cell: the later one in registry order wins.
    """

    __slots__ = ("_world", "_empty", "_placeholder")

    def __init__(
        self,
        world: World,
        empty: str = RENDER_EMPTY,
        placeholder: str = RENDER_PLACEHOLDER,
    ) -> None:
        self._world = world
        self._empty = empty
        self._placeholder = placeholder

    def canvas(self) -> list[list[str]] | None:
        """Return the row-major cell grid, or None before the first resize."""
        world = self._world
        if not world.initialized:
            return None

        cells = [[self._empty] * world.width for _ in range(world.height)]

        def _draw(entity: Entity) -> None:
            p = entity.discrete_position()
            # Only possible between a shrinking resize and the next tick
            if p.in_bounds(world.width, world.height):
                cells[p.y][p.x] = entity.render_symbol()

        world.entities.for_each(_draw)
        return cells

    def snapshot(self) -> str:
        cells = self.canvas()
        if cells is None:
            return self._placeholder
        return RENDER_NEWLINE.join("".join(row) for row in cells)
