"""Inbound signals delivered to the WorldLoop by a host event loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Tick:
    """Advance the world by one step."""


@dataclass(frozen=True, slots=True)
class Resize:
    """Set the world bounds; the first one activates rendering."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Quit:
    """Stop handling further signals."""


@dataclass(frozen=True, slots=True)
class Key:
    """A key press from the display layer. Only ``ctrl+c`` has meaning."""

    name: str


QUIT_KEYS = frozenset({"ctrl+c"})

Signal = Tick | Resize | Quit | Key
