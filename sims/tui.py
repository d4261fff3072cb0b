"""Curses display driver: turns terminal events into WorldLoop signals.

Window size changes become Resize, ctrl+c becomes Quit, every other key is
passed through as Key (logged and ignored by the loop). A Tick is sent each
time the configured interval has elapsed.
"""

from __future__ import annotations

import curses
import logging
import time
from typing import TYPE_CHECKING

from sims.core.world import World
from sims.engine.signals import Key, Quit, Resize, Tick
from sims.engine.world_loop import WorldLoop

if TYPE_CHECKING:
    from sims.config import SimulationConfig

logger = logging.getLogger(__name__)

_CTRL_C = 3


def signal_for_key(key: int, size: tuple[int, int]) -> object | None:
    """Map a curses key code to a signal; *size* is (height, width) of the screen."""
    if key == -1:
        return None
    if key == curses.KEY_RESIZE:
        height, width = size
        return Resize(width, height)
    if key == _CTRL_C:
        return Key("ctrl+c")
    try:
        name = curses.keyname(key).decode("ascii", "replace")
    except ValueError:
        name = str(key)
    return Key(name)


def draw(stdscr: curses.window, frame: str) -> None:
    stdscr.erase()
    for y, row in enumerate(frame.split("\n")):
        try:
            stdscr.addstr(y, 0, row)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen
            pass
    stdscr.refresh()


def run(stdscr: curses.window, config: SimulationConfig) -> None:
    curses.curs_set(0)
    curses.raw()
    stdscr.nodelay(True)
    stdscr.timeout(0)

    loop = WorldLoop(config, World(config))

    max_y, max_x = stdscr.getmaxyx()
    loop.handle(Resize(max_x, max_y))
    next_tick = time.monotonic() + config.tick_interval

    try:
        while not loop.stopped:
            try:
                key = stdscr.getch()
            except curses.error:
                key = -1

            signal = signal_for_key(key, stdscr.getmaxyx())
            if signal is not None:
                loop.handle(signal)
                if loop.stopped:
                    break

            now = time.monotonic()
            if now >= next_tick:
                loop.handle(Tick())
                next_tick = now + config.tick_interval
                draw(stdscr, loop.render())

            time.sleep(0.005)
    except KeyboardInterrupt:
        loop.handle(Quit())


def main(config: SimulationConfig) -> None:
    logger.info("----- starting simulation -----")
    curses.wrapper(run, config)
    logger.info("----- simulation ended -----")
