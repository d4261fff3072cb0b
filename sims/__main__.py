"""Entry point: ``python -m sims``.

Supports three modes:
  - ``python -m sims``            → Launch the FastAPI server (default)
  - ``python -m sims watch``      → Full-screen terminal view (curses)
  - ``python -m sims cli``        → Headless run, prints the final frame
"""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sims.config import SimulationConfig

logger = logging.getLogger(__name__)


_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _int64(text: str) -> int:
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise argparse.ArgumentTypeError(f"{text} does not fit in a signed 64-bit integer")
    return value


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"{text} must be greater than zero")
    return value


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=_int64, default=0, help="seed of the simulation")
    parser.add_argument("--speed", type=_positive_float, default=0.1,
                        help="seconds between each tick, speed of the simulation")
    parser.add_argument("--log-file", type=str, default="log", help="log file path ('' for stdout)")
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minimal tick-driven spatial simulation")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--width", type=int, default=80)
    srv.add_argument("--height", type=int, default=24)
    _add_common(srv)

    # --- Terminal mode ---
    watch = sub.add_parser("watch", help="Render the world in this terminal")
    _add_common(watch)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run headless and print the final frame")
    cli.add_argument("--ticks", type=int, default=2000)
    cli.add_argument("--width", type=int, default=80)
    cli.add_argument("--height", type=int, default=24)
    cli.add_argument("--frames", type=int, default=0, help="also print the frame every N ticks")
    _add_common(cli)

    return parser


def _config_from(args: argparse.Namespace, **extra) -> SimulationConfig:
    from sims.config import SimulationConfig

    return SimulationConfig(
        world_seed=args.seed,
        tick_interval=args.speed,
        log_level=args.log_level,
        log_file=args.log_file or None,
        **extra,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from sims.api.app import create_app
    from sims.utils.logging import setup_logging

    config = _config_from(args, initial_width=args.width, initial_height=args.height)
    setup_logging(config.log_level, config.log_file)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower(), log_config=None)


def _run_watch(args: argparse.Namespace) -> None:
    from sims import tui
    from sims.utils.logging import setup_logging

    config = _config_from(args)
    setup_logging(config.log_level, config.log_file)
    tui.main(config)


def _run_cli(args: argparse.Namespace) -> None:
    from sims.core.world import World
    from sims.engine.signals import Resize, Tick
    from sims.engine.world_loop import WorldLoop
    from sims.utils.logging import setup_logging

    config = _config_from(
        args, max_ticks=args.ticks, initial_width=args.width, initial_height=args.height,
    )
    setup_logging(config.log_level, config.log_file)

    loop = WorldLoop(config, World(config))

    def _signals():
        yield Resize(config.initial_width, config.initial_height)
        for _ in range(config.max_ticks):
            yield Tick()
            if args.frames and loop.world.age % args.frames == 0:
                print(f"--- tick {loop.world.age} ---")
                print(loop.render())

    logger.info("----- starting simulation -----")
    loop.run(_signals())
    logger.info("----- simulation ended -----")

    world = loop.world
    print(loop.render())
    print(
        f"tick={world.age} alive={len(world.entities)} spawned={world.total_spawned} "
        f"expired={world.total_expired} culled={world.total_culled}"
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])

    if args.command == "serve":
        _run_server(args)
    elif args.command == "watch":
        _run_watch(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
