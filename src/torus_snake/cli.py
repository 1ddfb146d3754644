"""Console driver: tick a game on a fixed cadence and print each frame."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from torus_snake.config import GameConfig
from torus_snake.engine import GameEngine

logger = logging.getLogger(__name__)

_CLEAR_SCREEN = "\033[2J\033[H"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="torus-snake",
        description="Wrap-around snake simulation on the console.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    game_opts = argparse.ArgumentParser(add_help=False)
    game_opts.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    game_opts.add_argument("--width", type=int, default=None)
    game_opts.add_argument("--height", type=int, default=None)
    game_opts.add_argument("--seed", type=int, default=None)
    game_opts.add_argument("--initial-growth", type=int, default=None)

    # --- play ---
    play_p = sub.add_parser(
        "play", parents=[game_opts], help="Run the game on the console.",
    )
    play_p.add_argument("--tick-rate-ms", type=int, default=None)
    play_p.add_argument(
        "--ticks", type=int, default=100,
        help="Number of ticks to run; 0 runs until interrupted.",
    )
    play_p.add_argument(
        "--no-clear", action="store_true",
        help="Do not clear the console between frames.",
    )

    # --- frame ---
    frame_p = sub.add_parser(
        "frame", parents=[game_opts], help="Print a single frame.",
    )
    frame_p.add_argument(
        "--ticks", type=int, default=0,
        help="Ticks to advance before printing.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.replace(
        board_width=args.width,
        board_height=args.height,
        seed=args.seed,
        initial_growth=args.initial_growth,
        tick_rate_ms=getattr(args, "tick_rate_ms", None),
    )


def _run_play(args: argparse.Namespace, config: GameConfig) -> int:
    engine = GameEngine(config)
    interval = engine.config.tick_rate_ms / 1000.0
    logger.info(
        "Playing on a %dx%d board.",
        engine.config.board_width, engine.config.board_height,
    )
    try:
        while args.ticks == 0 or engine.tick < args.ticks:
            state = engine.step()
            if not args.no_clear:
                sys.stdout.write(_CLEAR_SCREEN)
            print(state["frame"])  # noqa: T201
            sys.stdout.flush()
            time.sleep(interval)
    except KeyboardInterrupt:
        logger.info("Stopped after %d ticks.", engine.tick)
    return 0


def _run_frame(args: argparse.Namespace, config: GameConfig) -> int:
    engine = GameEngine(config)
    for _ in range(args.ticks):
        engine.step()
    print(engine.render())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``torus-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = _load_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    handlers = {
        "play": _run_play,
        "frame": _run_frame,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
