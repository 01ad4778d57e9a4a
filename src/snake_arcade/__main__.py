from __future__ import annotations

import argparse
import logging
import random

from . import config
from .errors import ConfigError
from .game import main as run_game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snake-arcade", description="Grid snake arcade game.")
    parser.add_argument("--grid-size", type=int, default=config.GRID_SIZE, help="Cells per side of the board.")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=config.TICK_INTERVAL_MS,
        help="Milliseconds between snake moves.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--prefs",
        default=None,
        help=f"Preferences file (default: {config.PREFS_PATH}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log game events at DEBUG level.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        run_game(args.grid_size, args.tick_ms, prefs_path=args.prefs, rng=rng)
    except ConfigError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
