"""Launch configuration for the arcade front-end."""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from collapse.constants import DEFAULT_COLORS, DEFAULT_WIDTH, MAX_COLORS, MAX_WIDTH, MIN_WIDTH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class GameConfig:
    width: int = DEFAULT_WIDTH
    colors: int = DEFAULT_COLORS
    seed: Optional[int] = None
    log_level: str = "WARNING"


def _bounded_int(low: int, high: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}, got {value}")
        return value
    return convert


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="collapse", description="Clear same-colored regions before you run out of moves.")
    ap.add_argument("--width", type=_bounded_int(MIN_WIDTH, MAX_WIDTH), default=DEFAULT_WIDTH,
                    help="number of rows and columns on the board")
    ap.add_argument("--colors", type=_bounded_int(1, MAX_COLORS), default=DEFAULT_COLORS,
                    help="number of tile colors")
    ap.add_argument("--seed", type=int, default=None, help="seed for a reproducible deal")
    ap.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return ap


def parse_args(argv: Optional[Sequence[str]] = None) -> GameConfig:
    args = build_parser().parse_args(argv)
    return GameConfig(width=args.width, colors=args.colors, seed=args.seed, log_level=args.log_level)


def configure_logging(config: GameConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
