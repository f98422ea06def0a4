import argparse
import json
from typing import List, Optional

from loguru import logger

from .board import render_board
from .config import config
from .dice import RandomDice, ScriptedDice
from .events import LoguruSink, NullSink, configure_logging
from .simulator import Simulator


def _parse_rolls(raw: str) -> List[int]:
    try:
        return [int(x) for x in raw.split(",") if x.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid roll list '{raw}': {e}") from e


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play a four-player game on the ten-cell track until someone wins"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Seed for the random dice (env SEED)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=config.MAX_STEPS,
        help="Stop after this many phase steps; 0 means no limit (env MAX_STEPS)",
    )
    parser.add_argument(
        "--rolls",
        type=_parse_rolls,
        default=None,
        help="Comma separated dice values to replay instead of random rolls",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not log game events, only the final summary",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        help="Loguru level (env LOG_LEVEL)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    if args.rolls is not None:
        dice = ScriptedDice(args.rolls)
    else:
        dice = RandomDice.seeded(args.seed)

    sim = Simulator(
        dice=dice,
        sink=NullSink() if args.quiet else LoguruSink(),
        max_steps=args.max_steps,
    )
    summary = sim.run()

    print("\n--- GAME COMPLETE ---")
    print(render_board(sim.roster))
    print(json.dumps(summary.to_dict(), indent=2))
    if summary.truncated:
        logger.warning("Game ended without a winner")
    return 0
