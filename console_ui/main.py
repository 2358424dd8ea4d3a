"""Main entry point for the console blackjack game."""

import argparse
import logging
import sys
from random import Random

from blackjack.game import BlackjackGame
from config import config
from console_ui.prompts import request_hit_or_stand
from console_ui.renderer import ConsoleRenderer

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blackjack", description="Play one hand of blackjack against the dealer.")
    parser.add_argument("--seed", type=int, default=config.seed, help="seed for the shuffle (default: random)")
    parser.add_argument("--debug", action="store_true", default=config.debug, help="log engine activity")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Play one game on the console and return the process exit code."""
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # The only generator for the whole process
    rng = Random(args.seed)
    logger.debug("Seeded shuffle generator with %r", args.seed)

    game = BlackjackGame(rules=config.game.to_ruleset(), rng=rng)
    game.subscribe(ConsoleRenderer())

    try:
        game.play(request_hit_or_stand)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye.")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
