"""CLI para jugar a adivinar el día de la semana de fechas aleatorias."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from weekday_quiz.calendar_utils import today
from weekday_quiz.config import GameConfig
from weekday_quiz.console import ConsoleIO
from weekday_quiz.game import GameSession
from weekday_quiz.oracle import DateOracle, DateRange, DateRangeError, make_rng
from weekday_quiz.stats import StatsTracker

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Guess the day of the week of random calendar dates."
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible sequence of dates (default: OS entropy).",
    )
    parser.add_argument(
        "--years-ahead",
        type=int,
        default=50,
        help="How many years past today dates may reach (default: 50).",
    )
    parser.add_argument(
        "--tz",
        dest="timezone",
        default=None,
        help="Timezone used to decide today's date, e.g. Europe/Madrid "
        "(default: local).",
    )
    parser.add_argument(
        "--no-history",
        dest="history",
        action="store_false",
        help="Disable readline line editing and input history.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    return parser.parse_args(argv)


def build_config(ns: argparse.Namespace) -> GameConfig:
    """Turn parsed arguments into a validated ``GameConfig``.

    Raises:
        ValueError: If a setting is invalid.
    """
    config = GameConfig(
        seed=ns.seed,
        years_ahead=ns.years_ahead,
        timezone=ns.timezone,
        history=ns.history,
        verbose=ns.verbose,
    )
    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """Run the game.

    Returns:
        Exit code: 0 on quit or end of input, 2 on configuration or clock
        errors, 130 on interrupt.
    """
    ns = parse_args(argv)
    try:
        config = build_config(ns)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    zone = config.zone()

    def _today() -> date:
        return today(zone)

    console = ConsoleIO(history=config.history)
    session = GameSession(
        read_line=console.read_line,
        write_line=console.write_line,
        oracle=DateOracle(DateRange(years_ahead=config.years_ahead)),
        rng=make_rng(config.seed),
        stats=StatsTracker(),
        now=_today,
    )
    try:
        outcomes = session.run()
    except DateRangeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        console.write_line("\nQuitting...")
        return 130
    logger.debug("Session ended after %d rounds", len(outcomes))
    return 0
