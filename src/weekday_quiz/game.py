"""Bucle de juego: preguntar, leer la respuesta, puntuar y mostrar estadísticas."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from datetime import date

from weekday_quiz.calendar_utils import (
    format_date,
    tense,
    today,
    weekday_name,
    weekday_of,
)
from weekday_quiz.model import Command, GuessOutcome, Weekday
from weekday_quiz.oracle import DateOracle, make_rng
from weekday_quiz.parser import parse
from weekday_quiz.stats import StatsTracker, render_stats

logger = logging.getLogger(__name__)

PROMPT = ">> "

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


class GameSession:
    """One interactive session.

    I/O goes through ``read_line``/``write_line`` so the loop can run against
    a terminal or a scripted list of answers. ``read_line`` signals end of
    input by raising ``EOFError``, which ends the session like a quit.
    """

    def __init__(
        self,
        *,
        read_line: ReadLine,
        write_line: WriteLine,
        oracle: DateOracle | None = None,
        rng: random.Random | None = None,
        stats: StatsTracker | None = None,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], date] = today,
    ) -> None:
        self._read_line = read_line
        self._write_line = write_line
        self.oracle = oracle or DateOracle()
        self.rng = rng or make_rng()
        self.stats = stats or StatsTracker()
        self._clock = clock
        self._now = now

    def run(self) -> list[GuessOutcome]:
        """Play rounds until quit or end of input.

        Returns:
            The outcomes of the answered rounds, in order.

        Raises:
            DateRangeError: If the clock gives a date no range can be built on.
        """
        outcomes: list[GuessOutcome] = []
        while True:
            outcome = self.play_round()
            if outcome is None:
                return outcomes
            outcomes.append(outcome)
            try:
                self._write_line("Press [ENTER] to continue")
                self._read_line("")
            except EOFError:
                return outcomes

    def play_round(self) -> GuessOutcome | None:
        """Ask about one date. Returns ``None`` when the player leaves."""
        now = self._now()
        day = self.oracle.generate(now, self.rng)
        started = self._clock()
        self._write_line(
            f"What day of the week {tense(day, now)}: {format_date(day)}?"
        )

        guess = self._read_guess()
        if guess is None:
            self._write_line("Quitting...")
            return None

        elapsed = self._clock() - started
        actual = weekday_of(day)
        outcome = GuessOutcome(day=day, guess=guess, actual=actual, elapsed=elapsed)
        if outcome.correct:
            self.stats.record_correct(elapsed)
            verdict = "✅ Yes!"
        else:
            self.stats.record_incorrect(elapsed)
            verdict = "❌ Nope."
        self._write_line(
            f"{verdict} {format_date(day)} {tense(day, now)} a "
            f"{weekday_name(actual)}."
        )
        self._write_line("")
        self._write_line(render_stats(self.stats.snapshot()))
        self._write_line("")
        return outcome

    def _read_guess(self) -> Weekday | None:
        while True:
            try:
                raw = self._read_line(PROMPT)
            except EOFError:
                logger.debug("End of input while waiting for a guess")
                return None
            parsed = parse(raw)
            if parsed is Command.QUIT:
                return None
            if parsed is Command.UNRECOGNIZED:
                self._write_line("Unrecognized input. Try again.")
                continue
            return parsed
