"""Estadísticas de la sesión: aciertos, rachas y duración promedio."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatsSnapshot:
    """Read-only view of a tracker after at least one guess."""

    total_guesses: int
    correct_guesses: int
    current_streak: int
    best_streak: int
    last_duration: float
    avg_duration: float

    @property
    def accuracy(self) -> float:
        """Percentage of correct guesses."""
        return self.correct_guesses / self.total_guesses * 100


@dataclass
class StatsTracker:
    """Running totals for one game session.

    Durations are in seconds. The average is kept as an online mean, so no
    per-guess history is stored.
    """

    total_guesses: int = 0
    correct_guesses: int = 0
    current_streak: int = 0
    best_streak: int = 0
    last_duration: float = 0.0
    avg_duration: float = 0.0

    def record_correct(self, elapsed: float) -> None:
        """Count a correct guess that took ``elapsed`` seconds."""
        _check_elapsed(elapsed)
        self.total_guesses += 1
        self.correct_guesses += 1
        self.current_streak += 1
        if self.current_streak > self.best_streak:
            self.best_streak = self.current_streak
        self._update_durations(elapsed)

    def record_incorrect(self, elapsed: float) -> None:
        """Count a wrong guess and reset the streak."""
        _check_elapsed(elapsed)
        self.total_guesses += 1
        self.current_streak = 0
        self._update_durations(elapsed)

    def snapshot(self) -> StatsSnapshot:
        """Freeze the current totals.

        Raises:
            ValueError: If no guess has been recorded yet.
        """
        if self.total_guesses == 0:
            raise ValueError("No guesses recorded yet")
        return StatsSnapshot(
            total_guesses=self.total_guesses,
            correct_guesses=self.correct_guesses,
            current_streak=self.current_streak,
            best_streak=self.best_streak,
            last_duration=self.last_duration,
            avg_duration=self.avg_duration,
        )

    def _update_durations(self, elapsed: float) -> None:
        self.last_duration = elapsed
        self.avg_duration += (elapsed - self.avg_duration) / self.total_guesses
        logger.debug(
            "Recorded guess %d in %.3fs (avg %.3fs, streak %d)",
            self.total_guesses,
            elapsed,
            self.avg_duration,
            self.current_streak,
        )


def _check_elapsed(elapsed: float) -> None:
    if elapsed < 0:
        raise ValueError(f"elapsed must be >= 0, got {elapsed}")


def render_stats(snapshot: StatsSnapshot) -> str:
    """Two-line summary shown after every guess."""
    return (
        f"Streak: {snapshot.current_streak} | "
        f"Duration: {snapshot.last_duration:.2f}s\n"
        f"Correct: {snapshot.correct_guesses} / {snapshot.total_guesses} "
        f"({snapshot.accuracy:.1f}%) | Best Streak: {snapshot.best_streak} | "
        f"Avg. Duration: {snapshot.avg_duration:.2f}s"
    )
