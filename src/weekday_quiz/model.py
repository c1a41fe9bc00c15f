"""Modelos tipados para días de semana, comandos y resultados de ronda."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.weekday()`` (Monday is 0)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class Command(Enum):
    """Non-guess results of parsing a line of input."""

    QUIT = "quit"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class GuessOutcome:
    """One answered round."""

    day: date
    guess: Weekday
    actual: Weekday
    elapsed: float

    @property
    def correct(self) -> bool:
        return self.guess == self.actual
