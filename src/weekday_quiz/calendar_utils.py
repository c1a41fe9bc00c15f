"""Utilidades de calendario: día de semana, tiempo verbal y formato de fechas."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

from dateutil import tz

from weekday_quiz.model import Weekday

# strftime("%B") depends on LC_TIME; the prompt is always English.
_MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def weekday_of(day: date) -> Weekday:
    """Return the proleptic Gregorian weekday of ``day``."""
    return Weekday(day.weekday())


def weekday_name(weekday: Weekday) -> str:
    """Capitalized English name, e.g. ``Monday``."""
    return weekday.name.capitalize()


def tense(day: date, now: date) -> str:
    """Return ``"is"`` for today or a future date, ``"was"`` otherwise."""
    return "is" if day >= now else "was"


def format_date(day: date) -> str:
    """Format as ``September 03, 1994``."""
    return f"{_MONTHS[day.month - 1]} {day.day:02d}, {day.year:04d}"


def today(zone: tzinfo | None = None) -> date:
    """Current calendar date in ``zone`` (local zone by default)."""
    return datetime.now(tz=zone or tz.tzlocal()).date()
