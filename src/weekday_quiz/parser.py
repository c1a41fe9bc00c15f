"""Interpretación de la entrada del usuario (días de semana y salida)."""

from __future__ import annotations

from weekday_quiz.model import Command, Weekday

_TOKENS: dict[Weekday | Command, tuple[str, ...]] = {
    Command.QUIT: ("q", "quit", "exit"),
    Weekday.MONDAY: ("m", "mo", "mon", "monday"),
    Weekday.TUESDAY: ("tu", "tue", "tues", "tuesday"),
    Weekday.WEDNESDAY: ("w", "we", "wed", "wednesday"),
    Weekday.THURSDAY: ("th", "thu", "thur", "thurs", "thursday"),
    Weekday.FRIDAY: ("f", "fr", "fri", "friday"),
    Weekday.SATURDAY: ("sa", "sat", "saturday"),
    Weekday.SUNDAY: ("su", "sun", "sunday"),
}

TOKEN_TABLE: dict[str, Weekday | Command] = {
    token: result for result, tokens in _TOKENS.items() for token in tokens
}


def parse(raw: str) -> Weekday | Command:
    """Map one line of input to a weekday or a command.

    Matching is case-insensitive on the trimmed line and only accepts exact
    tokens from ``TOKEN_TABLE``; anything else is ``Command.UNRECOGNIZED``.
    """
    return TOKEN_TABLE.get(raw.strip().lower(), Command.UNRECOGNIZED)
