from __future__ import annotations

import pytest

from weekday_quiz.model import Command, Weekday
from weekday_quiz.parser import TOKEN_TABLE, parse


def test_monday_spellings() -> None:
    assert parse("Monday") == parse("mon") == parse("m") == Weekday.MONDAY


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  TUES \n", Weekday.TUESDAY),
        ("w", Weekday.WEDNESDAY),
        ("Thurs", Weekday.THURSDAY),
        ("fr", Weekday.FRIDAY),
        ("SAT", Weekday.SATURDAY),
        ("su", Weekday.SUNDAY),
        ("q", Command.QUIT),
        ("Quit", Command.QUIT),
        ("exit", Command.QUIT),
    ],
)
def test_parse_tokens(raw: str, expected: Weekday | Command) -> None:
    assert parse(raw) == expected


@pytest.mark.parametrize("raw", ["xyz", "", "   ", "t", "s", "mond", "lunes", "mon day"])
def test_parse_unrecognized(raw: str) -> None:
    assert parse(raw) is Command.UNRECOGNIZED


def test_every_weekday_has_full_name() -> None:
    for weekday in Weekday:
        assert TOKEN_TABLE[weekday.name.lower()] == weekday
