"""Tests for CLI entrypoints."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from weekday_quiz import cli
from weekday_quiz.config import GameConfig


def test_parse_args_defaults() -> None:
    ns = cli.parse_args([])
    assert ns.seed is None
    assert ns.years_ahead == 50
    assert ns.timezone is None
    assert ns.history is True
    assert ns.verbose is False


def test_parse_args_custom_values() -> None:
    ns = cli.parse_args(
        ["--seed", "7", "--years-ahead", "100", "--tz", "UTC", "--no-history", "-v"]
    )
    config = cli.build_config(ns)
    assert config == GameConfig(
        seed=7, years_ahead=100, timezone="UTC", history=False, verbose=True
    )


def test_build_config_rejects_bad_values() -> None:
    with pytest.raises(ValueError, match="years-ahead"):
        cli.build_config(cli.parse_args(["--years-ahead", "0"]))
    with pytest.raises(ValueError, match="Unknown timezone"):
        cli.build_config(cli.parse_args(["--tz", "Not/AZone"]))


class _Console:
    instances: list[_Console] = []

    def __init__(self, history: bool = True) -> None:
        self.history = history
        self.answers = iter(["sat", ""])
        self.lines: list[str] = []
        _Console.instances.append(self)

    def read_line(self, _prompt: str) -> str:
        try:
            return next(self.answers)
        except StopIteration:
            raise EOFError from None

    def write_line(self, text: str) -> None:
        self.lines.append(text)


def test_main_happy_path(monkeypatch: pytest.MonkeyPatch) -> None:
    _Console.instances = []
    monkeypatch.setattr(cli, "ConsoleIO", _Console)
    monkeypatch.setattr(cli, "today", lambda _zone: date(2026, 10, 18))

    code = cli.main(["--seed", "3", "--no-history"])

    assert code == 0
    console = _Console.instances[0]
    assert console.history is False
    assert console.lines[0].startswith("What day of the week ")
    assert any(line.startswith(("✅ Yes!", "❌ Nope.")) for line in console.lines)


def test_main_same_seed_same_question(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "ConsoleIO", _Console)
    monkeypatch.setattr(cli, "today", lambda _zone: date(2026, 10, 18))
    _Console.instances = []
    cli.main(["--seed", "11"])
    cli.main(["--seed", "11"])
    first, second = _Console.instances
    assert first.lines[0] == second.lines[0]


def test_main_pre_gregorian_clock(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli, "ConsoleIO", _Console)
    monkeypatch.setattr(cli, "today", lambda _zone: date(1400, 1, 1))

    assert cli.main([]) == 2
    assert "Gregorian" in capsys.readouterr().err


def test_main_invalid_config(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--years-ahead", "-5"]) == 2
    assert "Error:" in capsys.readouterr().err


def test_main_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    class _InterruptedSession:
        def __init__(self, **_kwargs: Any) -> None:
            pass

        def run(self) -> list[object]:
            raise KeyboardInterrupt

    _Console.instances = []
    monkeypatch.setattr(cli, "ConsoleIO", _Console)
    monkeypatch.setattr(cli, "GameSession", _InterruptedSession)

    assert cli.main([]) == 130
    assert _Console.instances[0].lines[-1] == "\nQuitting..."
