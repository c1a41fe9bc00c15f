from __future__ import annotations

import builtins
import sys

import pytest

from weekday_quiz.console import ConsoleIO


def test_write_line_prints(capsys: pytest.CaptureFixture[str]) -> None:
    ConsoleIO(history=False).write_line("hola")
    assert capsys.readouterr().out == "hola\n"


def test_read_line_uses_input(monkeypatch: pytest.MonkeyPatch) -> None:
    prompts: list[str] = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        return "mon"

    monkeypatch.setattr(builtins, "input", _input)
    assert ConsoleIO(history=False).read_line(">> ") == "mon"
    assert prompts == [">> "]


def test_read_line_eof(monkeypatch: pytest.MonkeyPatch) -> None:
    def _input(_prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr(builtins, "input", _input)
    with pytest.raises(EOFError):
        ConsoleIO(history=False).read_line(">> ")


def test_history_disabled() -> None:
    assert ConsoleIO(history=False).history_enabled is False


def test_history_without_readline(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "readline", None)
    assert ConsoleIO(history=True).history_enabled is False
