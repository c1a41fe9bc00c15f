"""Punto de entrada: ``python -m weekday_quiz``."""

from __future__ import annotations

from weekday_quiz.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
