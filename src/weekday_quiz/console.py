"""Adaptador de terminal para el bucle de juego."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ConsoleIO:
    """Line I/O over stdin/stdout."""

    def __init__(self, history: bool = True) -> None:
        """Create the adapter.

        Args:
            history: Enable line editing and arrow-key recall through the
                ``readline`` module where the platform provides it.
        """
        self.history_enabled = history and _enable_readline()

    def read_line(self, prompt: str) -> str:
        """Read one line; raises ``EOFError`` at end of input."""
        return input(prompt)

    def write_line(self, text: str) -> None:
        print(text)


def _enable_readline() -> bool:
    # input() uses readline once it has been imported.
    try:
        import readline  # noqa: F401
    except ImportError:
        logger.debug("readline not available, line editing disabled")
        return False
    return True
