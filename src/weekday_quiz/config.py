"""Configuración de una partida."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from dateutil import tz


@dataclass(frozen=True)
class GameConfig:
    """Settings collected from the command line."""

    seed: int | None = None
    years_ahead: int = 50
    timezone: str | None = None
    history: bool = True
    verbose: bool = False

    def validate(self) -> None:
        """Check the settings.

        Raises:
            ValueError: If ``years_ahead`` is not positive or the timezone
                name is unknown.
        """
        if self.years_ahead < 1:
            raise ValueError(f"--years-ahead must be >= 1, got {self.years_ahead}")
        self.zone()

    def zone(self) -> tzinfo:
        """Resolve the configured zone, defaulting to the local one."""
        if self.timezone is None:
            return tz.tzlocal()
        zone = tz.gettz(self.timezone)
        if zone is None:
            raise ValueError(f"Unknown timezone: {self.timezone}")
        return zone
