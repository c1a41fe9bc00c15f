"""Generación de fechas aleatorias dentro de un rango histórico válido."""

from __future__ import annotations

import logging
import random
import secrets
from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# First day the Gregorian calendar was in effect.
GREGORIAN_ADOPTION = date(1582, 10, 15)


class DateRangeError(ValueError):
    """Raised when no valid date range can be built around ``now``."""


@dataclass(frozen=True)
class DateRange:
    """Bounds policy for generated dates.

    The lower bound is fixed; the upper bound is ``years_ahead`` calendar
    years after the reference date. ``years_ahead=100`` gives a window
    spanning roughly two centuries around the present.
    """

    years_ahead: int = 50
    lower: date = GREGORIAN_ADOPTION

    def __post_init__(self) -> None:
        if self.years_ahead < 1:
            raise ValueError(f"years_ahead must be >= 1, got {self.years_ahead}")


def make_rng(seed: int | None = None) -> random.Random:
    """Build the game's random source.

    Args:
        seed: Fixed seed for reproducible sequences. When ``None`` a seed is
            harvested once from the OS entropy pool.

    Returns:
        A seeded ``random.Random``.
    """
    if seed is None:
        seed = secrets.randbits(128)
    logger.debug("Random source seeded with %d", seed)
    return random.Random(seed)


class DateOracle:
    """Uniform random dates in ``[lower, now + years_ahead)``."""

    def __init__(self, date_range: DateRange | None = None) -> None:
        self._range = date_range or DateRange()

    @property
    def date_range(self) -> DateRange:
        return self._range

    def bounds(self, now: date) -> tuple[date, date]:
        """Return the half-open ``(lower, upper)`` range anchored on ``now``.

        Raises:
            DateRangeError: If ``now`` precedes the lower bound or the upper
                bound falls outside the representable calendar.
        """
        lower = self._range.lower
        if now < lower:
            raise DateRangeError(
                f"Current date {now.isoformat()} precedes the adoption of the "
                f"Gregorian calendar ({lower.isoformat()})"
            )
        try:
            upper = now + relativedelta(years=self._range.years_ahead)
        except (OverflowError, ValueError) as exc:
            raise DateRangeError(
                f"Upper bound {self._range.years_ahead} years after "
                f"{now.isoformat()} is out of range"
            ) from exc
        return lower, upper

    def generate(self, now: date, rng: random.Random) -> date:
        """Pick a uniformly distributed date around ``now``.

        Args:
            now: Reference date the range is anchored on.
            rng: Random source; a fixed seed yields a fixed sequence.

        Returns:
            A date ``d`` with ``lower <= d < upper``.

        Raises:
            DateRangeError: If the range cannot be built or the resulting date
                is not representable.
        """
        lower, upper = self.bounds(now)
        offset = rng.randrange(-(now - lower).days, (upper - now).days)
        if offset == 0:
            return now
        try:
            picked = now + timedelta(days=offset)
        except OverflowError as exc:
            raise DateRangeError(
                f"Offset of {offset} days from {now.isoformat()} is out of range"
            ) from exc
        logger.debug("Generated %s (offset %+d days from %s)", picked, offset, now)
        return picked
