"""Threshold bands shared by the platform scorers.

Every band is half-open ``[lo, hi)`` and the top band is ``[lo, inf)``, so a
raw value maps to the number of lower bounds it has reached.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence, Union

DAYS_PER_YEAR = 365

Number = Union[int, float]


def band_score(value: Number, lower_bounds: Sequence[Number]) -> int:
    """Score ``value`` against ascending band lower bounds."""
    return bisect_right(lower_bounds, value)


@dataclass(frozen=True)
class AgeBands:
    """Age bucketing that switches from days to years at a threshold.

    Values below ``year_threshold_days`` use ``day_bounds``; the threshold
    itself and everything above use ``year_bounds`` on ``days / 365``,
    scoring from ``len(day_bounds) + 1`` upwards.
    """
    day_bounds: tuple[int, ...]
    year_threshold_days: int
    year_bounds: tuple[int, ...]

    def score(self, days: Number) -> int:
        if days < self.year_threshold_days:
            return band_score(days, self.day_bounds)
        years = days / DAYS_PER_YEAR
        return len(self.day_bounds) + 1 + band_score(years, self.year_bounds)

    @property
    def max_score(self) -> int:
        return len(self.day_bounds) + 1 + len(self.year_bounds)


def days_since(then: datetime, now: datetime) -> int:
    """Whole days elapsed between ``then`` and ``now``."""
    return (now - then).days
