"""Identity-confidence tiers."""

from __future__ import annotations

from enum import Enum

POSITIVE_ID_MIN_SCORE = 90
ACCURATE_ID_MIN_SCORE = 75
PASSABLE_ID_MIN_SCORE = 51
WEAK_ID_MIN_SCORE = 26


class IdentityTier(Enum):
    UNKNOWN = "Unknown"
    WEAK = "Weak"
    PASSABLE = "Passable"
    ACCURATE = "Accurate"
    POSITIVE = "Positive"

    def __str__(self) -> str:
        return self.value


# Highest bound first; first match wins.
_TIER_BOUNDS = (
    (POSITIVE_ID_MIN_SCORE, IdentityTier.POSITIVE),
    (ACCURATE_ID_MIN_SCORE, IdentityTier.ACCURATE),
    (PASSABLE_ID_MIN_SCORE, IdentityTier.PASSABLE),
    (WEAK_ID_MIN_SCORE, IdentityTier.WEAK),
)


def classify_total(total: int) -> IdentityTier:
    for bound, tier in _TIER_BOUNDS:
        if total >= bound:
            return tier
    return IdentityTier.UNKNOWN
