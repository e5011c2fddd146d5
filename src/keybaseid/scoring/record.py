"""Score records and the merge/substitution steps applied to them.

A ScoreRecord maps signal names to integer points. Each platform scorer
returns a record with all of its keys present, so records from different
platforms can be merged and summed without checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .tiers import IdentityTier

ScoreRecord = dict[str, int]

# Points added to Keybase and GitHub signals when no Twitter credentials
# are configured, standing in for the Twitter record.
SOCIAL_CREDENTIAL_SUBSTITUTION: Mapping[str, int] = {
    "keybase_age": 2,
    "github_age": 2,
    "keybase_followers": 2,
    "github_followers": 1,
}


def zero_record(keys: Iterable[str]) -> ScoreRecord:
    return {k: 0 for k in keys}


def merge_records(*records: Mapping[str, int]) -> ScoreRecord:
    """Union of records whose key sets are disjoint."""
    merged: ScoreRecord = {}
    for record in records:
        overlap = merged.keys() & record.keys()
        if overlap:
            raise ValueError(f"score records overlap on {sorted(overlap)}")
        merged.update(record)
    return merged


def apply_substitution(score: Mapping[str, int],
                       table: Mapping[str, int] = SOCIAL_CREDENTIAL_SUBSTITUTION) -> ScoreRecord:
    """Return a copy of ``score`` with each bonus in ``table`` added to its key."""
    adjusted = dict(score)
    for key, bonus in table.items():
        adjusted[key] = adjusted.get(key, 0) + bonus
    return adjusted


def total_of(score: Mapping[str, int]) -> int:
    return sum(score.values())


@dataclass
class ScoreDetails:
    """Combined record, its total and the tier the total falls in."""
    score: ScoreRecord
    total: int
    identity: IdentityTier

    def to_dict(self) -> dict:
        return {
            "score": dict(self.score),
            "total": self.total,
            "identity": self.identity.value,
        }
