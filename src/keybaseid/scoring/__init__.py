"""Trust scoring — per-platform records, aggregation and identity tiers."""

from .aggregator import ScoreAggregator
from .bands import AgeBands, band_score
from .github import GitHubScorer
from .keybase import KeybaseScorer
from .record import (
    SOCIAL_CREDENTIAL_SUBSTITUTION,
    ScoreDetails,
    ScoreRecord,
    apply_substitution,
    merge_records,
    zero_record,
)
from .tiers import IdentityTier, classify_total
from .twitter import TwitterScorer

__all__ = [
    "ScoreAggregator",
    "AgeBands",
    "band_score",
    "GitHubScorer",
    "KeybaseScorer",
    "TwitterScorer",
    "SOCIAL_CREDENTIAL_SUBSTITUTION",
    "ScoreDetails",
    "ScoreRecord",
    "apply_substitution",
    "merge_records",
    "zero_record",
    "IdentityTier",
    "classify_total",
]
