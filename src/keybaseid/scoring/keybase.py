"""Keybase scorer.

Signals:
    keybase_followers      0-5   follower count
    keybase_age            0-6   account age
    avg_proof_age          0-5   mean age of the user's signatures
    twitter/github_proof   10    one linked account each
    reddit/hackernews_proof 3    one linked account each
    dns_website            10 per proof, capped at 20
    generic_website        5 per proof, capped at 10
    mobile_desktop_device  4 per desktop or mobile device, capped at 12
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from ..clients.keybase import KeybaseClient, KeybaseProfile, KeybaseSignature
from .bands import AgeBands, band_score, days_since
from .record import ScoreRecord, zero_record

logger = logging.getLogger(__name__)

SCORE_KEYS = (
    "generic_website",
    "dns_website",
    "twitter_proof",
    "github_proof",
    "reddit_proof",
    "hackernews_proof",
    "mobile_desktop_device",
    "keybase_followers",
    "keybase_age",
    "avg_proof_age",
)

FOLLOWER_BOUNDS = (2, 6, 11, 21, 51)
ACCOUNT_AGE_BANDS = AgeBands(day_bounds=(30, 91, 181), year_threshold_days=365, year_bounds=(2, 3))
PROOF_AGE_BANDS = AgeBands(day_bounds=(31, 91), year_threshold_days=365, year_bounds=(2, 3))

# proof_type -> (score key, points per proof, cap)
PROOF_POINTS = {
    "twitter": ("twitter_proof", 10, 10),
    "github": ("github_proof", 10, 10),
    "reddit": ("reddit_proof", 3, 3),
    "hackernews": ("hackernews_proof", 3, 3),
    "dns": ("dns_website", 10, 20),
    "generic_web_site": ("generic_website", 5, 10),
}

DEVICE_TYPES = frozenset({"desktop", "mobile"})
DEVICE_POINTS = 4
DEVICE_CAP = 12


def _accumulate(score: ScoreRecord, key: str, points: int, cap: int) -> None:
    score[key] = min(score[key] + points, cap)


def average_age_days(sigs: Sequence[KeybaseSignature], now: datetime) -> float:
    if not sigs:
        return 0.0
    return sum(days_since(s.created_at, now) for s in sigs) / len(sigs)


def calculate_score(
    profile: KeybaseProfile,
    followers: Optional[int],
    sigs: Optional[Sequence[KeybaseSignature]],
    now: datetime,
) -> ScoreRecord:
    """Compute the Keybase record from already-fetched data.

    ``followers`` or ``sigs`` of None means that lookup failed; the signals
    depending on it stay at zero.
    """
    score = zero_record(SCORE_KEYS)

    if followers:
        score["keybase_followers"] = band_score(followers, FOLLOWER_BOUNDS)

    if sigs:
        score["avg_proof_age"] = PROOF_AGE_BANDS.score(average_age_days(sigs, now))

    for proof_type in profile.proof_types:
        entry = PROOF_POINTS.get(proof_type)
        if entry:
            _accumulate(score, *entry)

    for device_type in profile.device_types:
        if device_type in DEVICE_TYPES:
            _accumulate(score, "mobile_desktop_device", DEVICE_POINTS, DEVICE_CAP)

    if profile.created_at is not None:
        score["keybase_age"] = ACCOUNT_AGE_BANDS.score(days_since(profile.created_at, now))

    return score


class KeybaseScorer:
    """Score a Keybase user. Lookup failures degrade to zero signals."""

    def __init__(self, client: Optional[KeybaseClient] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.client = client or KeybaseClient()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def score_user(self, username: str) -> ScoreRecord:
        profile = await self.client.lookup_profile(username)
        if not profile.ok:
            return zero_record(SCORE_KEYS)

        follow_summary, sigs = await asyncio.gather(
            self.client.lookup_follow_summary(username),
            self.client.lookup_signatures(profile.value.uid),
        )
        score = calculate_score(profile.value, follow_summary.value, sigs.value, self.clock())
        logger.debug("keybase score for %s: %s", username, score)
        return score
