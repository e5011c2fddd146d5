"""Twitter scorer: follower count (0-3) and account age (0-4).

Only used when an application key pair is configured; without one the
aggregator substitutes fixed bonuses instead.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..clients.twitter import TwitterClient, TwitterCredentials, TwitterProfile
from .bands import AgeBands, band_score, days_since
from .record import ScoreRecord, zero_record

logger = logging.getLogger(__name__)

SCORE_KEYS = ("twitter_followers", "twitter_age")

FOLLOWER_BOUNDS = (51, 301, 2001)
ACCOUNT_AGE_BANDS = AgeBands(day_bounds=(31, 91), year_threshold_days=730, year_bounds=(4,))


def calculate_score(profile: TwitterProfile, now: datetime) -> ScoreRecord:
    score = zero_record(SCORE_KEYS)
    score["twitter_followers"] = band_score(profile.followers_count, FOLLOWER_BOUNDS)
    score["twitter_age"] = ACCOUNT_AGE_BANDS.score(days_since(profile.created_at, now))
    return score


class TwitterScorer:
    def __init__(self, client: Optional[TwitterClient] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.client = client or TwitterClient()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def score_user(self, username: str, credentials: TwitterCredentials) -> ScoreRecord:
        profile = await self.client.lookup_profile(username, credentials)
        if not profile.ok:
            return zero_record(SCORE_KEYS)
        score = calculate_score(profile.value, self.clock())
        logger.debug("twitter score for %s: %s", username, score)
        return score
