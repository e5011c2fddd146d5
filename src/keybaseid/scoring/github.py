"""GitHub scorer: follower count (0-4) and account age (0-5)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..clients.github import GitHubClient, GitHubProfile
from .bands import AgeBands, band_score, days_since
from .record import ScoreRecord, zero_record

logger = logging.getLogger(__name__)

SCORE_KEYS = ("github_followers", "github_age")

FOLLOWER_BOUNDS = (2, 6, 11, 21)
ACCOUNT_AGE_BANDS = AgeBands(day_bounds=(31, 91), year_threshold_days=365, year_bounds=(2, 3))


def calculate_score(profile: GitHubProfile, now: datetime) -> ScoreRecord:
    score = zero_record(SCORE_KEYS)
    score["github_followers"] = band_score(profile.followers, FOLLOWER_BOUNDS)
    score["github_age"] = ACCOUNT_AGE_BANDS.score(days_since(profile.created_at, now))
    return score


class GitHubScorer:
    def __init__(self, client: Optional[GitHubClient] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.client = client or GitHubClient()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    async def score_user(self, username: str) -> ScoreRecord:
        profile = await self.client.lookup_profile(username)
        if not profile.ok:
            return zero_record(SCORE_KEYS)
        score = calculate_score(profile.value, self.clock())
        logger.debug("github score for %s: %s", username, score)
        return score
