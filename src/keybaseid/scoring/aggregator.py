"""Combine per-platform records into one score and tier."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Union

from ..clients.twitter import TwitterCredentials
from .github import GitHubScorer
from .keybase import KeybaseScorer
from .record import (
    SOCIAL_CREDENTIAL_SUBSTITUTION,
    ScoreDetails,
    apply_substitution,
    merge_records,
    total_of,
)
from .tiers import classify_total
from .twitter import TwitterScorer

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """
    Score a username across Keybase, GitHub and (optionally) Twitter.

    With Twitter credentials the Twitter record joins the merge. Without
    them SOCIAL_CREDENTIAL_SUBSTITUTION is added onto the Keybase and GitHub
    signals so users are not penalised for a platform we cannot query.
    """

    def __init__(
        self,
        twitter_credentials: Optional[TwitterCredentials] = None,
        *,
        keybase: Optional[KeybaseScorer] = None,
        github: Optional[GitHubScorer] = None,
        twitter: Optional[TwitterScorer] = None,
    ):
        self.twitter_credentials = twitter_credentials
        self.keybase = keybase or KeybaseScorer()
        self.github = github or GitHubScorer()
        self.twitter = twitter or TwitterScorer()

    @property
    def has_social_credentials(self) -> bool:
        return self.twitter_credentials is not None

    async def score_details(self, username: str) -> ScoreDetails:
        lookups = [self.keybase.score_user(username), self.github.score_user(username)]
        if self.has_social_credentials:
            lookups.append(self.twitter.score_user(username, self.twitter_credentials))

        records = await asyncio.gather(*lookups)
        score = merge_records(*records)
        if not self.has_social_credentials:
            score = apply_substitution(score, SOCIAL_CREDENTIAL_SUBSTITUTION)

        total = total_of(score)
        identity = classify_total(total)
        logger.info("Scored %s: %d (%s)", username, total, identity)
        return ScoreDetails(score=score, total=total, identity=identity)

    async def score_user(self, username: str, details: bool = False) -> Union[int, ScoreDetails]:
        """Return the total, or the full ScoreDetails when ``details`` is set."""
        result = await self.score_details(username)
        return result if details else result.total
