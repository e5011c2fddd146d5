"""Authentication gate — verified message plus a minimum trust score."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Mapping, Optional, Union

from .config import KeybaseIdConfig, KeybaseIdOptions, resolve_config
from .errors import VerificationError
from .scoring.aggregator import ScoreAggregator
from .scoring.record import ScoreDetails
from .verifier import MessageVerifier

logger = logging.getLogger(__name__)


class AuthenticationGate:
    """
    Authenticate a Keybase user from a signed message.

    A caller passes only when the message verifies as signed by the claimed
    user AND the user's aggregate score is at least ``min_score``.

    Usage:
        gate = AuthenticationGate(keybase_path="/usr/bin/keybase", min_score=60)
        try:
            ok = await gate.authenticate(signed, "login-nonce-1234", "alice")
        except VerificationError:
            ...  # signature or text did not match

    Raises ConfigurationError from __init__ when no keybase path is given and
    KEYBASEID_KEYBASE is unset.
    """

    def __init__(
        self,
        keybase_path: Optional[str] = None,
        min_score: Optional[Union[int, str]] = None,
        twitter_api_key: Optional[str] = None,
        twitter_api_secret: Optional[str] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        verifier: Optional[MessageVerifier] = None,
        aggregator: Optional[ScoreAggregator] = None,
        log: Optional[logging.Logger] = None,
        health_check: bool = True,
    ):
        options = KeybaseIdOptions(
            keybase_path=keybase_path,
            min_score=min_score,
            twitter_api_key=twitter_api_key,
            twitter_api_secret=twitter_api_secret,
        )
        self.config: KeybaseIdConfig = resolve_config(
            options, os.environ if environ is None else environ,
        )
        self.log = log or logger
        self.verifier = verifier or MessageVerifier(self.config.keybase_path)
        self.aggregator = aggregator or ScoreAggregator(self.config.twitter_credentials)

        self._health_task: Optional[asyncio.Task] = None
        if health_check:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
            if loop is not None:
                self._health_task = loop.create_task(self.check_health())

    @property
    def keybase_path(self) -> str:
        return self.config.keybase_path

    @property
    def min_score(self) -> int:
        return self.config.min_score

    @property
    def health_task(self) -> Optional[asyncio.Task]:
        """Health check scheduled at construction, if a loop was running."""
        return self._health_task

    async def check_health(self) -> bool:
        """Probe ``keybase --version``; warn but never raise on failure."""
        healthy = await self.verifier.probe_version()
        if not healthy:
            self.log.warning(
                "keybaseid failed to run version command using keybase_path/KEYBASEID_KEYBASE of: %s",
                self.config.keybase_path,
            )
        return healthy

    async def verify_user_message(self, message: str, expected_text: str, username: str) -> bool:
        return await self.verifier.verify_message_from_identity(message, expected_text, username)

    async def verify_message(self, message: str, expected_text: str) -> bool:
        return await self.verifier.verify_message_only(message, expected_text)

    async def score_user(self, username: str, details: bool = False) -> Union[int, ScoreDetails]:
        return await self.aggregator.score_user(username, details)

    async def authenticate(self, message: str, expected_text: str, username: str) -> bool:
        """
        Returns:
            True if the score meets ``min_score``, False if it does not.

        Raises:
            VerificationError: the message did not verify for ``username``.
        """
        if not await self.verify_user_message(message, expected_text, username):
            self.log.info("Rejected %s: message did not verify", username)
            raise VerificationError(username=username)

        total = await self.aggregator.score_user(username)
        passed = total >= self.config.min_score
        self.log.info("Authentication for %s: score %d, minimum %d, %s",
                      username, total, self.config.min_score, "passed" if passed else "rejected")
        return passed
