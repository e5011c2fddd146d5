"""Twitter client — app-only bearer token and users/show lookup."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from .base import FetchResult, PlatformClient
from .github import parse_iso

TWITTER_TOKEN_URL = "https://api.twitter.com/oauth2/token"
TWITTER_USER_URL = "https://api.twitter.com/1.1/users/show.json"

# e.g. "Wed Oct 10 20:19:24 +0000 2018"
TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"


@dataclass(frozen=True)
class TwitterCredentials:
    """Twitter application key pair used for the client-credentials grant."""
    api_key: str
    api_secret: str

    def __repr__(self) -> str:
        return f"TwitterCredentials(api_key={self.api_key[:4]}..., api_secret=***)"


@dataclass
class TwitterProfile:
    screen_name: str
    followers_count: int
    created_at: datetime


def parse_twitter_date(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, TWITTER_DATE_FORMAT)
    except ValueError:
        return parse_iso(value)


class TwitterClient(PlatformClient):
    platform_name = "twitter"

    def __init__(self, *args: Any, token_url: str = TWITTER_TOKEN_URL,
                 user_url: str = TWITTER_USER_URL, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.token_url = token_url
        self.user_url = user_url

    async def fetch_token(self, credentials: TwitterCredentials) -> FetchResult[str]:
        """Exchange the key pair for an app-only bearer token."""
        basic = base64.b64encode(f"{credentials.api_key}:{credentials.api_secret}".encode()).decode()

        result = await self._request_json(
            "POST",
            self.token_url,
            headers={
                "Authorization": f"Basic {basic}",
                "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
            },
            data={"grant_type": "client_credentials"},
        )
        if not result.ok:
            return result
        token = result.value.get("access_token") if isinstance(result.value, dict) else None
        if not token:
            return self._fail("token response has no access_token")
        return FetchResult.success(token)

    async def lookup_profile(self, username: str, credentials: TwitterCredentials) -> FetchResult[TwitterProfile]:
        token = await self.fetch_token(credentials)
        if not token.ok:
            return token

        result = await self._get_json(
            self.user_url,
            params={"screen_name": username},
            headers={"Authorization": f"Bearer {token.value}"},
        )
        if not result.ok:
            return result
        user = result.value
        if not isinstance(user, dict):
            return self._fail(f"malformed profile for {username!r}")

        created = parse_twitter_date(user.get("created_at"))
        if created is None:
            return self._fail(f"profile for {username!r} has no created_at")
        try:
            followers = int(user.get("followers_count") or 0)
        except (TypeError, ValueError):
            followers = 0

        return FetchResult.success(TwitterProfile(
            screen_name=user.get("screen_name") or username,
            followers_count=followers,
            created_at=created,
        ))
