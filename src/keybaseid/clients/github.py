"""GitHub client — public user profile, no token required (60 req/hr)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import quote

from .base import FetchResult, PlatformClient

GITHUB_API = "https://api.github.com"


@dataclass
class GitHubProfile:
    login: str
    followers: int
    created_at: datetime


def parse_iso(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


class GitHubClient(PlatformClient):
    platform_name = "github"

    def __init__(self, *args: Any, token: Optional[str] = None, base_url: str = GITHUB_API, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.token = token or os.environ.get("GITHUB_TOKEN", "")
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json", "User-Agent": "keybaseid"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def lookup_profile(self, username: str) -> FetchResult[GitHubProfile]:
        result = await self._get_json(f"{self.base_url}/users/{quote(username, safe='')}", headers=self._headers())
        if not result.ok:
            return result
        user = result.value
        if not isinstance(user, dict):
            return self._fail(f"malformed profile for {username!r}")

        created = parse_iso(user.get("created_at"))
        if created is None:
            return self._fail(f"profile for {username!r} has no created_at")
        try:
            followers = int(user.get("followers") or 0)
        except (TypeError, ValueError):
            followers = 0

        return FetchResult.success(GitHubProfile(
            login=user.get("login") or username,
            followers=followers,
            created_at=created,
        ))
