"""Keybase client — user lookup, follow summary and signature list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from .base import FetchResult, PlatformClient

logger = logging.getLogger(__name__)

KEYBASE_API = "https://keybase.io/_/api/1.0"
LOOKUP_FIELDS = "basics,proofs_summary,devices"


@dataclass
class KeybaseProfile:
    """The parts of a Keybase user lookup that feed the score."""
    uid: str
    username: str
    created_at: Optional[datetime] = None
    proof_types: list[str] = field(default_factory=list)
    device_types: list[str] = field(default_factory=list)


@dataclass
class KeybaseSignature:
    created_at: datetime


def _from_epoch(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def _status_ok(data: Any) -> bool:
    """Keybase wraps every reply in a status block; code 0 means success."""
    if not isinstance(data, dict):
        return False
    status = data.get("status")
    return isinstance(status, dict) and status.get("code") == 0


def parse_profile(them: Any, username: str) -> Optional[KeybaseProfile]:
    """Build a KeybaseProfile from the ``them`` block of a lookup reply."""
    if isinstance(them, list):
        them = them[0] if them else None
    if not isinstance(them, dict) or not them.get("id"):
        return None

    basics = them.get("basics")
    if not isinstance(basics, dict):
        basics = {}
    summary = them.get("proofs_summary")
    proofs = summary.get("all") if isinstance(summary, dict) else None
    devices = them.get("devices")

    return KeybaseProfile(
        uid=str(them["id"]),
        username=basics.get("username") or username,
        created_at=_from_epoch(basics.get("ctime")),
        proof_types=[
            p["proof_type"] for p in (proofs if isinstance(proofs, list) else [])
            if isinstance(p, dict) and isinstance(p.get("proof_type"), str) and p["proof_type"]
        ],
        device_types=[
            d["type"] for d in (devices.values() if isinstance(devices, dict) else [])
            if isinstance(d, dict) and isinstance(d.get("type"), str)
        ],
    )


class KeybaseClient(PlatformClient):
    platform_name = "keybase"

    def __init__(self, *args: Any, base_url: str = KEYBASE_API, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.base_url = base_url.rstrip("/")

    async def lookup_profile(self, username: str) -> FetchResult[KeybaseProfile]:
        result = await self._get_json(
            f"{self.base_url}/user/lookup.json",
            params={"fields": LOOKUP_FIELDS, "username": username},
        )
        if not result.ok:
            return result
        data = result.value
        if not _status_ok(data) or not data.get("them"):
            return self._fail(f"no such user {username!r}")

        profile = parse_profile(data["them"], username)
        if profile is None:
            return self._fail(f"malformed lookup for {username!r}")
        return FetchResult.success(profile)

    async def lookup_follow_summary(self, username: str) -> FetchResult[int]:
        """Return the follower count from the user card."""
        result = await self._get_json(f"{self.base_url}/user/card.json", params={"username": username})
        if not result.ok:
            return result
        data = result.value
        summary = data.get("follow_summary") if _status_ok(data) else None
        if not isinstance(summary, dict):
            return self._fail(f"no follow summary for {username!r}")
        try:
            return FetchResult.success(int(summary.get("followers") or 0))
        except (TypeError, ValueError):
            return self._fail(f"bad follower count for {username!r}")

    async def lookup_signatures(self, uid: str) -> FetchResult[list[KeybaseSignature]]:
        result = await self._get_json(f"{self.base_url}/sig/get.json", params={"uid": uid})
        if not result.ok:
            return result
        data = result.value
        sigs = data.get("sigs") if _status_ok(data) else None
        if not isinstance(sigs, list):
            return self._fail(f"no signatures for uid {uid}")

        parsed = []
        for sig in sigs:
            created = _from_epoch(sig.get("ctime")) if isinstance(sig, dict) else None
            if created is not None:
                parsed.append(KeybaseSignature(created_at=created))
        return FetchResult.success(parsed)
