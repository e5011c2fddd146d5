"""Base client interface and shared result types."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class FetchError:
    """Why a platform lookup produced no usable data."""
    platform: str
    reason: str


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Either a parsed value or a FetchError, never both."""
    value: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, platform: str, reason: str) -> "FetchResult[T]":
        return cls(error=FetchError(platform, reason))


class PlatformClient:
    """Shared HTTP plumbing for platform clients.

    Lookups must return a FetchResult even on failure; nothing raised by
    httpx or by a malformed body escapes a client.
    """

    platform_name: str = "unknown"

    def __init__(self, http: Optional[httpx.AsyncClient] = None, timeout: float = DEFAULT_TIMEOUT):
        self._http = http
        self.timeout = timeout

    def _fail(self, reason: str) -> FetchResult[Any]:
        logger.warning("%s lookup failed: %s", self.platform_name, reason)
        return FetchResult.failure(self.platform_name, reason)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        if self._http is not None:
            return await self._http.request(method, url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def _request_json(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        data: Any = None,
    ) -> FetchResult[Any]:
        """Issue a request and decode its JSON body."""
        try:
            resp = await self._send(method, url, params=params, headers=headers, data=data)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._fail(f"{url}: {e}")

        if resp.status_code != 200:
            return self._fail(f"{url}: HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as e:
            return self._fail(f"{url}: invalid JSON ({e})")
        return FetchResult.success(body)

    async def _get_json(self, url: str, **kwargs: Any) -> FetchResult[Any]:
        return await self._request_json("GET", url, **kwargs)
