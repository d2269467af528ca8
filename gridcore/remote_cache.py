"""
Fetch-with-retry front for the catalog API.

Every network read goes through RemoteDataCache. Successful JSON responses
are kept in the session store for the rest of the session; failed fetches
degrade to a caller-supplied fallback and are never cached.
"""
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from .exceptions import DecodeFailure, HttpStatusFailure, RemoteFetchError, TransportFailure
from .session_store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.changes.tg"
DEFAULT_USER_AGENT = "NFT-Gift-Planner/1.0"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def cache_key_for(endpoint: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore."""
    return _NON_ALNUM.sub("_", endpoint)


@dataclass(frozen=True, slots=True)
class Success:
    payload: Any
    from_cache: bool = False


@dataclass(frozen=True, slots=True)
class Exhausted:
    fallback: Any
    attempts: int
    last_error: Optional[RemoteFetchError] = None


FetchResult = Union[Success, Exhausted]


class RemoteDataCache:
    """
    Session-cached JSON fetcher with linear backoff.

    Concurrent fetches of the same endpoint are not coalesced; each one
    runs its own attempts and the last successful write wins.
    """

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        max_attempts: int = 3,
        backoff_seconds: float = 0.8,
        request_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.store = store if store is not None else SessionStore()
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.request_timeout = request_timeout
        self.session = session or requests.Session()
        self.network_calls = 0

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Connection": "close",
            "Cache-Control": "no-store",
            "Pragma": "no-cache",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def is_cached(self, endpoint: str) -> bool:
        return cache_key_for(endpoint) in self.store

    async def fetch(self, endpoint: str, fallback: Any = None) -> Any:
        """
        Return the payload for an endpoint, or the fallback if every attempt fails.

        Never raises for network, status or decode problems.
        """
        result = await self.fetch_result(endpoint, fallback)
        if isinstance(result, Success):
            return result.payload
        return result.fallback

    async def fetch_result(self, endpoint: str, fallback: Any = None) -> FetchResult:
        key = cache_key_for(endpoint)
        cached = self._read_cached(key)
        if cached is not None:
            logger.debug("Cache hit for %s", endpoint)
            return Success(cached[0], from_cache=True)

        last_error: Optional[RemoteFetchError] = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                payload = await self._attempt(endpoint)
            except RemoteFetchError as e:
                last_error = e
                logger.warning("Attempt %d/%d failed for %s: %s", attempt, self.max_attempts, endpoint, e)
                if attempt < self.max_attempts:
                    await asyncio.sleep(self.backoff_seconds * attempt)
                continue

            self.store.set_item(key, json.dumps(payload))
            logger.debug("Fetched %s on attempt %d", endpoint, attempt)
            return Success(payload)

        logger.error("Using fallback for %s", endpoint)
        return Exhausted(fallback, attempts=self.max_attempts, last_error=last_error)

    def _read_cached(self, key: str) -> Optional[tuple]:
        raw = self.store.get_item(key)
        if raw is None:
            return None
        try:
            return (json.loads(raw),)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unreadable cache entry %s: %s", key, e)
            return None

    def _request(self, url: str) -> requests.Response:
        return self.session.get(url, headers=self.headers, timeout=self.request_timeout)

    async def _attempt(self, endpoint: str) -> Any:
        url = self.url_for(endpoint)
        self.network_calls += 1
        try:
            response = await asyncio.to_thread(self._request, url)
        except requests.RequestException as e:
            raise TransportFailure(endpoint, str(e)) from e
        except Exception as e:
            logger.exception("Unexpected error requesting %s", url)
            raise TransportFailure(endpoint, repr(e)) from e

        try:
            if not response.ok:
                raise HttpStatusFailure(endpoint, response.status_code, response.reason)
            try:
                return response.json()
            except ValueError as e:
                raise DecodeFailure(endpoint, f"invalid JSON body: {e}") from e
        finally:
            response.close()

    def close(self) -> None:
        self.session.close()
        logger.info("RemoteDataCache closed")
