"""HTTP access to the film catalog with a process-lifetime cache.

Every locator is fetched over the network at most once per `Fetcher`:
completed responses live in the injected cache, and concurrent requests for
the same locator wait on the one already in flight instead of issuing a
second GET.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import MutableMapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Iterable

import httpx

from .errors import FetchError
from .settings import Settings

logger = logging.getLogger(__name__)

USER_AGENT = "swapi-browser/0.1"


def build_client(settings: Settings | None = None) -> httpx.Client:
    """Create an `httpx.Client` with the browser's defaults.

    A `None` timeout disables httpx's default five-second limit so a slow
    upstream blocks rather than fails.
    """

    settings = settings or Settings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.SWAPI_HTTP_TIMEOUT),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
    )


class Fetcher:
    """Memoizing GET client for catalog resources.

    Args:
        client: httpx client used for every request
        base_url: API root; relative locators are joined onto it
        cache: Mapping of absolute URL -> parsed JSON (new dict if omitted)
        max_workers: Upper bound on parallel requests in `fetch_many`
    """

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        cache: MutableMapping[str, Any] | None = None,
        max_workers: int = 8,
    ):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.cache: MutableMapping[str, Any] = {} if cache is None else cache
        self.max_workers = max(1, max_workers)
        self._owns_client = False
        self._lock = threading.Lock()
        self._inflight: dict[str, Future] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> Fetcher:
        fetcher = cls(
            build_client(settings),
            settings.SWAPI_BASE_URL,
            max_workers=settings.SWAPI_MAX_WORKERS,
        )
        fetcher._owns_client = True
        return fetcher

    def resolve(self, locator: str) -> str:
        """Absolute URL for a locator; API paths like "films" join onto base_url."""
        if locator.startswith(("http://", "https://")):
            return locator
        return f"{self.base_url}/{locator.lstrip('/')}"

    def fetch(self, locator: str) -> Any:
        """Return the parsed JSON body for `locator`, hitting the network at most once."""
        url = self.resolve(locator)

        with self._lock:
            if url in self.cache:
                logger.debug("cache hit %s", url)
                return self.cache[url]
            pending = self._inflight.get(url)
            owner = pending is None
            if owner:
                pending = Future()
                self._inflight[url] = pending

        if not owner:
            logger.debug("waiting on in-flight request %s", url)
            return pending.result()

        try:
            data = self._get(url)
        except BaseException as exc:
            # Ctrl+C included: waiters and later callers must not block on this URL.
            with self._lock:
                self._inflight.pop(url, None)
            pending.set_exception(exc)
            raise

        with self._lock:
            self.cache[url] = data
            self._inflight.pop(url, None)
        pending.set_result(data)
        return data

    def fetch_many(self, locators: Iterable[str]) -> list[Any]:
        """Fetch all locators in parallel, preserving input order.

        The whole call fails if any single fetch fails.
        """
        locators = list(locators)
        if not locators:
            return []
        workers = min(self.max_workers, len(locators))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="swapi-fetch") as pool:
            return list(pool.map(self.fetch, locators))

    def films(self) -> list[dict]:
        """The catalog's film list (first and only page)."""
        return list(self.fetch("films")["results"])

    def _get(self, url: str) -> Any:
        logger.info("GET %s", url)
        try:
            response = self.client.get(url)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise FetchError(url, exc) from exc

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> Fetcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
