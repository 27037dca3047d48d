from __future__ import annotations

import io
import os
import sys
from collections import Counter

import httpx
import pytest
from rich.console import Console


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `swapi_browser/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from swapi_browser.fetcher import Fetcher  # noqa: E402
from swapi_browser.settings import Settings  # noqa: E402
from swapi_browser.tui import screens  # noqa: E402,F401
from swapi_browser.tui.navigator import Navigator  # noqa: E402
from swapi_browser.tui.router import Router  # noqa: E402
from swapi_browser.tui.state import UIState  # noqa: E402

BASE = "https://swapi.test/api"

NEW_HOPE = {
    "title": "A New Hope",
    "episode_id": 4,
    "director": "George Lucas",
    "release_date": "1977-05-25",
    "opening_crawl": "It is a period of civil war.",
    "characters": [f"{BASE}/people/1/", f"{BASE}/people/5/"],
    "planets": [f"{BASE}/planets/1/", f"{BASE}/planets/2/"],
    "starships": [f"{BASE}/starships/9/"],
    "url": f"{BASE}/films/1/",
}

HOLIDAY_SPECIAL = {
    "title": "Holiday Special",
    "episode_id": 0,
    "director": "Steve Binder",
    "release_date": "1978-11-17",
    "characters": [],
    "planets": [],
    "starships": [],
    "url": f"{BASE}/films/99/",
}

RESOURCES = {
    f"{BASE}/films": {"count": 2, "results": [NEW_HOPE, HOLIDAY_SPECIAL]},
    f"{BASE}/people/1/": {
        "name": "Luke Skywalker",
        "height": "172",
        "mass": "77",
        "hair_color": "blond",
        "eye_color": "blue",
        "birth_year": "19BBY",
    },
    f"{BASE}/people/5/": {
        "name": "Leia Organa",
        "height": "150",
        "mass": "49",
        "hair_color": "brown",
        "eye_color": "brown",
        "birth_year": "19BBY",
    },
    f"{BASE}/planets/1/": {
        "name": "Tatooine",
        "climate": "arid",
        "terrain": "desert",
        "population": "200000",
        "diameter": "10465",
    },
    f"{BASE}/planets/2/": {
        "name": "Alderaan",
        "climate": "temperate",
        "terrain": "grasslands, mountains",
        "population": "2000000000",
    },
    f"{BASE}/starships/9/": {
        "name": "Death Star",
        "model": "DS-1 Orbital Battle Station",
        "manufacturer": "Imperial Department of Military Research",
        "crew": "342,953",
        "passengers": "843,342",
        "starship_class": "Deep Space Mobile Battlestation",
    },
}


class FakeCatalog:
    """httpx transport serving RESOURCES and counting requests per URL."""

    def __init__(self, resources: dict | None = None):
        self.resources = dict(RESOURCES if resources is None else resources)
        self.requests: Counter[str] = Counter()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests[url] += 1
        if url not in self.resources:
            return httpx.Response(404, json={"detail": "Not found"})
        return httpx.Response(200, json=self.resources[url])

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


class ScriptedSelector:
    """Stands in for the questionary prompt, picking options by label."""

    def __init__(self, *labels: str):
        self.labels = list(labels)
        self.calls: list[tuple[str, list[str], object]] = []

    def __call__(self, prompt, options, default=None):
        offered = [label for label, _ in options]
        self.calls.append((prompt, offered, default))
        if not self.labels:
            raise AssertionError(f"Unexpected prompt {prompt!r} offering {offered}")
        wanted = self.labels.pop(0)
        for label, value in options:
            if label == wanted:
                return value
        raise AssertionError(f"{wanted!r} not offered by {prompt!r}: {offered}")

    @property
    def prompts(self) -> list[str]:
        return [prompt for prompt, _, _ in self.calls]


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def fetcher(catalog: FakeCatalog):
    with catalog.client() as client:
        yield Fetcher(client, BASE)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), record=True, width=200)


@pytest.fixture
def make_router(fetcher: Fetcher, console: Console):
    """Build a Router wired to the fake catalog and a scripted selector."""

    def _make(*labels: str) -> tuple[Router, ScriptedSelector]:
        selector = ScriptedSelector(*labels)
        router = Router(
            console=console,
            settings=Settings(SWAPI_BASE_URL=BASE),
            state=UIState(),
            nav=Navigator(),
            fetcher=fetcher,
            selector=selector,
        )
        return router, selector

    return _make
