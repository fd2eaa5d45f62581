"""Shared fixtures for maven feed tests."""

import json
from typing import Callable, Optional

import httpx
import pytest

from maven_feed.config import Config
from maven_feed.core.fetcher import ArtifactFetcher

CONFIG_ENV_VARS = [
    "BIND_HOST",
    "BIND_PORT",
    "ARTIFACTS",
    "SELF_URL",
    "DEBUG_ENABLED",
    "SEARCH_URL",
    "MAX_RESULTS",
    "LOG_LEVEL",
    "LOG_FILE_PATH",
]

SEARCH_URL = "https://search.example.test/solrsearch/select"
SELF_URL = "https://feeds.example.test/atom"


def search_body(*docs: tuple[str, str, str, int]) -> str:
    """Build a search API response body from (group, name, version, timestamp) tuples."""
    return json.dumps(
        {
            "responseHeader": {"status": 0},
            "response": {
                "numFound": len(docs),
                "start": 0,
                "docs": [
                    {"id": f"{g}:{a}:{v}", "g": g, "a": a, "v": v, "p": "jar", "timestamp": ts}
                    for g, a, v, ts in docs
                ],
            },
        }
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of configuration tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_config() -> Callable[..., Config]:
    """Build a Config without reading any .env file."""

    def _make(**overrides) -> Config:
        values = {
            "artifacts": "com.example:lib-a|org.example:lib-b",
            "self_url": SELF_URL,
            "search_url": SEARCH_URL,
        }
        values.update(overrides)
        return Config(_env_file=None, **values)

    return _make


@pytest.fixture
def make_fetcher() -> Callable[..., ArtifactFetcher]:
    """Build a fetcher whose HTTP traffic goes to a stub handler.

    The handler receives the httpx.Request; its ``requests`` list records
    every request made.
    """

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        requests: Optional[list] = None,
    ) -> ArtifactFetcher:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return handler(request)

        client = httpx.Client(transport=httpx.MockTransport(_recording_handler))
        return ArtifactFetcher(search_url=SEARCH_URL, client=client)

    return _make


@pytest.fixture
def bodies_by_artifact() -> Callable[[dict], Callable[[httpx.Request], httpx.Response]]:
    """Build a handler answering each query with the body keyed by artifact name."""

    def _make(bodies: dict) -> Callable[[httpx.Request], httpx.Response]:
        def handler(request: httpx.Request) -> httpx.Response:
            query = request.url.params["q"]
            for name, body in bodies.items():
                if f'a:"{name}"' in query:
                    return httpx.Response(200, text=body)
            return httpx.Response(200, text=search_body())

        return handler

    return _make


@pytest.fixture
def build_search_body() -> Callable[..., str]:
    """Expose search_body to tests."""
    return search_body
