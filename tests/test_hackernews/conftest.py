"""Fixtures for Hacker News client tests.

FakeHackerNews serves the two API endpoints through httpx.MockTransport,
so tests exercise the real client code without touching the network.
"""

import asyncio
import re

import httpx
import pytest

from hn_reader.integrations.hackernews import HackerNewsClient

ITEM_PATH = re.compile(r"^/v0/item/(\d+)\.json$")


class FakeHackerNews:
    """In-memory stand-in for the Hacker News API.

    Args:
        ranking: Body for /topstories.json, or an httpx.Response / exception
        items: Mapping of story ID to body, httpx.Response or exception
        delays: Optional per-ID delay in seconds before answering
    """

    def __init__(self, ranking=None, items=None, delays=None):
        self.ranking = ranking if ranking is not None else []
        self.items = items or {}
        self.delays = delays or {}
        self.requested_paths: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @staticmethod
    def _respond(spec, request: httpx.Request) -> httpx.Response:
        if isinstance(spec, Exception):
            raise spec
        if isinstance(spec, httpx.Response):
            return spec
        return httpx.Response(200, json=spec)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requested_paths.append(path)

        if path == "/v0/topstories.json":
            return self._respond(self.ranking, request)

        match = ITEM_PATH.match(path)
        if not match:
            return httpx.Response(404, json=None)

        story_id = int(match.group(1))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(story_id, 0))
        finally:
            self.in_flight -= 1

        if story_id not in self.items:
            return httpx.Response(200, content=b"null")
        return self._respond(self.items[story_id], request)

    @property
    def item_requests(self) -> list[str]:
        return [p for p in self.requested_paths if ITEM_PATH.match(p)]

    def client(self) -> HackerNewsClient:
        return HackerNewsClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def make_client():
    """Build a client whose requests are answered by a handler function."""

    def _make(handler) -> HackerNewsClient:
        return HackerNewsClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def fake_hn():
    """Factory for FakeHackerNews instances."""
    return FakeHackerNews
