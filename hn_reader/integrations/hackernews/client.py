"""Hacker News API client.

Issues single GET requests against the Hacker News Firebase API and decodes
the JSON body into a caller-specified shape. Each call is one-shot: no
retries, no caching. Failures are returned, not raised.
"""

import logging
from types import MappingProxyType
from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from hn_reader.integrations.hackernews.endpoints import Endpoint, Item, TopStories
from hn_reader.integrations.hackernews.errors import (
    DecodeError,
    ProtocolError,
    TransportError,
)
from hn_reader.integrations.hackernews.models import FetchResult, Story

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://hacker-news.firebaseio.com/v0/"

# Same as httpx's own default
DEFAULT_TIMEOUT = 5.0


class HackerNewsClient:
    """Client for the Hacker News JSON API.

    Holds only immutable configuration, so one instance can be shared by
    any number of concurrent fetches.

    Args:
        base_url: API root, e.g. ``https://hacker-news.firebaseio.com/v0/``
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport (tests inject ``httpx.MockTransport``)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url cannot be empty")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        base_url = base_url.strip()
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._timeout = timeout
        self._transport = transport
        # Adapters for the two endpoint shapes, built once per client
        self._adapters = MappingProxyType(
            {list[int]: TypeAdapter(list[int]), Story: TypeAdapter(Story)}
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _adapter_for(self, shape: type[T]) -> TypeAdapter:
        adapter = self._adapters.get(shape)
        return adapter if adapter is not None else TypeAdapter(shape)

    def url_for(self, endpoint: Endpoint) -> str:
        """Build the full URL for an endpoint descriptor."""
        return self._base_url + endpoint.path + ".json"

    async def fetch(self, endpoint: Endpoint, shape: type[T]) -> FetchResult[T]:
        """Fetch an endpoint and decode the body as ``shape``.

        Args:
            endpoint: TopStories() or Item(id)
            shape: Expected result type, e.g. ``list[int]`` or ``Story``

        Returns:
            FetchResult carrying the decoded value, or a TransportError,
            ProtocolError or DecodeError
        """
        url = self.url_for(endpoint)

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
            ) as client:
                response = await client.get(url)
        except httpx.DecodingError as e:
            # Body could not be decompressed or decoded
            logger.debug(f"GET {url} -> {type(e).__name__}")
            error = DecodeError(str(e) or type(e).__name__, url=url)
            error.__cause__ = e
            return FetchResult.failure(error)
        except httpx.RequestError as e:
            # Connect, DNS, timeout, too many redirects and other request failures
            logger.debug(f"GET {url} -> {type(e).__name__}")
            error = TransportError(str(e) or type(e).__name__, url=url)
            error.__cause__ = e
            return FetchResult.failure(error)

        logger.debug(f"GET {url} -> {response.status_code}")

        if not response.is_success:
            return FetchResult.failure(
                ProtocolError(
                    f"Unexpected HTTP status {response.status_code}",
                    status_code=response.status_code,
                    url=url,
                )
            )

        try:
            value = self._adapter_for(shape).validate_json(response.content, strict=True)
        except ValidationError as e:
            error = DecodeError(
                f"Response does not match {getattr(shape, '__name__', shape)}: "
                f"{e.error_count()} validation error(s)",
                url=url,
                errors=e.errors(include_url=False),
            )
            error.__cause__ = e
            return FetchResult.failure(error)

        return FetchResult.success(value)

    async def fetch_top_story_ids(self) -> FetchResult[list[int]]:
        """Fetch the current top-stories ranking."""
        return await self.fetch(TopStories(), list[int])

    async def fetch_story(self, story_id: int) -> FetchResult[Story]:
        """Fetch a single story by ID."""
        return await self.fetch(Item(story_id), Story)
