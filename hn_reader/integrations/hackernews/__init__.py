"""Hacker News API client and concurrent top-stories aggregator."""

from hn_reader.integrations.hackernews.aggregator import (
    TOP_STORIES_LIMIT,
    fetch_stories,
    fetch_story_ids,
    fetch_top_stories,
)
from hn_reader.integrations.hackernews.client import DEFAULT_BASE_URL, HackerNewsClient
from hn_reader.integrations.hackernews.endpoints import Endpoint, Item, TopStories
from hn_reader.integrations.hackernews.errors import (
    DecodeError,
    HackerNewsError,
    ProtocolError,
    TransportError,
)
from hn_reader.integrations.hackernews.models import FetchResult, Story

__all__ = [
    "DEFAULT_BASE_URL",
    "TOP_STORIES_LIMIT",
    "DecodeError",
    "Endpoint",
    "FetchResult",
    "HackerNewsClient",
    "HackerNewsError",
    "Item",
    "ProtocolError",
    "Story",
    "TopStories",
    "TransportError",
    "fetch_stories",
    "fetch_story_ids",
    "fetch_top_stories",
]
