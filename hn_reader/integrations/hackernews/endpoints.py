"""Endpoint descriptors for the Hacker News API.

The client only knows two request shapes: the top-stories ranking and a
single item. Each maps to a fixed path segment under the API base URL.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TopStories:
    """Ranking of current top story IDs."""

    @property
    def path(self) -> str:
        return "topstories"


@dataclass(frozen=True)
class Item:
    """A single item (story) by ID."""

    id: int

    @property
    def path(self) -> str:
        return f"item/{self.id}"


Endpoint = TopStories | Item
