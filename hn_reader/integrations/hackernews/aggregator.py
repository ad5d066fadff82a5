"""Concurrent top-stories aggregator.

Fetches the top-stories ranking, then fetches the first N stories
concurrently and collects whatever succeeded.

Failure policy:
- Ranking fetch fails → empty list, no item requests are made
- Item fetch fails → that story is dropped, siblings keep running
- Nothing is retried and nothing is raised to the caller

The returned list is in completion order, which is not the ranking order
and varies between runs.
"""

import asyncio
import logging
from collections.abc import Iterable

from hn_reader.integrations.hackernews.client import HackerNewsClient
from hn_reader.integrations.hackernews.models import Story

logger = logging.getLogger(__name__)

TOP_STORIES_LIMIT = 10


async def fetch_story_ids(client: HackerNewsClient) -> list[int]:
    """Fetch the top-stories ranking, degrading to an empty list on failure."""
    result = await client.fetch_top_story_ids()
    return result.value_or([])


async def fetch_stories(
    client: HackerNewsClient,
    story_ids: Iterable[int],
) -> list[Story]:
    """Fetch stories concurrently, one task per ID.

    All requests are dispatched up front. Results are appended by this
    coroutine as each task completes; failed fetches are skipped. Returns
    once every task has finished. If the caller is cancelled, the task
    group cancels the outstanding requests.

    Args:
        client: API client shared by all tasks
        story_ids: IDs to fetch

    Returns:
        Successfully decoded stories, in completion order
    """
    story_ids = list(story_ids)
    stories: list[Story] = []

    if not story_ids:
        return stories

    async with asyncio.TaskGroup() as group:
        tasks = [
            group.create_task(client.fetch_story(story_id))
            for story_id in story_ids
        ]
        for next_done in asyncio.as_completed(tasks):
            result = await next_done
            if result.ok:
                stories.append(result.value)

    logger.debug(f"Fetched {len(stories)} of {len(story_ids)} stories")
    return stories


async def fetch_top_stories(
    client: HackerNewsClient,
    limit: int = TOP_STORIES_LIMIT,
) -> list[Story]:
    """Fetch up to ``limit`` of the current top stories.

    Args:
        client: API client
        limit: Number of ranking entries to fetch (default: 10)

    Returns:
        Populated, partial or empty list of stories in completion order

    Raises:
        ValueError: If limit is not positive
    """
    if limit <= 0:
        raise ValueError("Limit must be positive")

    story_ids = (await fetch_story_ids(client))[:limit]
    return await fetch_stories(client, story_ids)
