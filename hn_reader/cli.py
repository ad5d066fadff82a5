"""Command-line reader for Hacker News top stories.

Thin presentation layer over the aggregator: fetches the top stories and
prints them as a numbered list, or shows the detail view of one story.
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from hn_reader.integrations.hackernews import (
    HackerNewsClient,
    Story,
    fetch_top_stories,
)
from hn_reader.utils.config import get_settings
from hn_reader.utils.logging_config import get_logger, setup_logging

HN_ITEM_URL = "https://news.ycombinator.com/item?id={id}"


def render_stories(stories: list[Story]) -> str:
    """Render stories as a numbered list.

    Example Output:
        ======================================================================
        TOP STORIES
        ======================================================================
        1. Show HN: Something
        2. Ask HN: Something else
    """
    if not stories:
        return "No stories available"

    lines = ["=" * 70, "TOP STORIES", "=" * 70]
    for idx, story in enumerate(stories, start=1):
        lines.append(f"{idx}. {story.title or ''}")
    return "\n".join(lines)


def render_story(story: Story) -> str:
    """Render the detail view of a single story."""
    return "\n".join(
        [
            story.title or "",
            "-" * 70,
            HN_ITEM_URL.format(id=story.id),
        ]
    )


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hn-reader",
        description="Show the current Hacker News top stories.",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        default=None,
        help="number of top stories to fetch (default: TOP_STORIES_LIMIT, 10)",
    )
    parser.add_argument(
        "--show",
        type=_positive_int,
        metavar="ID",
        default=None,
        help="show a single story instead of the list",
    )
    parser.add_argument("--json", action="store_true", help="print stories as JSON")
    parser.add_argument("--log-json", action="store_true", help="emit JSON log lines")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``hn-reader`` command.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(use_json=args.log_json)
    logger = get_logger(__name__)

    client = HackerNewsClient(settings.HN_BASE_URL, timeout=settings.API_TIMEOUT)

    if args.show is not None:
        result = asyncio.run(client.fetch_story(args.show))
        if not result.ok:
            logger.warning(f"Could not load story {args.show}: {result.error}")
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        story = result.value
        print(json.dumps(story.model_dump()) if args.json else render_story(story))
        return 0

    limit = args.limit or settings.TOP_STORIES_LIMIT
    stories = asyncio.run(fetch_top_stories(client, limit=limit))
    logger.info(f"Loaded {len(stories)} stories")

    if args.json:
        print(json.dumps([story.model_dump() for story in stories]))
    else:
        print(render_stories(stories))
    return 0


if __name__ == "__main__":
    sys.exit(main())
