import argparse
import logging
from pathlib import Path

from newsfeed.config import (
    DEFAULT_FETCH_DELAY_SECONDS,
    FEED_TITLE,
    FIXTURES_FILE_NAME,
    load_fixture_articles,
)
from newsfeed.errors import FeedConfigError
from newsfeed.fetchers import SimulatedFetcher
from newsfeed.log import configure_logging
from newsfeed.models import FIXTURE_ARTICLES, Article, FeedSnapshot, FeedState
from newsfeed.preview import preview_feeds
from newsfeed.view_model import FeedViewModel, load_blocking

logger = logging.getLogger(__name__)


def resolve_fixtures_or_exit(fixtures_path: str | None) -> tuple[Article, ...]:
    """Return fixture articles from ``fixtures_path`` or the built-in set.

    Without ``fixtures_path``, a ``fixtures.yaml`` in the working directory
    is used when present.
    """
    if fixtures_path is None:
        default_path = Path.cwd() / FIXTURES_FILE_NAME
        if not default_path.is_file():
            return FIXTURE_ARTICLES
        logger.debug(f"Using fixtures from {default_path}")
        path = default_path
    else:
        path = Path(fixtures_path)
    try:
        return load_fixture_articles(path)
    except FeedConfigError as e:
        logger.error(str(e))
        raise SystemExit(1)


def _log_articles(articles: tuple[Article, ...]) -> None:
    for index, article in enumerate(articles, start=1):
        logger.info(f"  {index}. {article.title}")


def _log_transition(snapshot: FeedSnapshot) -> None:
    logger.info(f"{FEED_TITLE}: {snapshot.state.title}")


def run_load(args):
    """Load the feed once through the real view-model."""
    if args.empty:
        if args.fixtures is not None:
            logger.warning(f"Ignoring fixtures file {args.fixtures} because of --empty")
        articles: tuple[Article, ...] = ()
    else:
        articles = resolve_fixtures_or_exit(args.fixtures)
    try:
        fetcher = SimulatedFetcher(
            delay_seconds=args.delay,
            articles=articles,
            fail=args.fail,
        )
    except FeedConfigError as e:
        logger.error(str(e))
        raise SystemExit(1)

    feed = FeedViewModel(fetcher, on_change=_log_transition)
    logger.debug(f"Loading feed with a {fetcher.delay_seconds}s simulated delay")
    load_blocking(feed)

    if feed.state is FeedState.ERROR:
        logger.error("Error fetching data.")
        raise SystemExit(1)
    if feed.state is FeedState.EMPTY:
        logger.info("No data available.")
        return
    logger.info(f"{FEED_TITLE} ({len(feed.articles)} article(s)):")
    _log_articles(feed.articles)


def run_preview(args):
    """Show what every lifecycle state hands to a consumer."""
    fixtures = resolve_fixtures_or_exit(args.fixtures)
    try:
        feeds = preview_feeds(fixtures)
    except ValueError as e:
        logger.error(f"Cannot build previews: {e}")
        raise SystemExit(1)

    for state, feed in feeds.items():
        load_blocking(feed)
        logger.info(
            f"Preview '{state.title}': {state.name}, {len(feed.articles)} article(s)"
        )
        _log_articles(feed.articles)


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="newsfeed – State-driven news feed view-models.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    # Load parser
    load_parser = subparsers.add_parser(
        "load",
        help="Load the feed once with a simulated fetch",
    )
    load_parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_FETCH_DELAY_SECONDS,
        help=f"Simulated fetch delay in seconds (default: {DEFAULT_FETCH_DELAY_SECONDS})",
    )
    outcome = load_parser.add_mutually_exclusive_group()
    outcome.add_argument(
        "--empty",
        action="store_true",
        help="Simulate a fetch that returns no articles",
    )
    outcome.add_argument(
        "--fail",
        action="store_true",
        help="Simulate a failing fetch",
    )
    load_parser.add_argument(
        "--fixtures",
        "-f",
        help=f"YAML file with fixture article titles (default: ./{FIXTURES_FILE_NAME} if present)",
    )
    load_parser.set_defaults(handler=run_load)

    # Preview parser
    preview_parser = subparsers.add_parser(
        "preview",
        help="Show every lifecycle state using fixture data",
    )
    preview_parser.add_argument(
        "--fixtures",
        "-f",
        help=f"YAML file with fixture article titles (default: ./{FIXTURES_FILE_NAME} if present)",
    )
    preview_parser.set_defaults(handler=run_preview)

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    configure_logging(stream_level=log_level)

    if hasattr(args, "handler"):
        args.handler(args)
    else:
        print("=" * 60)
        print("newsfeed – State-driven news feed view-models")
        print("=" * 60)
        print()
        print("Available commands:")
        print("  load     Load the feed once with a simulated fetch")
        print("  preview  Show every lifecycle state using fixture data")
        print()
        print("Usage examples:")
        print("  newsfeed load --delay 0.5          # Load with a short delay")
        print("  newsfeed load --fail               # Exercise the error state")
        print("  newsfeed preview -f fixtures.yaml  # Preview with custom fixtures")
        print()
        print("For more information:")
        print("  newsfeed --help                 # Show general help")
        print("  newsfeed <command> --help       # Show help for a specific command")
        print("=" * 60)


if __name__ == "__main__":
    main()
