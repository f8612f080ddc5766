"""State-driven news feed view-models with deterministic preview doubles."""

from .errors import FeedConfigError, FeedError, FetchFailed
from .fetchers import SimulatedFetcher
from .models import FIXTURE_ARTICLES, Article, FeedSnapshot, FeedState
from .preview import MockFeedViewModel, preview_feeds
from .types import ArticleFetcher, LoadableFeed
from .view_model import FeedViewModel, load_blocking

__all__ = [
    "FIXTURE_ARTICLES",
    "Article",
    "ArticleFetcher",
    "FeedConfigError",
    "FeedError",
    "FeedSnapshot",
    "FeedState",
    "FeedViewModel",
    "FetchFailed",
    "LoadableFeed",
    "MockFeedViewModel",
    "SimulatedFetcher",
    "load_blocking",
    "preview_feeds",
]
