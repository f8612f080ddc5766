"""Articles, feed lifecycle states and fixture data."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class FeedState(Enum):
    """Lifecycle phase of a feed; decides which view branch renders."""

    LOADING = "loading"
    DATA = "data"
    EMPTY = "empty"
    ERROR = "error"

    @property
    def title(self) -> str:
        """Display name used for per-state previews."""
        return _STATE_TITLES[self]

    @property
    def has_articles(self) -> bool:
        return self is FeedState.DATA


_STATE_TITLES = {
    FeedState.LOADING: "Loading progress state",
    FeedState.DATA: "Data state",
    FeedState.EMPTY: "No data available state.",
    FeedState.ERROR: "Error fetching state",
}


@dataclass(frozen=True)
class Article:
    """A single news article."""

    title: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class FeedSnapshot:
    """Point-in-time view of a feed handed to change listeners.

    Raises ValueError when ``articles`` disagrees with ``state``.
    """

    state: FeedState
    articles: tuple[Article, ...] = ()

    def __post_init__(self) -> None:
        if self.state.has_articles and not self.articles:
            raise ValueError("DATA state requires at least one article")
        if not self.state.has_articles and self.articles:
            raise ValueError(f"{self.state.name} state must not carry articles")


FIXTURE_ARTICLES: tuple[Article, ...] = (
    Article(title="Apple Unveils New MacBook Pro with M3 Chip"),
    Article(title="iOS 17 Release Date Announced by Apple"),
    Article(title="Apple's Q3 2024 Earnings Exceed Expectations"),
    Article(title="Apple Watch Series 9 Features Leaked"),
    Article(title="Apple Expands Services with New Fitness+ Updates"),
)
