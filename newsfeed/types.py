"""Capability protocols shared by real and preview feeds."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from .models import Article, FeedState


@runtime_checkable
class LoadableFeed(Protocol):
    """Anything a consumer can render from: a state, its articles and load()."""

    @property
    def state(self) -> FeedState:
        """Current lifecycle state."""

    @property
    def articles(self) -> tuple[Article, ...]:
        """Articles for the current state; empty unless state is DATA."""

    async def load(self) -> None:
        """Bring the feed up to date; returns once the feed has settled."""


class ArticleFetcher(Protocol):
    """Async source of articles."""

    async def fetch(self) -> Sequence[Article]:
        """Return the current article list, raising FetchFailed on failure."""
