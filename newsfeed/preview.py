"""Fixture-backed feeds for rendering every lifecycle state without I/O."""

from __future__ import annotations

from typing import Sequence

from .models import FIXTURE_ARTICLES, Article, FeedState


class MockFeedViewModel:
    """Feed pinned to one state, for previews and tests.

    Articles are derived once from ``state``: the fixtures for DATA and
    nothing otherwise. ``load()`` and ``retry()`` deliberately do nothing so
    a preview renders the same state every time; consumers that await
    ``load()`` get control back immediately.
    """

    def __init__(
        self,
        state: FeedState,
        *,
        fixtures: Sequence[Article] = FIXTURE_ARTICLES,
    ):
        self._state = state
        self._articles = _articles_for(state, tuple(fixtures))

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._articles

    @property
    def is_loading(self) -> bool:
        return self._state is FeedState.LOADING

    async def load(self) -> None:
        return None

    async def retry(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"MockFeedViewModel({self._state.name}, {len(self._articles)} article(s))"


def _articles_for(
    state: FeedState,
    fixtures: tuple[Article, ...],
) -> tuple[Article, ...]:
    if state is FeedState.DATA:
        if not fixtures:
            raise ValueError("A DATA preview needs at least one fixture article")
        return fixtures
    return ()


def preview_feeds(
    fixtures: Sequence[Article] = FIXTURE_ARTICLES,
) -> dict[FeedState, MockFeedViewModel]:
    """One mock feed per lifecycle state, in declaration order."""
    return {state: MockFeedViewModel(state, fixtures=fixtures) for state in FeedState}
