"""Feed view-model driving a consumer through the load lifecycle."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Callable, Sequence

from .errors import FeedError
from .fetchers import SimulatedFetcher
from .models import Article, FeedSnapshot, FeedState
from .types import ArticleFetcher, LoadableFeed

logger = logging.getLogger(__name__)

ChangeListener = Callable[[FeedSnapshot], None]


class FeedViewModel:
    """Owns a feed's lifecycle state and articles; ``load()`` refreshes both.

    State is written only from the coroutine running ``load()`` on the
    owning event loop. A newer ``load()`` supersedes an in-flight one: the
    older fetch is cancelled and its call returns without touching state.
    """

    def __init__(
        self,
        fetcher: ArticleFetcher | None = None,
        *,
        on_change: ChangeListener | None = None,
    ):
        self._fetcher = fetcher if fetcher is not None else SimulatedFetcher()
        self._on_change = on_change
        self._state = FeedState.LOADING
        self._articles: tuple[Article, ...] = ()
        self._inflight: asyncio.Future[Sequence[Article]] | None = None

    async def __aenter__(self) -> FeedViewModel:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        _ = exc_type
        _ = exc
        _ = traceback
        await self.aclose()

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._articles

    @property
    def is_loading(self) -> bool:
        return self._state is FeedState.LOADING

    def snapshot(self) -> FeedSnapshot:
        return FeedSnapshot(state=self._state, articles=self._articles)

    async def load(self) -> None:
        """Fetch articles and settle on DATA, EMPTY or ERROR.

        Fetch failures are logged and surface only as the ERROR state.
        Cancelling the calling task propagates CancelledError and leaves
        the feed in LOADING. Errors raised by the ``on_change`` listener are
        not absorbed; they propagate out of ``load()``.
        """
        self.cancel()
        self._transition(FeedState.LOADING, ())

        try:
            fetch = asyncio.ensure_future(self._fetcher.fetch())
        except Exception as error:
            self._fail(error)
            return
        self._inflight = fetch
        try:
            fetched = await fetch
        except asyncio.CancelledError:
            if self._inflight is fetch:
                self._inflight = None
                raise
            logger.debug("Feed load superseded before the fetch completed")
            return
        except Exception as error:
            if self._inflight is not fetch:
                return
            self._inflight = None
            self._fail(error)
            return

        if self._inflight is not fetch:
            logger.debug("Feed load superseded; dropping its result")
            return
        self._inflight = None

        articles = tuple(fetched)
        self._transition(FeedState.DATA if articles else FeedState.EMPTY, articles)

    async def retry(self) -> None:
        """Re-run ``load()``, e.g. from the error state."""
        await self.load()

    def cancel(self) -> None:
        """Cancel the in-flight fetch, if any; it will not write state."""
        fetch = self._inflight
        self._inflight = None
        if fetch is not None and not fetch.done():
            logger.debug("Cancelling in-flight feed fetch")
            fetch.cancel()

    async def aclose(self) -> None:
        """Cancel the in-flight fetch and wait for it to unwind."""
        fetch = self._inflight
        self.cancel()
        if fetch is not None:
            await asyncio.gather(fetch, return_exceptions=True)

    def _fail(self, error: Exception) -> None:
        logger.warning(f"Feed fetch failed: {error}")
        self._transition(FeedState.ERROR, ())

    def _transition(self, state: FeedState, articles: tuple[Article, ...]) -> None:
        snapshot = FeedSnapshot(state=state, articles=articles)
        self._state = snapshot.state
        self._articles = snapshot.articles
        logger.debug(f"Feed state -> {state.name} ({len(articles)} article(s))")
        if self._on_change is not None:
            self._on_change(snapshot)


def load_blocking(feed: LoadableFeed) -> None:
    """Sync wrapper for ``feed.load()``."""
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(feed.load())
        return
    raise FeedError(
        "Cannot load a feed synchronously inside an active event loop; "
        "await feed.load() instead"
    )
