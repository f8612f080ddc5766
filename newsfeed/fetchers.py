"""Simulated article fetch standing in for a network round trip."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from .config import DEFAULT_FETCH_DELAY_SECONDS
from .errors import FeedConfigError, FetchFailed
from .models import FIXTURE_ARTICLES, Article

logger = logging.getLogger(__name__)


class SimulatedFetcher:
    """Wait ``delay_seconds``, then return ``articles`` or fail.

    Articles are copied at construction; every fetch returns the same list.
    """

    def __init__(
        self,
        *,
        delay_seconds: float = DEFAULT_FETCH_DELAY_SECONDS,
        articles: Sequence[Article] = FIXTURE_ARTICLES,
        fail: bool = False,
    ):
        if isinstance(delay_seconds, bool) or delay_seconds < 0:
            raise FeedConfigError("delay_seconds must be >= 0")
        self._delay_seconds = float(delay_seconds)
        self._articles = tuple(articles)
        self._fail = fail
        self.calls = 0

    @property
    def delay_seconds(self) -> float:
        return self._delay_seconds

    async def fetch(self) -> tuple[Article, ...]:
        self.calls += 1
        logger.debug(f"Simulated fetch #{self.calls}: waiting {self._delay_seconds}s")
        await asyncio.sleep(self._delay_seconds)
        if self._fail:
            raise FetchFailed("Simulated fetch failure")
        return self._articles
