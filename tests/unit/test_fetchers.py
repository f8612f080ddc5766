import asyncio

import pytest

from newsfeed.config import DEFAULT_FETCH_DELAY_SECONDS
from newsfeed.errors import FeedConfigError, FetchFailed
from newsfeed.fetchers import SimulatedFetcher
from newsfeed.models import FIXTURE_ARTICLES, Article


def test_simulated_fetch_waits_default_delay_then_returns_fixtures(monkeypatch):
    delays: list[float] = []

    async def _fake_sleep(seconds: float) -> None:
        delays.append(seconds)

    monkeypatch.setattr("newsfeed.fetchers.asyncio.sleep", _fake_sleep)

    fetcher = SimulatedFetcher()
    result = asyncio.run(fetcher.fetch())

    assert result == FIXTURE_ARTICLES
    assert delays == [pytest.approx(DEFAULT_FETCH_DELAY_SECONDS)]
    assert fetcher.calls == 1


def test_simulated_fetch_returns_configured_articles():
    articles = [Article(title="Only one")]
    fetcher = SimulatedFetcher(delay_seconds=0, articles=articles)

    assert asyncio.run(fetcher.fetch()) == tuple(articles)


def test_simulated_fetch_can_fail():
    fetcher = SimulatedFetcher(delay_seconds=0, fail=True)

    with pytest.raises(FetchFailed):
        asyncio.run(fetcher.fetch())
    assert fetcher.calls == 1


@pytest.mark.parametrize("delay", [-0.1, True])
def test_simulated_fetch_rejects_invalid_delay(delay):
    with pytest.raises(FeedConfigError, match="delay_seconds"):
        SimulatedFetcher(delay_seconds=delay)
