"""Shared fixtures for newsfeed tests."""

import pytest

from tests.support.fake_fetchers import GatedFetcher, RecordingListener


@pytest.fixture
def gated_fetcher():
    return GatedFetcher()


@pytest.fixture
def listener():
    return RecordingListener()
