"""Domain exceptions for the news feed."""

from __future__ import annotations


class FeedError(Exception):
    """Base exception for all news feed failures."""


class FetchFailed(FeedError):
    """Fetching the article list failed."""


class FeedConfigError(FeedError):
    """Invalid feed configuration or fixture file."""
