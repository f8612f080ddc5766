"""Feed constants and YAML fixture loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import FeedConfigError
from .models import Article

logger = logging.getLogger(__name__)

FEED_TITLE = "News Feed"
FIXTURES_FILE_NAME = "fixtures.yaml"
DEFAULT_FETCH_DELAY_SECONDS = 3.0


class _RawFixtures(BaseModel):
    model_config = ConfigDict(extra="ignore")

    articles: list[str]

    @field_validator("articles")
    @classmethod
    def _normalize_titles(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for title in value:
            stripped = title.strip()
            if not stripped:
                raise ValueError("article titles must be non-empty strings")
            normalized.append(stripped)
        return normalized


def load_fixture_articles(path: Path) -> tuple[Article, ...]:
    """Load fixture articles from a YAML file of the form ``articles: [...]``.

    An empty ``articles`` list is allowed and yields an empty feed.
    """
    raw = _load_yaml_mapping(path)
    parsed = _validate_raw_fixtures(raw, path)
    logger.debug(f"Loaded {len(parsed.articles)} fixture article(s) from {path}")
    return tuple(Article(title=title) for title in parsed.articles)


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists() or not path.is_file():
        raise FeedConfigError(f"Fixture file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise FeedConfigError(f"Fixture file is not valid YAML: {path}") from error
    if not isinstance(raw, dict):
        raise FeedConfigError(f"Fixture file must be a YAML mapping: {path}")
    return raw


def _validate_raw_fixtures(raw: dict[str, Any], path: Path) -> _RawFixtures:
    try:
        return _RawFixtures.model_validate(raw)
    except ValidationError as error:
        first = error.errors()[0]
        field_path = ".".join(str(part) for part in first.get("loc", ()))
        detail = first.get("msg", "invalid value")
        if field_path:
            raise FeedConfigError(
                f"Invalid fixture file '{path}' field '{field_path}': {detail}"
            ) from None
        raise FeedConfigError(f"Invalid fixture file '{path}': {detail}") from None
