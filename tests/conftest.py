# conftest.py
from typing import Any

import pytest

from search_dsl.config import get_settings
from search_dsl.core.source import Sourceable


class FakeInnerHit(Sourceable):
    """Inner hit stub returning a fixed body and counting calls."""

    def __init__(self, body: dict[str, Any]):
        self.body = body
        self.calls = 0

    def source(self) -> dict[str, Any]:
        self.calls += 1
        return dict(self.body)


class FailingInnerHit(Sourceable):
    """Inner hit stub that always fails to serialize."""

    def __init__(self, error: Exception):
        self.error = error
        self.calls = 0

    def source(self) -> dict[str, Any]:
        self.calls += 1
        raise self.error


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def last_tweets() -> FakeInnerHit:
    return FakeInnerHit({"name": "last_tweets", "size": 5, "sort": [{"date": "asc"}]})


@pytest.fixture
def most_liked() -> FakeInnerHit:
    return FakeInnerHit({"name": "most_liked", "size": 3, "sort": ["likes"]})


@pytest.fixture
def make_inner_hit():
    return FakeInnerHit


@pytest.fixture
def make_failing_inner_hit():
    return FailingInnerHit
