"""Tests for the fragment capability contract."""

import pytest

from search_dsl.core.source import RawSource, Sourceable


def test_sourceable_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Sourceable()  # type: ignore[abstract]


def test_raw_source_returns_body() -> None:
    raw = RawSource(body={"name": "last_tweets", "size": 5})
    assert raw.source() == {"name": "last_tweets", "size": 5}


def test_raw_source_output_is_a_copy() -> None:
    raw = RawSource(body={"sort": [{"date": "asc"}]})
    first = raw.source()
    first["sort"].append({"likes": "desc"})
    assert raw.source() == {"sort": [{"date": "asc"}]}


def test_raw_source_defaults_to_empty_body() -> None:
    assert RawSource().source() == {}


def test_raw_source_is_detached_from_caller_dict() -> None:
    body = {"name": "last_tweets", "sort": [{"date": "asc"}]}
    raw = RawSource(body=body)
    body["name"] = "changed"
    body["sort"].append({"likes": "desc"})
    assert raw.source() == {"name": "last_tweets", "sort": [{"date": "asc"}]}


def test_raw_source_body_is_read_only() -> None:
    raw = RawSource(body={"name": "last_tweets"})
    with pytest.raises(TypeError):
        raw.body["name"] = "changed"  # type: ignore[index]


def test_raw_source_compares_by_body_and_is_unhashable() -> None:
    assert RawSource(body={"name": "a"}) == RawSource(body={"name": "a"})
    with pytest.raises(TypeError, match="RawSource"):
        hash(RawSource(body={"name": "a"}))
