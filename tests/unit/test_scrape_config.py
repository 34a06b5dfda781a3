"""Unit tests for ScrapeConfig input parsing."""

from __future__ import annotations

import pytest

from theoneapi.scraper.config import ScrapeConfig
from theoneapi.scraper.core import ConfigError, EntityKind, FilterStyle


def test_defaults():
    config = ScrapeConfig.from_input({}, env={})
    assert config.entity is EntityKind.CHARACTER
    assert config.limit == 100
    assert config.max_pages == 10
    assert config.max_results is None
    assert config.sort == "name:asc"
    assert config.quota == 1000
    assert config.api_token is None
    assert config.filter_style is FilterStyle.EXACT


def test_invalid_entity_is_config_error():
    with pytest.raises(ConfigError, match="Invalid entity"):
        ScrapeConfig.from_input({"entity": "ring"}, env={})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, 1),
        (-5, 1),
        (250, 100),
        ("50", 50),
        ("abc", 100),
        (None, 100),
        (float("inf"), 100),
        (7.9, 7),
        (10**400, 100),
        (-(10**400), 1),
        ("1" + "0" * 400, 100),
    ],
)
def test_limit_is_clamped(raw, expected):
    assert ScrapeConfig.from_input({"limit": raw}, env={}).limit == expected


@pytest.mark.parametrize(("raw", "expected"), [(0, 1), (-1, 1), ("3", 3), ("x", 10), (25, 25)])
def test_max_pages_minimum(raw, expected):
    assert ScrapeConfig.from_input({"maxPages": raw}, env={}).max_pages == expected


def test_quota_defaults_to_limit_times_pages():
    config = ScrapeConfig.from_input({"limit": 20, "maxPages": 3}, env={})
    assert config.quota == 60


def test_max_results_replaces_quota():
    config = ScrapeConfig.from_input({"limit": 20, "maxPages": 3, "maxResults": 45}, env={})
    assert config.quota == 45
    assert config.max_pages == 3


def test_max_results_is_clamped():
    assert ScrapeConfig.from_input({"maxResults": 10**9}, env={}).max_results == 10_000
    assert ScrapeConfig.from_input({"maxResults": 0}, env={}).max_results == 1
    assert ScrapeConfig.from_input({"maxResults": 10**400}, env={}).max_results == 10_000
    assert ScrapeConfig.from_input({"maxPages": 10**400}, env={}).max_pages == 10**400


@pytest.mark.parametrize(
    ("entity", "sort", "expected"),
    [
        ("quote", None, "dialog:asc"),
        ("chapter", "name:desc", "chapterName:desc"),
        ("quote", "character:asc", "character:asc"),
        ("movie", "name:desc", "name:desc"),
        ("book", "", None),
    ],
)
def test_sort_fallback(entity, sort, expected):
    data = {"entity": entity}
    if sort is not None:
        data["sort"] = sort
    assert ScrapeConfig.from_input(data, env={}).sort == expected


def test_named_filters_are_taken_for_selected_entity_only():
    config = ScrapeConfig.from_input(
        {
            "entity": "quote",
            "quoteMovie": "m1",
            "quoteDialog": "",
            "characterRace": "Hobbit",
        },
        env={},
    )
    assert config.named_filters == {"movie": "m1", "dialog": ""}


def test_chapter_filter_keys():
    config = ScrapeConfig.from_input(
        {"entity": "chapter", "chapterName": "Riddles", "chapterBook": "b1"}, env={}
    )
    assert config.named_filters == {"chapterName": "Riddles", "book": "b1"}


def test_custom_filters_must_be_mapping():
    with pytest.raises(ConfigError):
        ScrapeConfig.from_input({"customFilters": ["race", "Elf"]}, env={})


def test_token_from_input_or_environment():
    assert ScrapeConfig.from_input({"apiKey": "abc"}, env={"THE_ONE_API_TOKEN": "env"}).api_token == "abc"
    assert ScrapeConfig.from_input({}, env={"THE_ONE_API_TOKEN": "env"}).api_token == "env"


def test_overrides_pass_through():
    config = ScrapeConfig.from_input({}, env={}, politeness_delay=0.0, rate_limit_wait=5.0)
    assert config.politeness_delay == 0.0
    assert config.rate_limit_wait == 5.0


def test_direct_construction_is_validated():
    with pytest.raises(ConfigError):
        ScrapeConfig(limit=0)
    with pytest.raises(ConfigError):
        ScrapeConfig(max_pages=0)
    with pytest.raises(ConfigError):
        ScrapeConfig(entity="book")  # type: ignore[arg-type]
