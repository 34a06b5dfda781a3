"""Unit tests for the command line entry point."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from theoneapi.scraper import cli
from theoneapi.scraper.core import AuthenticationError, EntityKind, RunState
from theoneapi.scraper.runtime.paging import ScrapeRun


def test_build_input_merges_file_and_flags(tmp_path):
    input_file = tmp_path / "INPUT.json"
    input_file.write_text(
        json.dumps({"entity": "character", "limit": 20, "customFilters": {"realm": "Gondor"}})
    )
    args = cli.parse_args(
        ["--input", str(input_file), "--limit", "50", "--filter", "race=Human", "--filter", "hair=Dark"]
    )

    data = cli.build_input(args)

    assert data["entity"] == "character"
    assert data["limit"] == 50
    assert data["customFilters"] == {"realm": "Gondor", "race": "Human", "hair": "Dark"}
    assert "maxPages" not in data


def test_build_input_rejects_non_object_file(tmp_path):
    input_file = tmp_path / "INPUT.json"
    input_file.write_text("[1, 2]")

    with pytest.raises(cli.ConfigError):
        cli.build_input(cli.parse_args(["--input", str(input_file)]))


def test_filter_requires_key_value():
    with pytest.raises(SystemExit):
        cli.parse_args(["--filter", "race"])


def test_main_success(tmp_path, capsys):
    run = ScrapeRun(entity_kind=EntityKind.BOOK, limit=10, max_pages=1, quota=10)
    run.state = RunState.EXHAUSTED
    run.saved_count = 3
    run.pages_fetched = 1

    with patch.object(cli, "run_scrape", AsyncMock(return_value=run)) as run_scrape:
        code = cli.main(["--entity", "book", "--output", str(tmp_path / "out.jsonl")])

    assert code == 0
    config = run_scrape.call_args.args[0]
    assert config.entity is EntityKind.BOOK
    assert "exhausted: saved 3 book records" in capsys.readouterr().err


def test_main_config_error(capsys):
    code = cli.main(["--entity", "quote", "--filter-style", "regex", "--input", "/nonexistent/input.json"])

    assert code == 2
    assert "Cannot read input file" in capsys.readouterr().err


def test_main_fatal_fetch(tmp_path):
    failing = AsyncMock(side_effect=AuthenticationError("API access unauthorized"))

    with patch.object(cli, "run_scrape", failing):
        code = cli.main(["--entity", "movie", "--output", str(tmp_path / "out.jsonl")])

    assert code == 1
