#!/usr/bin/env python3
"""Command line entry point.

Examples:
    theoneapi-scraper --entity quote --limit 50 --max-pages 2 --output quotes.jsonl
    theoneapi-scraper --input INPUT.json --filter race=Hobbit
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .config import ScrapeConfig
from .connectors.one_api import OneApiRESTConnector
from .core import ConfigError, EntityKind, FilterStyle, ScraperError
from .runtime.paging import RecordSink, ScrapeRun
from .sinks import JsonLinesSink

logger = logging.getLogger("theoneapi.scraper")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _key_value(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key.strip(), value


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="theoneapi-scraper",
        description="Scrape records from The One API into JSON Lines",
    )
    p.add_argument("--input", type=Path, help="JSON file with actor-style input keys")
    p.add_argument("--entity", choices=[kind.value for kind in EntityKind])
    p.add_argument("--limit", type=int, help="records per page (1-100)")
    p.add_argument("--max-pages", type=int, dest="max_pages")
    p.add_argument("--max-results", type=int, dest="max_results")
    p.add_argument("--sort", help='sort spec such as "name:asc"; empty string disables')
    p.add_argument(
        "--filter",
        action="append",
        type=_key_value,
        default=[],
        metavar="KEY=VALUE",
        help="custom filter, may be repeated",
    )
    p.add_argument("--filter-style", choices=[style.value for style in FilterStyle])
    p.add_argument("--api-key", dest="api_key", help="bearer token (default: $THE_ONE_API_TOKEN)")
    p.add_argument("--output", default="-", help="JSON Lines output path, '-' for stdout")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p.parse_args(argv)


def build_input(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the input file with command line overrides.

    Raises:
        ConfigError: If the input file is unreadable or not a JSON object
    """
    data: dict[str, Any] = {}
    if args.input is not None:
        try:
            loaded = json.loads(args.input.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read input file {args.input}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Input file {args.input} must contain a JSON object")
        data.update(loaded)

    overrides = {
        "entity": args.entity,
        "limit": args.limit,
        "maxPages": args.max_pages,
        "maxResults": args.max_results,
        "sort": args.sort,
        "filterStyle": args.filter_style,
        "apiKey": args.api_key,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})

    if args.filter:
        custom = data.get("customFilters") or {}
        if not isinstance(custom, dict):
            raise ConfigError("customFilters must be an object")
        data["customFilters"] = {**custom, **dict(args.filter)}
    return data


async def run_scrape(config: ScrapeConfig, sink: RecordSink) -> ScrapeRun:
    async with OneApiRESTConnector.from_config(config) as api:
        return await api.scrape(config, sink)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    try:
        config = ScrapeConfig.from_input(build_input(args))
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    sink = JsonLinesSink(args.output)
    try:
        run = asyncio.run(run_scrape(config, sink))
    except ScraperError as e:
        logger.error("Scrape failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(
        f"{run.state.value}: saved {run.saved_count} {config.entity.value} records "
        f"from {run.pages_fetched} pages",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
