"""Structured logging for pagination runs.

This module provides the logging hooks used by the page fetcher, the item
transformer, the name resolver and the pagination driver. Every hook emits
a readable message plus the same values as ``extra`` fields for
structured handlers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from theoneapi.scraper.core import PageQuery

    from .definitions import ScrapeRun

logger = logging.getLogger(__name__)


def log_run_started(run: ScrapeRun) -> None:
    logger.info(
        "Starting scrape: entity=%s, limit=%d, maxPages=%d, quota=%d",
        run.entity_kind.value,
        run.limit,
        run.max_pages,
        run.quota,
        extra={
            "event": "run_started",
            "entity": run.entity_kind.value,
            "limit": run.limit,
            "max_pages": run.max_pages,
            "quota": run.quota,
            "sort": run.sort,
        },
    )


def log_page_requested(query: PageQuery) -> None:
    logger.info(
        "Fetching page %d of %s",
        query.page,
        query.entity_kind.value,
        extra={"event": "page_requested", "entity": query.entity_kind.value, "params": query.to_params()},
    )


def log_rate_limited(query: PageQuery, wait_s: float) -> None:
    logger.warning(
        "Rate limit hit on page %d, waiting %.0f seconds...",
        query.page,
        wait_s,
        extra={"event": "rate_limited", "page": query.page, "wait_s": wait_s},
    )


def log_page_saved(run: ScrapeRun, saved: int) -> None:
    logger.info(
        "Page %d: saved %d items. Total: %d",
        run.current_page,
        saved,
        run.saved_count,
        extra={
            "event": "page_saved",
            "page": run.current_page,
            "saved": saved,
            "total_saved": run.saved_count,
        },
    )


def log_item_skipped(*, entity: str, record_id: str | None, error_message: str) -> None:
    logger.warning(
        "Failed to transform item %s: %s",
        record_id,
        error_message,
        extra={"event": "item_skipped", "entity": entity, "record_id": record_id},
    )


def log_lookup_failed(*, entity: str, record_id: str, error_message: str) -> None:
    logger.warning(
        "Failed to fetch %s name for %s: %s",
        entity,
        record_id,
        error_message,
        extra={"event": "lookup_failed", "entity": entity, "record_id": record_id},
    )


def log_run_completed(run: ScrapeRun) -> None:
    logger.info(
        "Finished (%s). Saved %d items across %d pages",
        run.state.value,
        run.saved_count,
        run.pages_fetched,
        extra={
            "event": "run_completed",
            "state": run.state.value,
            "saved_count": run.saved_count,
            "pages_fetched": run.pages_fetched,
        },
    )


def log_run_aborted(run: ScrapeRun, error: BaseException) -> None:
    logger.error(
        "Aborting scrape on page %d: %s",
        run.current_page,
        error,
        extra={
            "event": "run_aborted",
            "page": run.current_page,
            "error_type": type(error).__name__,
            "saved_count": run.saved_count,
        },
    )
