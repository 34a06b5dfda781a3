"""Pagination driver.

This module provides the PaginationDriver that walks the pages of one
entity sequentially: fetch, transform, hand the records to the sink and
decide whether the run continues.

State machine::

    RUNNING -> RUNNING        next page (after the politeness delay)
    RUNNING -> EXHAUSTED      no docs, empty docs, nothing transformed,
                              or a short page
    RUNNING -> QUOTA_REACHED  saved quota met or page cap reached
    RUNNING -> ABORTED        fatal fetch error or any other failure while
                              fetching, transforming or saving; re-raised

Rate-limit waits do not surface here: the page source retries the same
query itself.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from theoneapi.scraper.core import RunState

from .definitions import PageSource, PageTransformer, RecordSink, ScrapeRun
from .telemetry import log_page_saved, log_run_aborted, log_run_completed, log_run_started

if TYPE_CHECKING:
    from theoneapi.scraper.config import ScrapeConfig

logger = logging.getLogger(__name__)


class PaginationDriver:
    """Runs the page loop of a ScrapeRun until it reaches a terminal state."""

    def __init__(
        self,
        fetcher: PageSource,
        transformer: PageTransformer,
        sink: RecordSink,
        *,
        politeness_delay: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the driver.

        Args:
            fetcher: Page source, handles rate-limit waits internally
            transformer: Normalizes the raw records of one page
            sink: Receives one batch of records per page, in page order
            politeness_delay: Seconds to wait before requesting the next page
            sleep: Awaitable sleep, replaceable in tests
        """
        self._fetcher = fetcher
        self._transformer = transformer
        self._sink = sink
        self._politeness_delay = politeness_delay
        self._sleep = sleep

    async def run(self, config: ScrapeConfig) -> ScrapeRun:
        """Start a fresh run for ``config`` and drive it to completion."""
        return await self.execute(ScrapeRun.from_config(config))

    async def execute(self, run: ScrapeRun) -> ScrapeRun:
        """Drive ``run`` until it leaves RUNNING.

        Returns:
            The run in EXHAUSTED or QUOTA_REACHED state

        Raises:
            ProviderError: If a page fetch fails fatally (run is ABORTED)
            Exception: Any other failure of a step, after the run is ABORTED
        """
        log_run_started(run)
        while run.state is RunState.RUNNING:
            await self.step(run)
        log_run_completed(run)
        return run

    async def step(self, run: ScrapeRun) -> RunState:
        """Perform one iteration of the page loop and return the new state.

        Any exception leaves the run ABORTED with ``run.error`` set before
        it propagates.
        """
        try:
            return await self._advance(run)
        except Exception as e:
            run.state = RunState.ABORTED
            run.error = e
            log_run_aborted(run, e)
            raise

    async def _advance(self, run: ScrapeRun) -> RunState:
        page = await self._fetcher.fetch(run.build_query())

        run.pages_fetched += 1
        docs = page.docs

        if docs is None:
            logger.warning("No docs in response for page %d", run.current_page)
            run.state = RunState.EXHAUSTED
            return run.state

        if not docs:
            logger.info("No more results available at page %d", run.current_page)
            run.state = RunState.EXHAUSTED
            return run.state

        records = await self._transformer.transform_page(docs, run.entity_kind)
        if not records:
            logger.warning("No items successfully transformed on page %d", run.current_page)
            run.state = RunState.EXHAUSTED
            return run.state

        batch = records[: run.remaining]
        if batch:
            await self._sink.push(batch)
            run.saved_count += len(batch)
            log_page_saved(run, len(batch))

        if run.saved_count >= run.quota:
            run.state = RunState.QUOTA_REACHED
        elif len(docs) < run.limit:
            run.state = RunState.EXHAUSTED
        elif run.current_page >= run.max_pages:
            run.state = RunState.QUOTA_REACHED
        else:
            run.current_page += 1
            await self._sleep(self._politeness_delay)
        return run.state
