"""One API REST connector.

This connector wires the shared HTTP client, the page fetcher, the name
resolver and the item transformer together, and runs the pagination
driver for a ScrapeConfig.

Architecture:
    One HTTPClient (one aiohttp session) is shared by page fetches and
    name lookups. Page requests use the transport retry budget; lookups
    use none.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from theoneapi.scraper.connectors.one_api.config import (
    BASE_URL,
    DEFAULT_HEADERS,
    ITEM_CONCURRENCY,
    LOOKUP_TIMEOUT_S,
    PAGE_TIMEOUT_S,
    POLITENESS_DELAY_S,
    RATE_LIMIT_WAIT_S,
    TRANSPORT_RETRIES,
)
from theoneapi.scraper.core import EntityKind, PageQuery
from theoneapi.scraper.runtime.paging import PaginationDriver, RecordSink, ScrapeRun
from theoneapi.scraper.runtime.rest import HTTPClient

from .endpoints import get_entity_spec
from .fetcher import PageFetcher
from .resolver import NameResolver
from .schemas import OneApiPage
from .transformer import ItemTransformer

if TYPE_CHECKING:
    from theoneapi.scraper.config import ScrapeConfig

logger = logging.getLogger(__name__)


class OneApiRESTConnector:
    """Async facade over the One API catalog.

    Example:
        >>> async with OneApiRESTConnector(api_token=token) as api:
        ...     run = await api.scrape(config, sink)
    """

    def __init__(
        self,
        *,
        api_token: str | None = None,
        base_url: str = BASE_URL,
        page_timeout: float = PAGE_TIMEOUT_S,
        lookup_timeout: float = LOOKUP_TIMEOUT_S,
        max_retries: int = TRANSPORT_RETRIES,
        rate_limit_wait: float = RATE_LIMIT_WAIT_S,
        politeness_delay: float = POLITENESS_DELAY_S,
        concurrency: int = ITEM_CONCURRENCY,
        transport: HTTPClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._api_token = api_token
        self._politeness_delay = politeness_delay
        self._sleep = sleep
        self._transport = transport or HTTPClient(
            base_url=base_url,
            timeout=page_timeout,
            max_retries=max_retries,
            headers=DEFAULT_HEADERS,
            sleep=sleep,
        )
        self.fetcher = PageFetcher(
            self._transport,
            api_token=api_token,
            page_timeout=page_timeout,
            rate_limit_wait=rate_limit_wait,
            sleep=sleep,
        )
        self.resolver = NameResolver(
            self._transport, api_token=api_token, lookup_timeout=lookup_timeout
        )
        self.transformer = ItemTransformer(
            self.resolver, base_url=base_url, concurrency=concurrency
        )

    @classmethod
    def from_config(cls, config: ScrapeConfig, **kwargs: Any) -> OneApiRESTConnector:
        """Create a connector with the tunables of a ScrapeConfig."""
        return cls(
            api_token=config.api_token,
            base_url=config.base_url,
            page_timeout=config.page_timeout,
            lookup_timeout=config.lookup_timeout,
            max_retries=config.max_retries,
            rate_limit_wait=config.rate_limit_wait,
            politeness_delay=config.politeness_delay,
            concurrency=config.concurrency,
            **kwargs,
        )

    async def fetch_page(self, query: PageQuery) -> OneApiPage:
        """Fetch one raw page (rate limits waited out)."""
        return await self.fetcher.fetch(query)

    async def fetch_records(self, query: PageQuery) -> list[dict[str, Any]]:
        """Fetch and normalize one page without touching a sink."""
        page = await self.fetcher.fetch(query)
        return await self.transformer.transform_page(page.docs or [], query.entity_kind)

    async def resolve_name(self, entity_kind: EntityKind, record_id: str | None) -> str | None:
        return await self.resolver.resolve_name(entity_kind, record_id)

    async def scrape(self, config: ScrapeConfig, sink: RecordSink) -> ScrapeRun:
        """Run a full scrape and push every page's records to ``sink``.

        Raises:
            FatalFetchError: If the run is aborted
        """
        if get_entity_spec(config.entity).requires_auth and not self._api_token:
            logger.warning(
                "No API token configured; %s requests will likely be rejected",
                config.entity.value,
            )
        driver = PaginationDriver(
            self.fetcher,
            self.transformer,
            sink,
            politeness_delay=self._politeness_delay,
            sleep=self._sleep,
        )
        return await driver.run(config)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> OneApiRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
