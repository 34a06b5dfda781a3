"""Page fetcher for One API collection endpoints.

Classifies the failures that survive the transport retries:

- HTTP 429: RateLimitError, handled by ``fetch`` as a wait-and-reissue of
  the same query
- HTTP 401: AuthenticationError, fatal
- anything else (network error, other status, malformed body):
  FatalFetchError
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import replace

import aiohttp

from theoneapi.scraper.connectors.one_api.config import PAGE_TIMEOUT_S, RATE_LIMIT_WAIT_S
from theoneapi.scraper.core import (
    AuthenticationError,
    FatalFetchError,
    HTTPStatusError,
    PageQuery,
    ProviderError,
    RateLimitError,
)
from theoneapi.scraper.runtime.paging.telemetry import log_page_requested, log_rate_limited
from theoneapi.scraper.runtime.rest import HTTPClient, RestRunner

from .endpoints import PageAdapter, PageSpec, get_entity_spec
from .schemas import OneApiPage


class PageFetcher:
    """Fetches one collection page per call."""

    def __init__(
        self,
        transport: HTTPClient,
        *,
        api_token: str | None = None,
        page_timeout: float = PAGE_TIMEOUT_S,
        rate_limit_wait: float = RATE_LIMIT_WAIT_S,
        max_rate_limit_waits: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the fetcher.

        Args:
            transport: Shared HTTP client (owns the transport retries)
            api_token: Bearer token, sent for every entity except books
            page_timeout: Per-request timeout in seconds
            rate_limit_wait: Seconds to wait after a surfaced 429
            max_rate_limit_waits: Give up after this many waits (None = never)
            sleep: Awaitable sleep, replaceable in tests
        """
        self._runner = RestRunner(transport)
        self._spec = replace(PageSpec, timeout=page_timeout)
        self._adapter = PageAdapter()
        self._api_token = api_token
        self.rate_limit_wait = rate_limit_wait
        self.max_rate_limit_waits = max_rate_limit_waits
        self._sleep = sleep

    async def fetch(self, query: PageQuery) -> OneApiPage:
        """Fetch a page, waiting out rate limits.

        Each surfaced 429 costs one wait of ``rate_limit_wait`` seconds
        followed by a reissue of the identical query.

        Raises:
            FatalFetchError: On authorization failure, on any other
                unrecovered error, or when the rate-limit wait cap is hit
        """
        waits = 0
        while True:
            try:
                return await self.fetch_once(query)
            except RateLimitError as e:
                if self.max_rate_limit_waits is not None and waits >= self.max_rate_limit_waits:
                    raise FatalFetchError(
                        f"Rate limit persisted after {waits} waits on page {query.page}",
                        status_code=429,
                    ) from e
                waits += 1
                await self.wait_for_rate_limit(query)

    async def wait_for_rate_limit(self, query: PageQuery) -> None:
        """Self-transition of a running scrape: pause before reissuing ``query``."""
        log_rate_limited(query, self.rate_limit_wait)
        await self._sleep(self.rate_limit_wait)

    async def fetch_once(self, query: PageQuery) -> OneApiPage:
        """Issue a single page request and classify its failure.

        Raises:
            RateLimitError: HTTP 429 survived the transport retries
            AuthenticationError: HTTP 401
            FatalFetchError: Any other failure
        """
        entity = get_entity_spec(query.entity_kind)
        params = {
            "query": query,
            "api_token": self._api_token,
            "requires_auth": entity.requires_auth,
        }
        log_page_requested(query)
        try:
            return await self._runner.run(spec=self._spec, adapter=self._adapter, params=params)
        except HTTPStatusError as e:
            if e.status_code == 429:
                raise RateLimitError(f"Rate limit hit on page {query.page}") from e
            if e.status_code == 401:
                raise AuthenticationError(
                    "API access unauthorized. Please check the API token."
                ) from e
            raise FatalFetchError(
                f"Failed to fetch page {query.page}: {e}", status_code=e.status_code
            ) from e
        except FatalFetchError:
            raise
        except ProviderError as e:
            raise FatalFetchError(
                f"Failed to fetch page {query.page}: {e}", status_code=e.status_code
            ) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            raise FatalFetchError(
                f"Failed to fetch page {query.page}: {e or type(e).__name__}"
            ) from e
