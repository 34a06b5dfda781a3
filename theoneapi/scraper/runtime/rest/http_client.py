"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

import aiohttp

from ...core.exceptions import HTTPStatusError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_RETRY_STATUSES = frozenset({408, 413, 429, 500, 502, 503, 504, 521, 522, 524})


@dataclass(frozen=True)
class HTTPResponse:
    """Decoded response of a successful request."""

    status: int
    body: Any
    url: str


class HTTPClient:
    """Async HTTP client wrapper with transport-level retries.

    Responses with a status in ``retry_statuses`` and connection errors or
    timeouts are retried up to ``max_retries`` times with exponential
    backoff. Whatever survives the retries is raised to the caller:
    HTTPStatusError for error statuses, ProviderError for undecodable
    bodies, and aiohttp/timeout errors as-is.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        *,
        max_retries: int = 3,
        retry_statuses: Iterable[int] = DEFAULT_RETRY_STATUSES,
        backoff: float = 1.0,
        headers: dict[str, str] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.max_retries = max_retries
        self.retry_statuses = frozenset(retry_statuses)
        self.backoff = backoff
        self._headers = dict(headers or {})
        self._sleep = sleep
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self._headers)
        return self._session

    def resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
        max_retries: int | None = None,
    ) -> HTTPResponse:
        """GET request.

        Args:
            url: Absolute URL or path relative to base_url
            params: Query string parameters
            headers: Extra request headers
            timeout: Per-request total timeout overriding the client default
            max_retries: Retry budget overriding the client default

        Returns:
            HTTPResponse with the decoded JSON body
        """
        url = self.resolve_url(url)
        retries = self.max_retries if max_retries is None else max_retries
        request_timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None

        attempt = 0
        while True:
            try:
                return await self._get_once(url, params, headers, request_timeout)
            except HTTPStatusError as e:
                if e.status_code not in self.retry_statuses or attempt >= retries:
                    raise
                reason = f"HTTP {e.status_code}"
            except (aiohttp.ClientConnectionError, TimeoutError) as e:
                if attempt >= retries:
                    raise
                reason = type(e).__name__

            attempt += 1
            delay = self.backoff * 2 ** (attempt - 1)
            logger.warning(
                "http_retry",
                extra={"url": url, "attempt": attempt, "reason": reason, "delay_s": delay},
            )
            await self._sleep(delay)

    async def _get_once(
        self,
        url: str,
        params: dict[str, Any] | None,
        headers: dict[str, str] | None,
        timeout: aiohttp.ClientTimeout | None,
    ) -> HTTPResponse:
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if timeout is not None:
            kwargs["timeout"] = timeout

        async with self.session.get(url, **kwargs) as response:
            if response.status >= 400:
                body = await response.text(errors="replace")
                raise HTTPStatusError(
                    f"HTTP error! status: {response.status}, body: {body[:500]}",
                    status_code=response.status,
                    body=body,
                )
            try:
                data = await response.json(content_type=None)
            except ValueError as e:
                raise ProviderError(
                    f"Malformed JSON body from {url}", status_code=response.status
                ) from e
            return HTTPResponse(status=response.status, body=data, url=url)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
