"""Custom exception hierarchy."""

from __future__ import annotations


class ScraperError(Exception):
    """Base exception for all scraper errors."""

    pass


class ConfigError(ScraperError):
    """Invalid run configuration.

    Raised before any request is issued, e.g. for an unknown entity kind.
    """

    pass


class ProviderError(ScraperError):
    """Error from the upstream catalog."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HTTPStatusError(ProviderError):
    """HTTP error status surfaced by the transport after its retries."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class TransientFetchError(ProviderError):
    """Upstream failure that is expected to clear by waiting."""

    pass


class RateLimitError(TransientFetchError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class FatalFetchError(ProviderError):
    """Page fetch failure that aborts the whole run."""

    pass


class AuthenticationError(FatalFetchError):
    """Upstream rejected the bearer token (HTTP 401)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=401)


class TransformError(ScraperError):
    """A raw record could not be normalized.

    Recovered per item: the record is skipped and the page continues.
    """

    def __init__(self, message: str, record_id: str | None = None) -> None:
        super().__init__(message)
        self.record_id = record_id


class EnrichmentLookupError(ScraperError):
    """A foreign-id name lookup failed.

    Recovered per lookup: the resolved name becomes None.
    """

    def __init__(self, message: str, entity: str, record_id: str) -> None:
        super().__init__(message)
        self.entity = entity
        self.record_id = record_id
