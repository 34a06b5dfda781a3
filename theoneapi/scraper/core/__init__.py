"""Core components."""

from .enums import EntityKind, FilterStyle, RunState
from .exceptions import (
    AuthenticationError,
    ConfigError,
    EnrichmentLookupError,
    FatalFetchError,
    HTTPStatusError,
    ProviderError,
    RateLimitError,
    ScraperError,
    TransformError,
    TransientFetchError,
)
from .query import MAX_PAGE_LIMIT, PageQuery, build_page_query

__all__ = [
    "EntityKind",
    "FilterStyle",
    "RunState",
    "ScraperError",
    "ConfigError",
    "ProviderError",
    "HTTPStatusError",
    "TransientFetchError",
    "RateLimitError",
    "FatalFetchError",
    "AuthenticationError",
    "TransformError",
    "EnrichmentLookupError",
    "MAX_PAGE_LIMIT",
    "PageQuery",
    "build_page_query",
]
