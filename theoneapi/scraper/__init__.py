"""The One API scraper - paged catalog retrieval with name enrichment."""

from .config import ScrapeConfig
from .connectors.one_api import (
    ItemTransformer,
    NameResolver,
    OneApiRESTConnector,
    PageFetcher,
    get_entity_spec,
)
from .core import (
    AuthenticationError,
    ConfigError,
    EnrichmentLookupError,
    EntityKind,
    FatalFetchError,
    FilterStyle,
    PageQuery,
    ProviderError,
    RateLimitError,
    RunState,
    ScraperError,
    TransformError,
    TransientFetchError,
    build_page_query,
)
from .runtime.paging import PaginationDriver, ScrapeRun
from .sinks import InMemorySink, JsonLinesSink

__version__ = "0.1.0"

__all__ = [
    "ScrapeConfig",
    "OneApiRESTConnector",
    "PageFetcher",
    "NameResolver",
    "ItemTransformer",
    "get_entity_spec",
    "PaginationDriver",
    "ScrapeRun",
    "InMemorySink",
    "JsonLinesSink",
    "EntityKind",
    "FilterStyle",
    "RunState",
    "PageQuery",
    "build_page_query",
    "ScraperError",
    "ConfigError",
    "ProviderError",
    "TransientFetchError",
    "RateLimitError",
    "FatalFetchError",
    "AuthenticationError",
    "TransformError",
    "EnrichmentLookupError",
]
