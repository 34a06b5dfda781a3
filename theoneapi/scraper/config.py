"""Run configuration.

`ScrapeConfig` holds everything one scrape needs. It is usually built from
an input mapping with the same keys the hosted actor accepted (``entity``,
``limit``, ``maxPages``, ``characterRace``, ``customFilters``, ...), see
`ScrapeConfig.from_input`.

Quota semantics:
    A run saves at most ``quota`` records. When ``max_results`` is set the
    quota is exactly ``max_results``; otherwise it is
    ``limit * max_pages``. ``max_pages`` bounds the page cursor in both
    cases, and the last page is truncated to the remaining quota.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .connectors.one_api.config import (
    BASE_URL,
    ITEM_CONCURRENCY,
    LOOKUP_TIMEOUT_S,
    PAGE_TIMEOUT_S,
    POLITENESS_DELAY_S,
    RATE_LIMIT_WAIT_S,
    TOKEN_ENV_VAR,
    TRANSPORT_RETRIES,
)
from .connectors.one_api.rest.endpoints import get_entity_spec
from .core import MAX_PAGE_LIMIT, ConfigError, EntityKind, FilterStyle

DEFAULT_ENTITY = EntityKind.CHARACTER
DEFAULT_LIMIT = 100
DEFAULT_MAX_PAGES = 10
DEFAULT_SORT = "name:asc"
MAX_RESULTS_CAP = 10_000


def _coerce_int(value: Any, default: int | None) -> int | None:
    """Read a numeric input leniently; anything non-finite gives ``default``."""
    if value is None or value == "" or isinstance(value, bool):
        return default
    # ints of any size are exact; float() would overflow on huge ones
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def clamp_limit(value: Any) -> int:
    """Per-page limit, clamped to 1..100 (default 100)."""
    limit = _coerce_int(value, DEFAULT_LIMIT)
    return max(1, min(MAX_PAGE_LIMIT, limit))


def clamp_max_pages(value: Any) -> int:
    """Page cap, at least 1 (default 10)."""
    return max(1, _coerce_int(value, DEFAULT_MAX_PAGES))


def clamp_max_results(value: Any) -> int | None:
    """Result cap, clamped to 1..10000, or None when unset."""
    max_results = _coerce_int(value, None)
    if max_results is None:
        return None
    return max(1, min(MAX_RESULTS_CAP, max_results))


@dataclass(frozen=True)
class ScrapeConfig:
    """Validated configuration of one scrape.

    Attributes:
        entity: Entity kind to page through
        limit: Records per page (1..100)
        max_pages: Page cap (>= 1)
        max_results: Optional result cap; replaces limit * max_pages as quota
        sort: Sort spec ("field:direction") or None
        named_filters: Entity filters keyed by API field
        custom_filters: Free-form filters, overridden by named filters
        filter_style: Exact values or case-insensitive regex
        api_token: Bearer token for protected entities
        base_url: Upstream API root
        page_timeout: Page request timeout in seconds
        lookup_timeout: Name lookup timeout in seconds
        max_retries: Transport retries for page requests
        rate_limit_wait: Wait after a surfaced 429, in seconds
        politeness_delay: Wait between pages, in seconds
        concurrency: Records transformed concurrently per page
    """

    entity: EntityKind = DEFAULT_ENTITY
    limit: int = DEFAULT_LIMIT
    max_pages: int = DEFAULT_MAX_PAGES
    max_results: int | None = None
    sort: str | None = DEFAULT_SORT
    named_filters: Mapping[str, Any] = field(default_factory=dict)
    custom_filters: Mapping[str, Any] = field(default_factory=dict)
    filter_style: FilterStyle = FilterStyle.EXACT
    api_token: str | None = None
    base_url: str = BASE_URL
    page_timeout: float = PAGE_TIMEOUT_S
    lookup_timeout: float = LOOKUP_TIMEOUT_S
    max_retries: int = TRANSPORT_RETRIES
    rate_limit_wait: float = RATE_LIMIT_WAIT_S
    politeness_delay: float = POLITENESS_DELAY_S
    concurrency: int = ITEM_CONCURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.entity, EntityKind):
            raise ConfigError(f"entity must be an EntityKind, got {self.entity!r}")
        if not 1 <= self.limit <= MAX_PAGE_LIMIT:
            raise ConfigError(f"limit must be between 1 and {MAX_PAGE_LIMIT}, got {self.limit}")
        if self.max_pages < 1:
            raise ConfigError(f"maxPages must be >= 1, got {self.max_pages}")
        if self.max_results is not None and self.max_results < 1:
            raise ConfigError(f"maxResults must be >= 1, got {self.max_results}")
        if self.concurrency < 1:
            raise ConfigError(f"concurrency must be >= 1, got {self.concurrency}")

    @property
    def quota(self) -> int:
        """Upper bound on records saved by one run."""
        if self.max_results is not None:
            return self.max_results
        return self.limit * self.max_pages

    @classmethod
    def from_input(
        cls,
        data: Mapping[str, Any] | None,
        *,
        env: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> ScrapeConfig:
        """Build a config from an actor-style input mapping.

        Args:
            data: Input mapping (may be None for all defaults)
            env: Environment used for the token fallback (default os.environ)
            **overrides: Tunables passed straight to the constructor

        Returns:
            Validated ScrapeConfig

        Raises:
            ConfigError: Unknown entity, filter style or a non-mapping
                ``customFilters``
        """
        data = dict(data or {})
        env = os.environ if env is None else env

        entity = EntityKind.parse(data.get("entity") or DEFAULT_ENTITY)
        spec = get_entity_spec(entity)

        custom_filters = data.get("customFilters")
        if custom_filters is None:
            custom_filters = {}
        if not isinstance(custom_filters, Mapping):
            raise ConfigError("customFilters must be an object")

        sort = data.get("sort", DEFAULT_SORT)
        sort = spec.default_sort(str(sort).strip() if sort is not None else None) or None

        return cls(
            entity=entity,
            limit=clamp_limit(data.get("limit")),
            max_pages=clamp_max_pages(data.get("maxPages")),
            max_results=clamp_max_results(data.get("maxResults")),
            sort=sort,
            named_filters=spec.named_filters(data),
            custom_filters=dict(custom_filters),
            filter_style=FilterStyle.parse(data.get("filterStyle") or FilterStyle.EXACT),
            api_token=data.get("apiKey") or env.get(TOKEN_ENV_VAR) or None,
            **overrides,
        )
