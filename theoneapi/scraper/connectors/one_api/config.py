"""Shared One API connector constants.

This module centralizes URLs, headers and timing values used by the page
fetcher, the name resolver and the item transformer.
"""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

BASE_URL = "https://the-one-api.dev/v2"

# Value of the "source" field on every normalized record
SOURCE = "the-one-api.dev"

USER_AGENT = "theoneapi-scraper/1.0 (+https://the-one-api.dev)"

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}

# Environment variable consulted when no token is given explicitly
TOKEN_ENV_VAR = "THE_ONE_API_TOKEN"

PAGE_TIMEOUT_S = 30.0
LOOKUP_TIMEOUT_S = 10.0
TRANSPORT_RETRIES = 3
RATE_LIMIT_WAIT_S = 60.0
POLITENESS_DELAY_S = 1.0
ITEM_CONCURRENCY = 10


def record_url(entity_kind: EntityKind, record_id: str | None, base_url: str = BASE_URL) -> str | None:
    """Build the canonical URL of a single record.

    Examples:
        >>> record_url(EntityKind.QUOTE, "q1")
        'https://the-one-api.dev/v2/quote/q1'
        >>> record_url(EntityKind.QUOTE, None) is None
        True
    """
    if not record_id:
        return None
    return f"{base_url.rstrip('/')}/{entity_kind.value}/{record_id}"


def auth_headers(token: str | None) -> dict[str, str]:
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}
