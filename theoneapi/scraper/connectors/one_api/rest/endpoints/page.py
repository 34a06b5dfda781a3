"""Collection page endpoint definition and adapter.

``GET /{entity}?limit=..&page=..&sort=..&<filters>`` returns an envelope
``{"docs": [...], "total": .., "page": .., "pages": ..}``.
"""

from __future__ import annotations

import json
from typing import Any

from theoneapi.scraper.connectors.one_api.config import (
    PAGE_TIMEOUT_S,
    TRANSPORT_RETRIES,
    auth_headers,
)
from theoneapi.scraper.connectors.one_api.rest.schemas import OneApiPage
from theoneapi.scraper.core import FatalFetchError, PageQuery
from theoneapi.scraper.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def _page_path(params: dict[str, Any]) -> str:
    query: PageQuery = params["query"]
    return f"/{query.entity_kind.value}"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for a collection page."""
    query: PageQuery = params["query"]
    return query.to_params()


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    if not params.get("requires_auth", True):
        return {}
    return auth_headers(params.get("api_token"))


SPEC = RestEndpointSpec(
    id="page",
    method="GET",
    build_path=_page_path,
    build_query=build_query,
    build_headers=build_headers,
    timeout=PAGE_TIMEOUT_S,
    max_retries=TRANSPORT_RETRIES,
)


def _preview(body: Any) -> str:
    try:
        text = json.dumps(body)
    except (TypeError, ValueError):
        text = repr(body)
    return text[:500]


class Adapter(ResponseAdapter):
    """Adapter validating a collection response into OneApiPage."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> OneApiPage:
        """Parse a page envelope.

        Only an HTTP 200 with a JSON object body is accepted. A missing or
        non-list ``docs`` yields ``OneApiPage(docs=None)``.

        Raises:
            FatalFetchError: On any other status or a non-object body
        """
        if response.status != 200:
            raise FatalFetchError(
                f"HTTP error! status: {response.status}, body: {_preview(response.body)}",
                status_code=response.status,
            )
        if not isinstance(response.body, dict):
            raise FatalFetchError(
                f"Invalid API response format: {_preview(response.body)}",
                status_code=response.status,
            )
        return OneApiPage.model_validate(response.body)
