"""Single-record endpoint definition and name adapter.

``GET /{entity}/{id}`` returns the same envelope as a collection page with
at most one record in ``docs``.
"""

from __future__ import annotations

from typing import Any

from theoneapi.scraper.connectors.one_api.config import LOOKUP_TIMEOUT_S, auth_headers
from theoneapi.scraper.connectors.one_api.rest.schemas import OneApiPage
from theoneapi.scraper.core import EnrichmentLookupError, EntityKind
from theoneapi.scraper.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec


def _record_path(params: dict[str, Any]) -> str:
    kind: EntityKind = params["entity_kind"]
    return f"/{kind.value}/{params['record_id']}"


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    if not params.get("requires_auth", True):
        return {}
    return auth_headers(params.get("api_token"))


# Lookups are best-effort: no transport retries, short timeout
SPEC = RestEndpointSpec(
    id="record",
    method="GET",
    build_path=_record_path,
    build_headers=build_headers,
    timeout=LOOKUP_TIMEOUT_S,
    max_retries=0,
)


class NameAdapter(ResponseAdapter):
    """Adapter extracting the display name of the first returned record."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> str | None:
        kind: EntityKind = params["entity_kind"]
        record_id = params["record_id"]
        if response.status != 200 or not isinstance(response.body, dict):
            raise EnrichmentLookupError(
                f"Unexpected lookup response (status {response.status})",
                entity=kind.value,
                record_id=record_id,
            )

        page = OneApiPage.model_validate(response.body)
        if not page.docs or not isinstance(page.docs[0], dict):
            return None
        name = page.docs[0].get("name")
        return str(name) if name else None
