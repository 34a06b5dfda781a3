"""Foreign-id name resolution.

Quotes and chapters reference movies, characters and books by id. The
resolver turns those ids into display names with single-record lookups.
Lookups are best-effort: a failure is logged and yields None.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import replace

import aiohttp

from theoneapi.scraper.connectors.one_api.config import LOOKUP_TIMEOUT_S
from theoneapi.scraper.core import EnrichmentLookupError, EntityKind, ProviderError
from theoneapi.scraper.runtime.paging.telemetry import log_lookup_failed
from theoneapi.scraper.runtime.rest import HTTPClient, RestRunner

from .endpoints import NameAdapter, RecordSpec, get_entity_spec


class NameResolver:
    """Resolves record ids of one entity kind to their ``name`` field."""

    def __init__(
        self,
        transport: HTTPClient,
        *,
        api_token: str | None = None,
        lookup_timeout: float = LOOKUP_TIMEOUT_S,
    ) -> None:
        self._runner = RestRunner(transport)
        self._spec = replace(RecordSpec, timeout=lookup_timeout)
        self._adapter = NameAdapter()
        self._api_token = api_token

    async def lookup(self, entity_kind: EntityKind, record_id: str) -> str | None:
        """Fetch the name of one record.

        Returns:
            The name, or None when the record does not exist or has no name

        Raises:
            EnrichmentLookupError: If the request fails or times out
        """
        params = {
            "entity_kind": entity_kind,
            "record_id": record_id,
            "api_token": self._api_token,
            "requires_auth": get_entity_spec(entity_kind).requires_auth,
        }
        try:
            return await self._runner.run(spec=self._spec, adapter=self._adapter, params=params)
        except (ProviderError, aiohttp.ClientError, TimeoutError) as e:
            raise EnrichmentLookupError(
                str(e) or type(e).__name__,
                entity=entity_kind.value,
                record_id=record_id,
            ) from e

    async def resolve_name(self, entity_kind: EntityKind, record_id: str | None) -> str | None:
        """Resolve ``record_id`` to a name, None on any failure.

        No request is made when ``record_id`` is empty.
        """
        if not record_id:
            return None
        try:
            return await self.lookup(entity_kind, str(record_id))
        except EnrichmentLookupError as e:
            log_lookup_failed(entity=e.entity, record_id=e.record_id, error_message=str(e))
            return None

    async def resolve_many(
        self, lookups: Mapping[str, tuple[EntityKind, str | None]]
    ) -> dict[str, str | None]:
        """Resolve several foreign ids concurrently.

        Args:
            lookups: Output field -> (target entity kind, id)

        Returns:
            Output field -> resolved name (or None)
        """
        fields = list(lookups)
        names = await asyncio.gather(
            *(self.resolve_name(*lookups[field_name]) for field_name in fields)
        )
        return dict(zip(fields, names))
