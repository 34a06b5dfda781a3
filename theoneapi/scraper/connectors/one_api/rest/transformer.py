"""Raw record normalization.

Every normalized record starts with ``id``, ``url`` and ``source`` followed
by the entity's output fields, in the order of its EntitySpec. Attributes
missing from the raw record are present as None.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from theoneapi.scraper.connectors.one_api.config import BASE_URL, ITEM_CONCURRENCY, SOURCE, record_url
from theoneapi.scraper.core import EntityKind, TransformError
from theoneapi.scraper.runtime.paging.telemetry import log_item_skipped

from .endpoints import get_entity_spec
from .resolver import NameResolver
from .schemas import OneApiRecord


class ItemTransformer:
    """Maps raw records into normalized records, resolving foreign ids."""

    def __init__(
        self,
        resolver: NameResolver,
        *,
        base_url: str = BASE_URL,
        concurrency: int = ITEM_CONCURRENCY,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self._resolver = resolver
        self._base_url = base_url
        self._concurrency = concurrency

    async def transform(self, raw: Any, entity_kind: EntityKind) -> dict[str, Any]:
        """Normalize one raw record.

        Args:
            raw: Record as returned in ``docs``
            entity_kind: Entity the record belongs to

        Returns:
            Normalized record

        Raises:
            TransformError: If ``raw`` is not an object
        """
        if not isinstance(raw, Mapping):
            raise TransformError("Invalid item: expected object")
        try:
            record = OneApiRecord.model_validate(dict(raw))
        except ValidationError as e:
            raise TransformError(f"Invalid item: {e}", record_id=raw.get("_id")) from e

        spec = get_entity_spec(entity_kind)
        normalized: dict[str, Any] = {
            "id": record.id,
            "url": record_url(spec.kind, record.id, self._base_url),
            "source": SOURCE,
        }
        for field_name in spec.output_fields:
            normalized[field_name] = record.attribute(field_name)

        if spec.needs_enrichment:
            names = await self._resolver.resolve_many(
                {
                    field_name: (target, normalized[field_name])
                    for field_name, target in spec.foreign_keys.items()
                }
            )
            normalized.update(names)
        return normalized

    async def transform_page(
        self, items: Sequence[Any], entity_kind: EntityKind
    ) -> list[dict[str, Any]]:
        """Normalize all records of one page.

        Records are transformed concurrently (bounded by ``concurrency``)
        and returned in input order. Records failing with TransformError
        are logged and skipped.
        """
        semaphore = asyncio.Semaphore(self._concurrency)

        async def _transform_one(raw: Any) -> dict[str, Any] | None:
            async with semaphore:
                try:
                    return await self.transform(raw, entity_kind)
                except TransformError as e:
                    record_id = raw.get("_id") if isinstance(raw, Mapping) else None
                    log_item_skipped(
                        entity=entity_kind.value,
                        record_id=e.record_id or record_id,
                        error_message=str(e),
                    )
                    return None

        results = await asyncio.gather(*(_transform_one(raw) for raw in items))
        return [record for record in results if record is not None]
