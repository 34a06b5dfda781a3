"""Page query model and builder.

`build_page_query` is a pure function: it turns the entity kind, paging
position, sort spec and the two filter sources into one immutable
`PageQuery` per page request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .enums import EntityKind, FilterStyle

MAX_PAGE_LIMIT = 100

# Set by the query itself; filters with these names are dropped
PAGING_PARAMS = frozenset({"limit", "page", "sort"})


@dataclass(frozen=True)
class PageQuery:
    """Query parameters for one page request.

    Attributes:
        entity_kind: Resource being paged
        limit: Records per page (1..100)
        page: One-based page number
        sort: Optional "field:direction" sort spec
        filters: Ordered (field, value) pairs, values already serialized
    """

    entity_kind: EntityKind
    limit: int
    page: int = 1
    sort: str | None = None
    filters: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= self.limit <= MAX_PAGE_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_LIMIT}, got {self.limit}")
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    def to_params(self) -> dict[str, str]:
        """Render the query string parameters in request order."""
        params = {"limit": str(self.limit), "page": str(self.page)}
        if self.sort:
            params["sort"] = self.sort
        params.update((key, value) for key, value in self.filters if key not in PAGING_PARAMS)
        return params

    def next_page(self) -> PageQuery:
        return replace(self, page=self.page + 1)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _serialize(value: Any, style: FilterStyle) -> str:
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    if style is FilterStyle.REGEX:
        return f"/{text}/i"
    return text


def build_page_query(
    entity_kind: EntityKind,
    page: int,
    per_page: int,
    sort: str | None = None,
    named_filters: Mapping[str, Any] | None = None,
    custom_filters: Mapping[str, Any] | None = None,
    *,
    filter_style: FilterStyle = FilterStyle.EXACT,
) -> PageQuery:
    """Build the query for one page.

    Custom filters are applied first and named filters are overlaid, so a
    named filter wins over a custom key of the same name. Empty values
    (None or "") never reach the query string; an empty named filter leaves
    a custom value in place. Filters named like a paging parameter
    (`limit`, `page`, `sort`) are dropped so they cannot move the cursor.

    Args:
        entity_kind: Resource being paged
        page: One-based page number
        per_page: Records per page
        sort: Optional sort spec, omitted when empty
        named_filters: Entity-specific filters keyed by API field
        custom_filters: Free-form filter bag
        filter_style: Exact values or case-insensitive regex

    Returns:
        Immutable PageQuery
    """
    combined: dict[str, Any] = {}
    for source in (custom_filters or {}, named_filters or {}):
        for key, value in source.items():
            if key not in PAGING_PARAMS and not _is_empty(value):
                combined[key] = value

    filters = tuple((key, _serialize(value, filter_style)) for key, value in combined.items())
    return PageQuery(
        entity_kind=entity_kind,
        limit=per_page,
        page=page,
        sort=sort or None,
        filters=filters,
    )
