"""Pagination run state and collaborator protocols."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from theoneapi.scraper.core import EntityKind, FilterStyle, PageQuery, RunState, build_page_query

if TYPE_CHECKING:
    from theoneapi.scraper.config import ScrapeConfig


class FetchedPage(Protocol):
    docs: list[Any] | None


class PageSource(Protocol):
    async def fetch(self, query: PageQuery) -> FetchedPage: ...


class PageTransformer(Protocol):
    async def transform_page(
        self, items: Sequence[Any], entity_kind: EntityKind
    ) -> list[dict[str, Any]]: ...


class RecordSink(Protocol):
    async def push(self, records: list[dict[str, Any]]) -> None: ...


@dataclass
class ScrapeRun:
    """State of one pagination run.

    Everything but ``state``, ``saved_count``, ``current_page``,
    ``pages_fetched`` and ``error`` is fixed when the run starts.

    Attributes:
        entity_kind: Resource being paged
        limit: Records requested per page
        max_pages: Upper bound for the page cursor
        quota: Upper bound for saved records
        sort: Optional sort spec
        named_filters: Entity filters keyed by API field
        custom_filters: Free-form filter bag
        filter_style: Exact or regex filter rendering
        state: Current state machine state
        saved_count: Records handed to the sink so far
        current_page: One-based page cursor
        pages_fetched: Successful page fetches
        error: Cause of an ABORTED run
    """

    entity_kind: EntityKind
    limit: int
    max_pages: int
    quota: int
    sort: str | None = None
    named_filters: dict[str, Any] = field(default_factory=dict)
    custom_filters: dict[str, Any] = field(default_factory=dict)
    filter_style: FilterStyle = FilterStyle.EXACT
    state: RunState = RunState.RUNNING
    saved_count: int = 0
    current_page: int = 1
    pages_fetched: int = 0
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.quota < 1:
            raise ValueError("quota must be >= 1")

    @classmethod
    def from_config(cls, config: ScrapeConfig) -> ScrapeRun:
        return cls(
            entity_kind=config.entity,
            limit=config.limit,
            max_pages=config.max_pages,
            quota=config.quota,
            sort=config.sort,
            named_filters=dict(config.named_filters),
            custom_filters=dict(config.custom_filters),
            filter_style=config.filter_style,
        )

    @property
    def remaining(self) -> int:
        return max(self.quota - self.saved_count, 0)

    def build_query(self) -> PageQuery:
        """Build the query for the current page."""
        return build_page_query(
            self.entity_kind,
            self.current_page,
            self.limit,
            self.sort,
            self.named_filters,
            self.custom_filters,
            filter_style=self.filter_style,
        )
