"""One API REST endpoint registry.

This module exports the per-entity dispatch table together with the page
and single-record endpoint specifications.
"""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .book import SPEC as BookSpec  # noqa: N811
from .chapter import SPEC as ChapterSpec  # noqa: N811
from .character import SPEC as CharacterSpec  # noqa: N811
from .definitions import EntitySpec
from .movie import SPEC as MovieSpec  # noqa: N811
from .page import SPEC as PageSpec  # noqa: N811
from .page import Adapter as PageAdapter
from .quote import SPEC as QuoteSpec  # noqa: N811
from .record import SPEC as RecordSpec  # noqa: N811
from .record import NameAdapter

# Registry mapping entity kinds to their dispatch entries
_ENTITY_REGISTRY: dict[EntityKind, EntitySpec] = {
    EntityKind.BOOK: BookSpec,
    EntityKind.MOVIE: MovieSpec,
    EntityKind.CHARACTER: CharacterSpec,
    EntityKind.QUOTE: QuoteSpec,
    EntityKind.CHAPTER: ChapterSpec,
}


def get_entity_spec(kind: EntityKind | str) -> EntitySpec:
    """Get the dispatch entry for an entity kind.

    Args:
        kind: EntityKind or its string value

    Returns:
        EntitySpec for the kind

    Raises:
        ConfigError: If kind is not a supported entity
    """
    return _ENTITY_REGISTRY[EntityKind.parse(kind)]


def list_entity_specs() -> list[EntitySpec]:
    return list(_ENTITY_REGISTRY.values())


__all__ = [
    "EntitySpec",
    "NameAdapter",
    "PageAdapter",
    "PageSpec",
    "RecordSpec",
    "get_entity_spec",
    "list_entity_specs",
]
