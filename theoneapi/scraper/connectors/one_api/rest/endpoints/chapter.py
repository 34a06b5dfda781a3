"""Chapter endpoint definition."""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .definitions import EntitySpec

SPEC = EntitySpec(
    kind=EntityKind.CHAPTER,
    filter_fields={"chapterName": "chapterName", "chapterBook": "book"},
    output_fields=("chapterName", "book"),
    foreign_keys={"book": EntityKind.BOOK},
    sort_fallback="chapterName",
)
