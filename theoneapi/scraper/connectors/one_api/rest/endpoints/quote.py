"""Quote endpoint definition.

Raw quotes reference their movie and character by id only; both are
resolved to display names before the record is emitted.
"""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .definitions import EntitySpec

SPEC = EntitySpec(
    kind=EntityKind.QUOTE,
    filter_fields={
        "quoteDialog": "dialog",
        "quoteMovie": "movie",
        "quoteCharacter": "character",
    },
    output_fields=("dialog", "movie", "character"),
    foreign_keys={"movie": EntityKind.MOVIE, "character": EntityKind.CHARACTER},
    sort_fallback="dialog",
)
