"""Book endpoint definition.

Books are the only publicly readable resource: no bearer token is sent.
"""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .definitions import EntitySpec

SPEC = EntitySpec(
    kind=EntityKind.BOOK,
    filter_fields={"bookName": "name"},
    output_fields=("name",),
    requires_auth=False,
)
