"""Entity endpoint definitions.

Each entity kind is described by one frozen `EntitySpec`: which input keys
map to which API filter fields, which attributes the normalized record
carries, and which of those attributes are foreign ids resolved by name.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from theoneapi.scraper.core import EntityKind


@dataclass(frozen=True)
class EntitySpec:
    """Dispatch entry for one entity kind.

    Attributes:
        kind: Entity kind served by this entry
        filter_fields: Run input key -> API filter field
        output_fields: Projected attributes, in output order
        foreign_keys: Output field -> entity kind its id refers to
        requires_auth: Whether requests need the bearer token
        sort_fallback: Field substituted for "name" in sort specs, for kinds
            without a name attribute
    """

    kind: EntityKind
    filter_fields: Mapping[str, str]
    output_fields: tuple[str, ...]
    foreign_keys: Mapping[str, EntityKind] = field(default_factory=dict)
    requires_auth: bool = True
    sort_fallback: str | None = None

    @property
    def needs_enrichment(self) -> bool:
        return bool(self.foreign_keys)

    def named_filters(self, values: Mapping[str, object]) -> dict[str, object]:
        """Pick this kind's named filters out of the run input.

        Args:
            values: Run input keyed by input key (e.g. "characterRace")

        Returns:
            Filters keyed by API field (e.g. "race")
        """
        return {
            api_field: values[input_key]
            for input_key, api_field in self.filter_fields.items()
            if input_key in values
        }

    def default_sort(self, sort: str | None) -> str | None:
        """Substitute the sort fallback when sorting by an absent name field."""
        if not sort or self.sort_fallback is None:
            return sort
        sort_field, sep, direction = sort.partition(":")
        if sort_field != "name":
            return sort
        return f"{self.sort_fallback}{sep}{direction}"
