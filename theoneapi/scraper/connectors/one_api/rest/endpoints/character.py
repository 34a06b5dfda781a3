"""Character endpoint definition."""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .definitions import EntitySpec

SPEC = EntitySpec(
    kind=EntityKind.CHARACTER,
    filter_fields={
        "characterName": "name",
        "characterRace": "race",
        "characterGender": "gender",
        "characterBirth": "birth",
        "characterDeath": "death",
        "characterHair": "hair",
        "characterRealm": "realm",
        "characterHeight": "height",
        "characterSpouse": "spouse",
    },
    # wikiUrl is output only; the API does not filter on it
    output_fields=(
        "name",
        "wikiUrl",
        "race",
        "gender",
        "height",
        "hair",
        "realm",
        "birth",
        "spouse",
        "death",
    ),
)
