"""Movie endpoint definition."""

from __future__ import annotations

from theoneapi.scraper.core import EntityKind

from .definitions import EntitySpec

SPEC = EntitySpec(
    kind=EntityKind.MOVIE,
    filter_fields={
        "movieName": "name",
        "movieRuntimeInMinutes": "runtimeInMinutes",
        "movieBudgetInMillions": "budgetInMillions",
        "movieBoxOfficeRevenueInMillions": "boxOfficeRevenueInMillions",
        "movieAcademyAwardNominations": "academyAwardNominations",
        "movieAcademyAwardWins": "academyAwardWins",
        "movieRottenTomatoesScore": "rottenTomatoesScore",
    },
    output_fields=(
        "name",
        "runtimeInMinutes",
        "budgetInMillions",
        "boxOfficeRevenueInMillions",
        "academyAwardNominations",
        "academyAwardWins",
        "rottenTomatoesScore",
    ),
)
