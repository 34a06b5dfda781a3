"""Core enumerations shared by the scraper components.

Architecture:
    String enums keep values identical to what the upstream API and the run
    input use, so they serialize without conversion tables.

Key Types:
    - EntityKind: The five record categories exposed by The One API
    - RunState: States of the pagination state machine
    - FilterStyle: How filter values are rendered as query parameters
"""

from __future__ import annotations

from enum import Enum

from .exceptions import ConfigError


class EntityKind(str, Enum):
    """Record categories served by the upstream catalog."""

    BOOK = "book"
    MOVIE = "movie"
    CHARACTER = "character"
    QUOTE = "quote"
    CHAPTER = "chapter"

    @classmethod
    def parse(cls, value: str | EntityKind) -> EntityKind:
        """Parse an entity kind from user input.

        Args:
            value: Entity name (case-insensitive) or an EntityKind

        Returns:
            Matching EntityKind

        Raises:
            ConfigError: If value is not one of the supported kinds
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ConfigError(f"Invalid entity: {value}. Must be one of: {valid}.") from None


class RunState(str, Enum):
    """Pagination run states.

    RUNNING is the only non-terminal state. ABORTED is the only terminal
    state that represents an error outcome.
    """

    RUNNING = "running"
    EXHAUSTED = "exhausted"
    QUOTA_REACHED = "quota_reached"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self is not RunState.RUNNING


class FilterStyle(str, Enum):
    """Rendering of filter values in the query string."""

    EXACT = "exact"
    REGEX = "regex"

    @classmethod
    def parse(cls, value: str | FilterStyle) -> FilterStyle:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(
                f"Invalid filter style: {value}. Must be 'exact' or 'regex'."
            ) from None
