"""One API raw response schemas.

This module defines Pydantic models for raw One API responses. These
models represent the structure returned by the API before conversion to
normalized records.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OneApiPage(BaseModel):
    """Paged list envelope returned by every collection endpoint.

    ``docs`` is None when the body carries no docs array at all, which the
    pagination driver treats as "no data" rather than as an error.
    """

    docs: list[Any] | None = None
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    page: int | None = None
    pages: int | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("docs", mode="before")
    @classmethod
    def _docs_must_be_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None

    @field_validator("total", "limit", "offset", "page", "pages", mode="before")
    @classmethod
    def _optional_int(cls, value: Any) -> Any:
        return value if isinstance(value, int) and not isinstance(value, bool) else None


class OneApiRecord(BaseModel):
    """Single raw record: an ``_id`` plus entity-specific attributes."""

    id: str | None = Field(None, alias="_id")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        return str(value)

    def attribute(self, name: str) -> Any:
        """Return a raw attribute, None when absent."""
        return (self.model_extra or {}).get(name)
