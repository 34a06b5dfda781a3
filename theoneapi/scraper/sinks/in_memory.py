"""In-memory record sink."""

from __future__ import annotations

from typing import Any


class InMemorySink:
    """Keeps pushed batches in memory, in push order."""

    def __init__(self) -> None:
        self.batches: list[list[dict[str, Any]]] = []

    async def push(self, records: list[dict[str, Any]]) -> None:
        self.batches.append(list(records))

    @property
    def records(self) -> list[dict[str, Any]]:
        """All records, flattened in push order."""
        return [record for batch in self.batches for record in batch]

    def __len__(self) -> int:
        return sum(len(batch) for batch in self.batches)

    def clear(self) -> None:
        self.batches.clear()
