"""JSON Lines record sink."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, TextIO


class JsonLinesSink:
    """Appends one JSON object per record to a file (or stdout for ``-``).

    The file is opened in append mode on every push and written in the
    default executor, so large batches do not block the event loop. Each
    completed batch is on disk before the push returns, even if a later page
    aborts the run. Stream output (stdout) is written inline.
    """

    def __init__(self, path: str | Path, *, stream: TextIO | None = None) -> None:
        self.path = None if str(path) == "-" else Path(path)
        self._stream = stream
        self.count = 0
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    async def push(self, records: list[dict[str, Any]]) -> None:
        lines = "".join(json.dumps(record, ensure_ascii=False) + "\n" for record in records)
        if self.path is None:
            out = self._stream or sys.stdout
            out.write(lines)
            out.flush()
        else:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._append, lines)
        self.count += len(records)

    def _append(self, lines: str) -> None:
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(lines)
