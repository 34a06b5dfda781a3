"""Record sinks."""

from .in_memory import InMemorySink
from .jsonl import JsonLinesSink

__all__ = ["InMemorySink", "JsonLinesSink"]
