"""Sequential page loop with quota tracking."""

from .definitions import FetchedPage, PageSource, PageTransformer, RecordSink, ScrapeRun
from .driver import PaginationDriver

__all__ = [
    "FetchedPage",
    "PageSource",
    "PageTransformer",
    "RecordSink",
    "ScrapeRun",
    "PaginationDriver",
]
