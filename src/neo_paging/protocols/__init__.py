"""Protocols for paged lists and their sources."""

from .paged_list import PagedListProtocol

from .source import (
    QueryableSource,
    AsyncQueryableSource,
)

__all__ = [
    "PagedListProtocol",
    "QueryableSource",
    "AsyncQueryableSource",
]
