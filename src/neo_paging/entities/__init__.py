"""Paged list entities."""

from .page_request import PageRequest
from .paged_list import PagedList
from .async_paged_list import AsyncPagedList, LoadState

__all__ = [
    "PageRequest",
    "PagedList",
    "AsyncPagedList",
    "LoadState",
]
