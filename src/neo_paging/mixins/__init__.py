"""Mixins for paged lists."""

from .paged_list import PagedListMixin

__all__ = [
    "PagedListMixin",
]
