"""Serialisation models for paged lists."""

from .base import BaseSchema
from .pagination import PagedListMetadata, PagedListResponse

__all__ = [
    "BaseSchema",
    "PagedListMetadata",
    "PagedListResponse",
]
