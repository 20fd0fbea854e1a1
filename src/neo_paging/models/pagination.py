"""
Pagination models for API responses built from paged lists.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from ..protocols import PagedListProtocol
from .base import BaseSchema

T = TypeVar('T')


class PagedListMetadata(BaseSchema):
    """Metadata describing one page of a paged list."""
    page_number: int = Field(ge=1, description="Current page number (1-based)")
    page_size: int = Field(ge=1, description="Maximum number of items per page")
    total_count: int = Field(ge=0, description="Total number of items in the source")
    page_count: int = Field(ge=0, description="Total number of pages")
    first_item_on_page: int = Field(description="1-based position of the first item on the page")
    last_item_on_page: int = Field(description="1-based position of the last item on the page")
    has_next_page: bool = Field(description="Whether there is a next page")
    has_previous_page: bool = Field(description="Whether there is a previous page")
    is_first_page: bool = Field(description="Whether this is the first page")
    is_last_page: bool = Field(description="Whether this is the last page")
    next_page_number: Optional[int] = Field(None, description="Number of the next page")
    previous_page_number: Optional[int] = Field(None, description="Number of the previous page")

    @classmethod
    def from_paged_list(cls, paged_list: PagedListProtocol) -> "PagedListMetadata":
        """Create metadata from any paged list."""
        return cls(
            page_number=paged_list.page_number,
            page_size=paged_list.page_size,
            total_count=paged_list.total_count,
            page_count=paged_list.page_count,
            first_item_on_page=paged_list.first_item_on_page,
            last_item_on_page=paged_list.last_item_on_page,
            has_next_page=paged_list.has_next_page,
            has_previous_page=paged_list.has_previous_page,
            is_first_page=paged_list.is_first_page,
            is_last_page=paged_list.is_last_page,
            next_page_number=paged_list.page_number + 1 if paged_list.has_next_page else None,
            previous_page_number=paged_list.page_number - 1 if paged_list.has_previous_page else None,
        )


class PagedListResponse(BaseSchema, Generic[T]):
    """Generic paged response model."""
    items: List[T] = Field(description="Items on the current page")
    pagination: PagedListMetadata = Field(description="Pagination metadata")

    @classmethod
    def from_paged_list(cls, paged_list: PagedListProtocol) -> "PagedListResponse[T]":
        """Create a response from any paged list."""
        return cls(
            items=list(paged_list.items),
            pagination=PagedListMetadata.from_paged_list(paged_list),
        )
