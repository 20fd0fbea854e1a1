"""Synchronous paged list."""

import logging
from typing import Any, Iterable, TypeVar, Union

from ..mixins import PagedListMixin
from ..protocols import QueryableSource
from ..sources import as_queryable
from ..utils import compute_page_count, validate_page_parameters, validate_source
from .page_request import PageRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PagedList(PagedListMixin[T]):
    """Page of a synchronous source, computed eagerly on construction.

    The source is enumerated twice: once to count it and once to take the
    page's slice. Pass a sequence or a QueryableSource with a cheap count()
    when the source is expensive to walk.

    Example:
        >>> page = PagedList(range(25), page_number=3, page_size=10)
        >>> page.items
        (20, 21, 22, 23, 24)
        >>> page.is_last_page
        True
    """

    __slots__ = ("_page_number", "_page_size", "_total_count", "_page_count", "_items")

    def __init__(
        self,
        source: Union[QueryableSource[T], Iterable[T]],
        page_number: int,
        page_size: int
    ):
        """Initialize PagedList.

        Args:
            source: Ordered, already filtered source
            page_number: 1-based page to take
            page_size: Maximum number of items per page

        Raises:
            SourceRequiredError: If source is None
            SourceNotReiterableError: If source is a one-shot iterator
            PageParameterOutOfRangeError: If page_number or page_size <= 0
        """
        validate_source(source)
        validate_page_parameters(page_number, page_size)
        queryable = as_queryable(source)

        self._page_number = page_number
        self._page_size = page_size
        self._total_count = queryable.count()
        self._page_count = compute_page_count(self._total_count, page_size)
        self._items = tuple(queryable.slice(self.offset, page_size))

        logger.debug(
            f"Built page {page_number}/{self._page_count} "
            f"({len(self._items)} of {self._total_count} items)"
        )

    @classmethod
    def from_request(cls, source: Any, request: PageRequest) -> "PagedList[T]":
        """Build the page described by a PageRequest."""
        return cls(source, request.page_number, request.page_size)
