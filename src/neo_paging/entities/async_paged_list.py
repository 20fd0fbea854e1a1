"""Asynchronous paged list.

Instances only come out of AsyncPagedList.create(), which awaits the load
before handing the page over; a partially loaded page is never returned.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Coroutine, Tuple, TypeVar

from ..mixins import PagedListMixin
from ..protocols import AsyncQueryableSource
from ..sources import as_async_queryable
from ..utils import compute_page_count, validate_page_parameters, validate_source
from .page_request import PageRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')

_FACTORY_TOKEN = object()


class LoadState(str, Enum):
    """Load lifecycle of an AsyncPagedList."""
    CREATED = "created"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class AsyncPagedList(PagedListMixin[T]):
    """Page of an asynchronous source.

    Example:
        page = await AsyncPagedList.create(source, page_number=2, page_size=20)
    """

    __slots__ = ("_page_number", "_page_size", "_total_count", "_page_count", "_items", "_state")

    def __init__(self, page_number: int, page_size: int, *, _token: Any = None):
        if _token is not _FACTORY_TOKEN:
            raise TypeError(
                "AsyncPagedList cannot be instantiated directly; "
                "use 'await AsyncPagedList.create(...)'"
            )
        self._page_number = page_number
        self._page_size = page_size
        self._total_count = 0
        self._page_count = 0
        self._items: Tuple[T, ...] = ()
        self._state = LoadState.CREATED

    @property
    def state(self) -> LoadState:
        return self._state

    @classmethod
    def create(
        cls,
        source: Any,
        page_number: int,
        page_size: int,
        *,
        concurrent: bool = False
    ) -> Coroutine[Any, Any, "AsyncPagedList[T]"]:
        """Create a fully loaded page of an asynchronous source.

        Arguments are checked when create() is called, before anything is
        awaited; the returned coroutine then counts the source and takes
        the page's slice.

        Args:
            source: AsyncQueryableSource, re-iterable async iterable, or a
                zero-argument callable returning an async iterable
            page_number: 1-based page to take
            page_size: Maximum number of items per page
            concurrent: Count and slice at the same time. Only for sources
                that support concurrent enumeration, such as a pool-backed
                AsyncpgQuerySource

        Returns:
            Coroutine resolving to the loaded AsyncPagedList

        Raises:
            SourceRequiredError: If source is None
            SourceNotReiterableError: If source is a one-shot async iterator
            PageParameterOutOfRangeError: If page_number or page_size <= 0
        """
        validate_source(source)
        validate_page_parameters(page_number, page_size)
        queryable = as_async_queryable(source)

        return cls._create(queryable, page_number, page_size, concurrent)

    @classmethod
    def create_from_request(
        cls,
        source: Any,
        request: PageRequest,
        *,
        concurrent: bool = False
    ) -> Coroutine[Any, Any, "AsyncPagedList[T]"]:
        """Create the page described by a PageRequest."""
        return cls.create(source, request.page_number, request.page_size, concurrent=concurrent)

    @classmethod
    async def _create(
        cls,
        source: AsyncQueryableSource[T],
        page_number: int,
        page_size: int,
        concurrent: bool
    ) -> "AsyncPagedList[T]":
        paged_list = cls(page_number, page_size, _token=_FACTORY_TOKEN)
        await paged_list._load(source, concurrent)
        return paged_list

    async def _load(self, source: AsyncQueryableSource[T], concurrent: bool) -> None:
        """Count the source and take this page's slice.

        Errors raised by the source propagate unchanged after the state is
        set to FAILED.
        """
        self._state = LoadState.LOADING
        logger.debug(f"Loading page {self._page_number} (page_size={self._page_size}, concurrent={concurrent})")

        try:
            if concurrent:
                total_count, items = await self._load_concurrently(source)
            else:
                total_count = await source.count()
                items = await self._take(source)
        except BaseException:
            self._state = LoadState.FAILED
            logger.debug(f"Loading page {self._page_number} failed")
            raise

        self._total_count = total_count
        self._page_count = compute_page_count(total_count, self._page_size)
        self._items = items
        self._state = LoadState.READY

        logger.debug(
            f"Loaded page {self._page_number}/{self._page_count} "
            f"({len(items)} of {total_count} items)"
        )

    async def _load_concurrently(self, source: AsyncQueryableSource[T]) -> Tuple[int, Tuple[T, ...]]:
        count_task = asyncio.ensure_future(source.count())
        items_task = asyncio.ensure_future(self._take(source))
        try:
            total_count, items = await asyncio.gather(count_task, items_task)
        except BaseException:
            for task in (count_task, items_task):
                task.cancel()
            raise
        return total_count, items

    async def _take(self, source: AsyncQueryableSource[T]) -> Tuple[T, ...]:
        return tuple([item async for item in source.slice(self.offset, self._page_size)])
