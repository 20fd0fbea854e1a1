"""Asynchronous source adapters.

Turn async iterables into AsyncQueryableSource objects. Counting and slicing
each run their own pass, so the wrapped object has to be re-iterable, or be
a factory producing a fresh async iterable per pass.
"""

import inspect
from collections.abc import AsyncIterable, AsyncIterator
from typing import Any, Callable, Generic, TypeVar

from ..core.exceptions import SourceNotReiterableError
from ..protocols import AsyncQueryableSource
from ..utils import validate_source

T = TypeVar('T')


async def _window(iterable: AsyncIterable[T], offset: int, limit: int) -> AsyncIterator[T]:
    """Yield at most limit items after skipping offset items."""
    if limit <= 0:
        return
    iterator = iterable.__aiter__()
    position = 0
    taken = 0
    try:
        async for item in iterator:
            if position >= offset:
                yield item
                taken += 1
                if taken >= limit:
                    break
            position += 1
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()


async def _count(iterable: AsyncIterable[Any]) -> int:
    total = 0
    async for _ in iterable:
        total += 1
    return total


class AsyncIterableSource(Generic[T]):
    """Source over a re-iterable async iterable.

    The wrapped object must return a new iterator from every __aiter__()
    call; async generator objects do not and are rejected.
    """

    __slots__ = ("_iterable",)

    def __init__(self, iterable: AsyncIterable[T]):
        validate_source(iterable)
        if isinstance(iterable, AsyncIterator):
            raise SourceNotReiterableError(iterable)
        self._iterable = iterable

    async def count(self) -> int:
        return await _count(self._iterable)

    def slice(self, offset: int, limit: int) -> AsyncIterator[T]:
        return _window(self._iterable, offset, limit)


class AsyncIterableFactorySource(Generic[T]):
    """Source over a zero-argument callable returning an async iterable.

    Typically an async generator function: every pass calls the factory
    again, so each enumeration starts from the beginning.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], AsyncIterable[T]]):
        validate_source(factory)
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")
        self._factory = factory

    async def count(self) -> int:
        return await _count(self._open())

    def slice(self, offset: int, limit: int) -> AsyncIterator[T]:
        return _window(self._open(), offset, limit)

    def _open(self) -> AsyncIterable[T]:
        iterable = self._factory()
        if not isinstance(iterable, AsyncIterable):
            raise TypeError(
                f"factory must return an async iterable, got {type(iterable).__name__}"
            )
        return iterable


def _is_async_queryable(source: Any) -> bool:
    return (
        isinstance(source, AsyncQueryableSource)
        and inspect.iscoroutinefunction(source.count)
    )


def as_async_queryable(source: Any) -> AsyncQueryableSource:
    """Resolve a caller-supplied source into an AsyncQueryableSource.

    Args:
        source: An AsyncQueryableSource, a re-iterable async iterable, or a
            zero-argument callable returning an async iterable

    Returns:
        Source exposing awaitable count() and async slice()

    Raises:
        SourceRequiredError: If source is None
        SourceNotReiterableError: If source is a one-shot async iterator
        TypeError: If source is none of the accepted shapes
    """
    validate_source(source)

    if _is_async_queryable(source):
        return source
    if isinstance(source, AsyncIterator):
        raise SourceNotReiterableError(source)
    if isinstance(source, AsyncIterable):
        return AsyncIterableSource(source)
    if callable(source):
        return AsyncIterableFactorySource(source)

    raise TypeError(
        f"Cannot paginate {type(source).__name__} asynchronously: expected an "
        f"async iterable, an async iterable factory or an object with async "
        f"count() and slice()"
    )
