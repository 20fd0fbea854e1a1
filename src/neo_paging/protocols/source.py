"""Source protocols consumed by the paged lists."""

from typing import AsyncIterable, Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar('T', covariant=True)


@runtime_checkable
class QueryableSource(Protocol[T]):
    """Synchronous source supporting count and ordered offset/limit slicing."""

    def count(self) -> int:
        """Count all items in the source.

        Returns:
            Total number of items
        """
        ...

    def slice(self, offset: int, limit: int) -> Iterable[T]:
        """Skip offset items and take at most limit of the rest.

        Args:
            offset: Number of leading items to skip
            limit: Maximum number of items to return

        Returns:
            Items in source order
        """
        ...


@runtime_checkable
class AsyncQueryableSource(Protocol[T]):
    """Asynchronous source supporting count and ordered offset/limit slicing."""

    async def count(self) -> int:
        """Count all items in the source.

        Returns:
            Total number of items
        """
        ...

    def slice(self, offset: int, limit: int) -> AsyncIterable[T]:
        """Skip offset items and take at most limit of the rest.

        Args:
            offset: Number of leading items to skip
            limit: Maximum number of items to yield

        Returns:
            Async iterable of items in source order
        """
        ...
