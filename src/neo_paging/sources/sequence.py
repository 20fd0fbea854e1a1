"""Synchronous source adapters.

Turn plain Python containers into QueryableSource objects so PagedList can
count and slice them uniformly.
"""

import inspect
import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, List, TypeVar

from ..core.exceptions import SourceNotReiterableError
from ..protocols import QueryableSource
from ..utils import validate_source

T = TypeVar('T')


class SequenceSource(Generic[T]):
    """Source over a random-access sequence (list, tuple, range, ...).

    Counting uses len() and slicing uses native slices, so neither pass
    walks the whole sequence.
    """

    __slots__ = ("_sequence",)

    def __init__(self, sequence: Sequence[T]):
        validate_source(sequence)
        self._sequence = sequence

    def count(self) -> int:
        return len(self._sequence)

    def slice(self, offset: int, limit: int) -> Sequence[T]:
        return self._sequence[offset:offset + limit]


class IterableSource(Generic[T]):
    """Source over a re-iterable collection without random access.

    Both count() and slice() start a fresh iteration, so the wrapped object
    must hand out a new iterator on every iter() call.
    """

    __slots__ = ("_iterable",)

    def __init__(self, iterable: Iterable[T]):
        validate_source(iterable)
        if isinstance(iterable, Iterator):
            raise SourceNotReiterableError(iterable)
        self._iterable = iterable

    def count(self) -> int:
        return sum(1 for _ in self._iterable)

    def slice(self, offset: int, limit: int) -> List[T]:
        return list(itertools.islice(self._iterable, offset, offset + limit))


def _is_sync_queryable(source: Any) -> bool:
    return (
        isinstance(source, QueryableSource)
        and not inspect.iscoroutinefunction(source.count)
    )


def as_queryable(source: Any) -> QueryableSource:
    """Resolve a caller-supplied source into a QueryableSource.

    Args:
        source: A QueryableSource, a sequence, or a re-iterable collection

    Returns:
        Source exposing count() and slice()

    Raises:
        SourceRequiredError: If source is None
        SourceNotReiterableError: If source is a one-shot iterator
        TypeError: If source is not iterable at all
    """
    validate_source(source)

    if _is_sync_queryable(source):
        return source
    if isinstance(source, Sequence):
        return SequenceSource(source)
    if isinstance(source, Iterator):
        raise SourceNotReiterableError(source)
    if isinstance(source, Iterable):
        return IterableSource(source)

    raise TypeError(
        f"Cannot paginate {type(source).__name__}: expected a sequence, "
        f"a re-iterable collection or an object with count() and slice()"
    )
