"""Source adapters for paged lists."""

from .sequence import (
    SequenceSource,
    IterableSource,
    as_queryable,
)

from .async_iterable import (
    AsyncIterableSource,
    AsyncIterableFactorySource,
    as_async_queryable,
)

from .asyncpg_query import (
    AsyncpgQuerySource,
    QueryExecutor,
    record_to_dict,
)

__all__ = [
    # Synchronous
    "SequenceSource",
    "IterableSource",
    "as_queryable",

    # Asynchronous
    "AsyncIterableSource",
    "AsyncIterableFactorySource",
    "as_async_queryable",

    # asyncpg
    "AsyncpgQuerySource",
    "QueryExecutor",
    "record_to_dict",
]
