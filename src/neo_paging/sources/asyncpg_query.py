"""
asyncpg query source for AsyncPagedList.

Wraps an already ordered SELECT statement and pages it with a COUNT(*)
query and a LIMIT/OFFSET query against an asyncpg connection or pool.
"""
import logging
from typing import Any, AsyncIterator, Callable, Optional, Protocol, Sequence

from asyncpg import Record

from ..core.exceptions import SourceRequiredError

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """The part of asyncpg.Connection / asyncpg.Pool used by the source."""

    async def fetch(self, query: str, *args, timeout: Optional[float] = None) -> Sequence[Record]:
        ...

    async def fetchval(self, query: str, *args, column: int = 0, timeout: Optional[float] = None) -> Any:
        ...


def record_to_dict(record: Record) -> dict:
    """Default record mapper."""
    return dict(record)


class AsyncpgQuerySource:
    """AsyncQueryableSource backed by a SQL query.

    The query must carry its own ORDER BY; the source never sorts. Caller
    parameters use $1..$n placeholders and the LIMIT/OFFSET placeholders are
    numbered after them.

    Use a pool as executor when loading with concurrent=True; a single
    connection cannot run the count and the slice at the same time.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        query: str,
        *args: Any,
        record_mapper: Optional[Callable[[Record], Any]] = None,
        timeout: Optional[float] = None
    ):
        """Initialize AsyncpgQuerySource.

        Args:
            executor: asyncpg connection or pool
            query: Ordered SELECT statement without LIMIT/OFFSET
            *args: Query parameters
            record_mapper: Converts each record to an item (defaults to dict)
            timeout: Per-query timeout passed to asyncpg
        """
        if executor is None:
            raise SourceRequiredError("executor")
        if not query or not query.strip():
            raise ValueError("query must be a non-empty SQL statement")

        self._executor = executor
        self._query = query.strip().rstrip(";").rstrip()
        self._args = args
        self._record_mapper = record_mapper or record_to_dict
        self._timeout = timeout

    @property
    def query(self) -> str:
        return self._query

    @property
    def count_query(self) -> str:
        return f"SELECT COUNT(*) FROM ({self._query}) AS paged_source"

    @property
    def slice_query(self) -> str:
        limit_param = len(self._args) + 1
        return f"{self._query} LIMIT ${limit_param} OFFSET ${limit_param + 1}"

    async def count(self) -> int:
        logger.debug(f"Counting paged source: {self.count_query}")
        total = await self._executor.fetchval(
            self.count_query, *self._args, timeout=self._timeout
        )
        return int(total or 0)

    async def _fetch_slice(self, offset: int, limit: int) -> AsyncIterator[Any]:
        logger.debug(f"Fetching paged source slice offset={offset} limit={limit}")
        rows = await self._executor.fetch(
            self.slice_query, *self._args, limit, offset, timeout=self._timeout
        )
        for row in rows:
            yield self._record_mapper(row)

    def slice(self, offset: int, limit: int) -> AsyncIterator[Any]:
        return self._fetch_slice(offset, limit)
