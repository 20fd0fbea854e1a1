"""Neo-Paging - pagination of ordered sources for the NeoMultiTenant platform.

Computes total count, page count and the slice of items belonging to a
requested page, over synchronous sources (PagedList) or asynchronous ones
(AsyncPagedList). Logging is not configured on import; call setup_logging()
from the application when console output is wanted.
"""

from .__version__ import __version__

from .config import (
    PagingSettings,
    get_settings,
    setup_logging,
    get_logger,
    LoggingConfig,
    LogVerbosity,
    LogFormat,
)

from .core.exceptions import (
    NeoPagingError,
    InvalidSourceError,
    SourceRequiredError,
    SourceNotReiterableError,
    PageParameterOutOfRangeError,
    ItemIndexOutOfRangeError,
    create_error_response,
)

from .protocols import (
    PagedListProtocol,
    QueryableSource,
    AsyncQueryableSource,
)

from .entities import (
    PageRequest,
    PagedList,
    AsyncPagedList,
    LoadState,
)

from .sources import (
    SequenceSource,
    IterableSource,
    AsyncIterableSource,
    AsyncIterableFactorySource,
    AsyncpgQuerySource,
    as_queryable,
    as_async_queryable,
)

from .models import (
    PagedListMetadata,
    PagedListResponse,
)

__all__ = [
    "__version__",

    # Configuration
    "PagingSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "LogVerbosity",
    "LogFormat",

    # Exceptions
    "NeoPagingError",
    "InvalidSourceError",
    "SourceRequiredError",
    "SourceNotReiterableError",
    "PageParameterOutOfRangeError",
    "ItemIndexOutOfRangeError",
    "create_error_response",

    # Protocols
    "PagedListProtocol",
    "QueryableSource",
    "AsyncQueryableSource",

    # Entities
    "PageRequest",
    "PagedList",
    "AsyncPagedList",
    "LoadState",

    # Sources
    "SequenceSource",
    "IterableSource",
    "AsyncIterableSource",
    "AsyncIterableFactorySource",
    "AsyncpgQuerySource",
    "as_queryable",
    "as_async_queryable",

    # Models
    "PagedListMetadata",
    "PagedListResponse",
]
