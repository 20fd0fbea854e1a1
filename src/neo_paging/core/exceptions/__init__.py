"""Exceptions module for neo-paging."""

from .base import (
    NeoPagingError,
    create_error_response,
)

from .paging import (
    # Source Errors
    InvalidSourceError,
    SourceRequiredError,
    SourceNotReiterableError,

    # Parameter Errors
    PageParameterOutOfRangeError,

    # Access Errors
    ItemIndexOutOfRangeError,
)

__all__ = [
    "NeoPagingError",
    "create_error_response",
    "InvalidSourceError",
    "SourceRequiredError",
    "SourceNotReiterableError",
    "PageParameterOutOfRangeError",
    "ItemIndexOutOfRangeError",
]
