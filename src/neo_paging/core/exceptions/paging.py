"""Paging exceptions.

Errors raised while validating page parameters, resolving a source, or
reading items from a built page. Failures raised by a source while it is
being counted or sliced are not wrapped and reach the caller unchanged.
"""

from typing import Any, Optional

from .base import NeoPagingError


# Source Errors
class InvalidSourceError(NeoPagingError, ValueError):
    """Raised when the supplied source cannot be paginated."""
    pass


class SourceRequiredError(InvalidSourceError):
    """Raised when no source is supplied."""

    def __init__(self, parameter: str = "source"):
        super().__init__(
            f"{parameter} must not be None",
            details={"parameter": parameter},
        )


class SourceNotReiterableError(InvalidSourceError):
    """Raised when a source can only be enumerated once.

    Paging counts the source and then slices it, so one-shot iterators and
    async generator objects would yield an empty second pass.
    """

    def __init__(self, source: Any):
        type_name = type(source).__name__
        super().__init__(
            f"{type_name} can only be iterated once; pass a sequence, "
            f"a re-iterable object or a factory returning a fresh iterable",
            details={"source_type": type_name},
        )


# Parameter Errors
class PageParameterOutOfRangeError(NeoPagingError, ValueError):
    """Raised when page number or page size is outside its allowed range."""

    def __init__(self, parameter: str, value: int, message: Optional[str] = None):
        super().__init__(
            message or f"{parameter} must be greater than zero, got {value}",
            details={"parameter": parameter, "value": value},
        )
        self.parameter = parameter
        self.value = value


# Access Errors
class ItemIndexOutOfRangeError(NeoPagingError, IndexError):
    """Raised when indexing outside the items of a page."""

    def __init__(self, index: int, item_count: int):
        super().__init__(
            f"Index {index} is out of range for a page of {item_count} items",
            details={"index": index, "item_count": item_count},
        )
        self.index = index
        self.item_count = item_count
