"""Page arithmetic and parameter validation."""

from typing import Any

from ..core.exceptions import PageParameterOutOfRangeError, SourceRequiredError


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful page parameter
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def validate_page_parameters(page_number: int, page_size: int) -> None:
    """Validate page number and page size.

    Raises:
        TypeError: If either value is not an int
        PageParameterOutOfRangeError: If either value is zero or negative
    """
    if _require_int("page_number", page_number) <= 0:
        raise PageParameterOutOfRangeError("page_number", page_number)
    if _require_int("page_size", page_size) <= 0:
        raise PageParameterOutOfRangeError("page_size", page_size)


def validate_source(source: Any) -> None:
    """Reject a missing source before any other work happens."""
    if source is None:
        raise SourceRequiredError()


def compute_offset(page_number: int, page_size: int) -> int:
    """Number of source items preceding the given page."""
    return (page_number - 1) * page_size


def compute_page_count(total_count: int, page_size: int) -> int:
    """Ceiling of total_count / page_size using integer arithmetic."""
    return -(-total_count // page_size)
