"""Utility helpers for neo-paging."""

from .paging import (
    validate_page_parameters,
    validate_source,
    compute_offset,
    compute_page_count,
)

__all__ = [
    "validate_page_parameters",
    "validate_source",
    "compute_offset",
    "compute_page_count",
]
