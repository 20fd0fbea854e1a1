"""Base exceptions for neo-paging.

All exceptions raised by the library inherit from NeoPagingError and carry
an error code and a details dictionary for API error responses.
"""

from typing import Any, Dict, Optional


class NeoPagingError(Exception):
    """Base exception for all neo-paging errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args
    ):
        super().__init__(message, *args)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoPagingError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-paging exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
