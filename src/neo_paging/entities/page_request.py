"""Page request entity."""

from dataclasses import dataclass, field

from ..config import get_settings
from ..core.exceptions import PageParameterOutOfRangeError
from ..utils import compute_offset, validate_page_parameters


def _default_page_size() -> int:
    return get_settings().default_page_size


@dataclass(frozen=True)
class PageRequest:
    """Requested page of an ordered source.

    page_size defaults to the configured default page size and is capped by
    the configured max_page_size when one is set.
    """

    page_number: int = 1
    page_size: int = field(default_factory=_default_page_size)

    def __post_init__(self):
        """Validate pagination parameters."""
        validate_page_parameters(self.page_number, self.page_size)

        max_page_size = get_settings().max_page_size
        if max_page_size is not None and self.page_size > max_page_size:
            raise PageParameterOutOfRangeError(
                "page_size",
                self.page_size,
                f"page_size must be between 1 and {max_page_size}, got {self.page_size}",
            )

    @property
    def offset(self) -> int:
        """Calculate offset from page number and page size."""
        return compute_offset(self.page_number, self.page_size)

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size

    def next(self) -> "PageRequest":
        """Request for the following page with the same size."""
        return PageRequest(page_number=self.page_number + 1, page_size=self.page_size)

    def previous(self) -> "PageRequest":
        """Request for the preceding page with the same size.

        Raises:
            PageParameterOutOfRangeError: When called on the first page
        """
        return PageRequest(page_number=self.page_number - 1, page_size=self.page_size)
