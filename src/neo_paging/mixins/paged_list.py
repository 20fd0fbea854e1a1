"""Mixin providing the derived accessors of a paged list.

Concrete classes store page_number, page_size, total_count, page_count and
items in the slots below; everything else is computed on read so the
derived values can never drift from the stored snapshot.
"""

import operator
from typing import Any, Dict, Generic, Iterator, Optional, Tuple, TypeVar

from ..core.exceptions import ItemIndexOutOfRangeError
from ..utils import compute_offset

T = TypeVar('T')


class PagedListMixin(Generic[T]):
    """Read-only paged-list surface over stored page state."""

    __slots__ = ()

    _page_number: int
    _page_size: int
    _total_count: int
    _page_count: int
    _items: Tuple[T, ...]

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def items(self) -> Tuple[T, ...]:
        return self._items

    @property
    def offset(self) -> int:
        """Number of source items preceding this page."""
        return compute_offset(self._page_number, self._page_size)

    @property
    def first_item_on_page(self) -> int:
        return self.offset + 1

    @property
    def last_item_on_page(self) -> int:
        return self.first_item_on_page + len(self._items) - 1

    @property
    def has_next_page(self) -> bool:
        return self._page_number < self._page_count

    @property
    def has_previous_page(self) -> bool:
        return self._page_number > 1

    @property
    def is_first_page(self) -> bool:
        return self._page_number == 1

    @property
    def is_last_page(self) -> bool:
        """Whether this is the last page.

        An empty source has a page count of zero but is reported as a
        single empty page, so page 1 of it is both first and last.
        """
        return self._page_number == max(self._page_count, 1)

    @property
    def next_page_number(self) -> Optional[int]:
        return self._page_number + 1 if self.has_next_page else None

    @property
    def previous_page_number(self) -> Optional[int]:
        return self._page_number - 1 if self.has_previous_page else None

    def at(self, index: int) -> T:
        """Get the item at index within this page.

        Negative indices are not counted from the end.

        Raises:
            TypeError: If index is not integer-like
            ItemIndexOutOfRangeError: If index is outside [0, len(items))
        """
        if isinstance(index, bool):
            raise TypeError("Page indices must be integers, not bool")
        index = operator.index(index)
        if index < 0 or index >= len(self._items):
            raise ItemIndexOutOfRangeError(index, len(self._items))
        return self._items[index]

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return len(self._items) > 0

    def page_info(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        return {
            "page_number": self._page_number,
            "page_size": self._page_size,
            "total_count": self._total_count,
            "page_count": self._page_count,
            "first_item_on_page": self.first_item_on_page,
            "last_item_on_page": self.last_item_on_page,
            "has_next_page": self.has_next_page,
            "has_previous_page": self.has_previous_page,
            "is_first_page": self.is_first_page,
            "is_last_page": self.is_last_page,
            "next_page_number": self.next_page_number,
            "previous_page_number": self.previous_page_number,
            "items_on_page": len(self._items),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Items plus page information as a plain dictionary."""
        return {"items": list(self._items), **self.page_info()}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(page_number={self._page_number}, "
            f"page_size={self._page_size}, total_count={self._total_count}, "
            f"page_count={self._page_count}, items={len(self._items)})"
        )
