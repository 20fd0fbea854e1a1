"""Paged-list contract shared by every construction strategy."""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar('T', covariant=True)


@runtime_checkable
class PagedListProtocol(Protocol[T]):
    """Read-only surface of a page taken from an ordered source.

    Callers depend on this protocol rather than on PagedList or
    AsyncPagedList, which only differ in how they are built.
    """

    @property
    def page_number(self) -> int:
        """1-based number of this page."""
        ...

    @property
    def page_size(self) -> int:
        """Maximum number of items on a page."""
        ...

    @property
    def total_count(self) -> int:
        """Number of items in the whole source."""
        ...

    @property
    def page_count(self) -> int:
        """Number of pages the source spans."""
        ...

    @property
    def items(self) -> Sequence[T]:
        """Items on this page, in source order."""
        ...

    @property
    def first_item_on_page(self) -> int:
        """1-based position in the source of the first item on this page."""
        ...

    @property
    def last_item_on_page(self) -> int:
        """1-based position in the source of the last item on this page."""
        ...

    @property
    def has_next_page(self) -> bool:
        ...

    @property
    def has_previous_page(self) -> bool:
        ...

    @property
    def is_first_page(self) -> bool:
        ...

    @property
    def is_last_page(self) -> bool:
        ...

    def at(self, index: int) -> T:
        """Get the item at index within this page.

        Raises:
            ItemIndexOutOfRangeError: If index is negative or not below
                the number of items on the page
        """
        ...
