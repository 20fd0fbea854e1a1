"""Tests for the synchronous PagedList."""

import pytest

from neo_paging import (
    ItemIndexOutOfRangeError,
    PagedList,
    PagedListProtocol,
    PageParameterOutOfRangeError,
    PageRequest,
    SourceNotReiterableError,
    SourceRequiredError,
)


class TestPagedListScenarios:
    """Reference scenarios over a 25 item source."""

    def test_first_page(self, twenty_five_items):
        page = PagedList(twenty_five_items, page_number=1, page_size=10)

        assert page.total_count == 25
        assert page.page_count == 3
        assert len(page.items) == 10
        assert page.items == tuple(range(1, 11))
        assert page.first_item_on_page == 1
        assert page.last_item_on_page == 10
        assert page.has_next_page is True
        assert page.has_previous_page is False
        assert page.is_first_page is True
        assert page.is_last_page is False

    def test_last_partial_page(self, twenty_five_items):
        page = PagedList(twenty_five_items, page_number=3, page_size=10)

        assert page.items == (21, 22, 23, 24, 25)
        assert page.first_item_on_page == 21
        assert page.last_item_on_page == 25
        assert page.is_last_page is True
        assert page.has_next_page is False
        assert page.has_previous_page is True

    def test_middle_page(self, twenty_five_items):
        page = PagedList(twenty_five_items, page_number=2, page_size=10)

        assert page.items == tuple(range(11, 21))
        assert page.has_next_page is True
        assert page.has_previous_page is True
        assert page.next_page_number == 3
        assert page.previous_page_number == 1

    def test_empty_source(self):
        page = PagedList([], page_number=1, page_size=10)

        assert page.total_count == 0
        assert page.page_count == 0
        assert page.items == ()
        assert page.is_first_page is True
        assert page.is_last_page is True
        assert page.has_next_page is False
        assert page.has_previous_page is False
        assert page.next_page_number is None
        assert page.last_item_on_page == 0

    def test_page_beyond_data(self, twenty_five_items):
        page = PagedList(twenty_five_items, page_number=5, page_size=10)

        assert page.total_count == 25
        assert page.page_count == 3
        assert page.items == ()
        assert page.first_item_on_page == 41
        assert page.last_item_on_page == 40
        assert page.is_last_page is False
        assert page.has_next_page is False
        assert page.has_previous_page is True

    def test_single_page(self):
        page = PagedList(["a", "b"], page_number=1, page_size=10)

        assert page.page_count == 1
        assert page.is_first_page is True
        assert page.is_last_page is True


class TestPagedListValidation:
    """Argument validation happens before the source is touched."""

    def test_none_source(self):
        with pytest.raises(SourceRequiredError) as exc_info:
            PagedList(None, 1, 10)

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.details == {"parameter": "source"}

    @pytest.mark.parametrize("page_number,page_size,parameter", [
        (0, 10, "page_number"),
        (-1, 10, "page_number"),
        (1, 0, "page_size"),
        (1, -5, "page_size"),
    ])
    def test_out_of_range_parameters(self, recording_queryable, page_number, page_size, parameter):
        with pytest.raises(PageParameterOutOfRangeError) as exc_info:
            PagedList(recording_queryable, page_number, page_size)

        assert exc_info.value.parameter == parameter
        assert isinstance(exc_info.value, ValueError)
        assert recording_queryable.calls == []

    def test_none_source_reported_before_parameters(self):
        with pytest.raises(SourceRequiredError):
            PagedList(None, 0, 0)

    @pytest.mark.parametrize("page_number,page_size", [
        ("1", 10),
        (1, 2.5),
        (True, 10),
        (None, 10),
    ])
    def test_non_int_parameters(self, twenty_five_items, page_number, page_size):
        with pytest.raises(TypeError):
            PagedList(twenty_five_items, page_number, page_size)

    def test_generator_rejected(self):
        with pytest.raises(SourceNotReiterableError):
            PagedList((item for item in range(5)), 1, 2)

    def test_iterator_rejected(self):
        with pytest.raises(SourceNotReiterableError):
            PagedList(iter([1, 2, 3]), 1, 2)

    def test_non_iterable_rejected(self):
        with pytest.raises(TypeError):
            PagedList(42, 1, 2)


class TestPagedListSources:
    """Different shapes of synchronous source."""

    def test_queryable_source_counted_then_sliced(self, recording_queryable):
        page = PagedList(recording_queryable, page_number=2, page_size=10)

        assert recording_queryable.calls == [("count",), ("slice", 10, 10)]
        assert page.items == tuple(range(11, 21))

    def test_range_source(self):
        page = PagedList(range(100), page_number=4, page_size=25)

        assert page.items == tuple(range(75, 100))
        assert page.page_count == 4

    def test_tuple_source(self):
        page = PagedList(("a", "b", "c"), page_number=2, page_size=2)

        assert page.items == ("c",)

    def test_reiterable_collection(self):
        source = {"one": 1, "two": 2, "three": 3}.values()
        page = PagedList(source, page_number=1, page_size=2)

        assert page.total_count == 3
        assert page.items == (1, 2)

    def test_source_error_propagates_unchanged(self):
        class BrokenSource:
            def count(self):
                raise ConnectionError("database unavailable")

            def slice(self, offset, limit):
                return []

        with pytest.raises(ConnectionError, match="database unavailable"):
            PagedList(BrokenSource(), 1, 10)

    def test_from_request(self, twenty_five_items):
        page = PagedList.from_request(twenty_five_items, PageRequest(page_number=3, page_size=5))

        assert page.items == (11, 12, 13, 14, 15)


class TestPagedListAccess:
    """Indexed access and the read-only surface."""

    @pytest.fixture
    def page(self, twenty_five_items):
        return PagedList(twenty_five_items, page_number=3, page_size=10)

    def test_at_returns_items(self, page):
        assert [page.at(index) for index in range(len(page.items))] == list(page.items)

    def test_getitem(self, page):
        assert page[0] == 21
        assert page[4] == 25

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_index(self, page, index):
        with pytest.raises(ItemIndexOutOfRangeError) as exc_info:
            page.at(index)

        assert isinstance(exc_info.value, IndexError)
        assert exc_info.value.details == {"index": index, "item_count": 5}

    def test_negative_getitem_not_counted_from_end(self, page):
        with pytest.raises(IndexError):
            page[-1]

    def test_slice_index_rejected(self, page):
        with pytest.raises(TypeError):
            page[0:2]

    @pytest.mark.parametrize("index", ["0", 1.0, True])
    def test_non_integer_index_rejected(self, page, index):
        with pytest.raises(TypeError):
            page.at(index)

    def test_integer_like_index(self, page):
        class RowNumber:
            def __init__(self, value):
                self.value = value

            def __index__(self):
                return self.value

        assert page.at(RowNumber(2)) == 23
        assert page[RowNumber(4)] == 25
        with pytest.raises(ItemIndexOutOfRangeError):
            page.at(RowNumber(5))

    def test_empty_page_index(self):
        page = PagedList([], 1, 10)

        with pytest.raises(ItemIndexOutOfRangeError):
            page.at(0)

    def test_container_protocol(self, page):
        assert len(page) == 5
        assert list(page) == [21, 22, 23, 24, 25]
        assert bool(page) is True
        assert bool(PagedList([], 1, 10)) is False

    def test_attributes_read_only(self, page):
        with pytest.raises(AttributeError):
            page.page_number = 2
        with pytest.raises(AttributeError):
            page.total_count = 0

    def test_items_is_snapshot(self, twenty_five_items):
        page = PagedList(twenty_five_items, 1, 10)
        twenty_five_items.clear()

        assert page.total_count == 25
        assert len(page.items) == 10

    def test_satisfies_protocol(self, page):
        assert isinstance(page, PagedListProtocol)

    def test_page_info(self, page):
        info = page.page_info()

        assert info["page_number"] == 3
        assert info["page_count"] == 3
        assert info["is_last_page"] is True
        assert info["next_page_number"] is None
        assert info["previous_page_number"] == 2
        assert info["items_on_page"] == 5

    def test_to_dict(self, page):
        data = page.to_dict()

        assert data["items"] == [21, 22, 23, 24, 25]
        assert data["total_count"] == 25

    def test_repr(self, page):
        assert repr(page) == "PagedList(page_number=3, page_size=10, total_count=25, page_count=3, items=5)"
