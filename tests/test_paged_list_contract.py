"""Paging properties shared by PagedList and AsyncPagedList."""

import math

import pytest

from neo_paging import AsyncPagedList, PagedList


async def build_sync(source, page_number, page_size):
    return PagedList(source, page_number, page_size)


async def build_async(source, page_number, page_size):
    async def items():
        for item in source:
            yield item
    return await AsyncPagedList.create(items, page_number, page_size)


@pytest.mark.asyncio
@pytest.mark.parametrize("build", [build_sync, build_async], ids=["sync", "async"])
@pytest.mark.parametrize("total_count", [0, 1, 2, 9, 10, 11, 25, 30])
@pytest.mark.parametrize("page_size", [1, 3, 10, 50])
async def test_page_properties(build, total_count, page_size):
    """Derived values agree with the paging formulas on every page."""
    source = list(range(total_count))
    page_count = math.ceil(total_count / page_size)

    for page_number in range(1, page_count + 3):
        page = await build(source, page_number, page_size)

        assert page.total_count == total_count
        assert page.page_count == page_count
        assert 0 <= len(page.items) <= page_size
        if page_number < page_count:
            assert len(page.items) == page_size
        assert page.first_item_on_page == (page_number - 1) * page_size + 1
        assert page.last_item_on_page == page.first_item_on_page + len(page.items) - 1
        assert page.is_first_page == (page_number == 1)
        assert page.has_previous_page == (page_number > 1)
        assert page.has_next_page == (page_number < page_count)
        if page_count >= 1:
            assert page.is_last_page == (page_number == page_count)
            if page_number <= page_count:
                assert page.has_next_page == (not page.is_last_page)
            assert page.has_previous_page == (not page.is_first_page)
        assert (page.is_first_page and page.is_last_page) == (page_number == 1 and page_count <= 1)
        assert list(page.items) == source[(page_number - 1) * page_size:page_number * page_size]
        for index, item in enumerate(page.items):
            assert page.at(index) == item
