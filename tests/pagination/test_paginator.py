"""Tests for the pagination window."""

import math

import pytest

from graphql_explorer.pagination.paginator import (paginate, paginate_at_path,
                                                   resolve_path)


class TestPaginate:
    """Test slicing and metadata."""

    def test_last_partial_page(self):
        """Test page 3 of 25 items with page size 10."""
        items = list(range(1, 26))

        window = paginate(items, page=3, page_size=10)

        assert window.items == [21, 22, 23, 24, 25]
        assert window.total == 25
        assert window.total_pages == 3
        assert window.has_next is False
        assert window.has_previous is True

    def test_first_page(self):
        """Test first page has next but no previous."""
        window = paginate(list(range(25)), page=1, page_size=10)

        assert window.items == list(range(10))
        assert window.has_next is True
        assert window.has_previous is False

    def test_page_beyond_last_is_empty(self):
        """Test a page past the end yields no items rather than failing."""
        window = paginate([1, 2, 3], page=5, page_size=2)

        assert window.items == []
        assert window.page == 5
        assert window.total_pages == 2
        assert window.has_next is False
        assert window.has_previous is True

    def test_empty_collection(self):
        """Test metadata for an empty collection."""
        window = paginate([], page=1, page_size=10)

        assert window.items == []
        assert window.total == 0
        assert window.total_pages == 0
        assert window.has_next is False
        assert window.has_previous is False

    def test_invalid_page_size(self):
        """Test page_size below 1 is rejected."""
        with pytest.raises(ValueError):
            paginate([1, 2], page=1, page_size=0)

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 37])
    @pytest.mark.parametrize("page_size", [1, 3, 10])
    @pytest.mark.parametrize("page", [1, 2, 4, 12])
    def test_window_length_and_totals(self, total, page_size, page):
        """Test length and page-count invariants across sizes."""
        window = paginate(list(range(total)), page=page, page_size=page_size)

        expected_len = max(0, min(total - (page - 1) * page_size, page_size))
        assert len(window.items) == expected_len
        assert window.total_pages == math.ceil(total / page_size)
        assert window.has_next == (page < window.total_pages)
        assert window.has_previous == (page > 1)

    def test_to_dict_uses_total_key(self):
        """Test the metadata block naming."""
        window = paginate(["a", "b", "c"], page=1, page_size=2)

        assert window.to_dict(total_key="totalTypes") == {
            "page": 1,
            "pageSize": 2,
            "totalTypes": 3,
            "totalPages": 2,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }


class TestResolvePath:
    """Test dotted path resolution."""

    def test_nested_dicts(self):
        """Test walking nested objects."""
        value = {"data": {"viewer": {"zones": [1, 2]}}}

        assert resolve_path(value, "data.viewer.zones") == [1, 2]

    def test_missing_segment(self):
        """Test a missing key resolves to None."""
        value = {"data": {"viewer": {}}}

        assert resolve_path(value, "data.viewer.zones") is None

    def test_segment_through_scalar(self):
        """Test walking into a scalar resolves to None."""
        assert resolve_path({"data": 5}, "data.viewer") is None

    def test_list_index(self):
        """Test numeric segments index into lists."""
        value = {"data": {"viewer": {"zones": [{"groups": [1, 2, 3]}]}}}

        assert resolve_path(value, "data.viewer.zones.0.groups") == [1, 2, 3]
        assert resolve_path(value, "data.viewer.zones.3.groups") is None


class TestPaginateAtPath:
    """Test paginating an array inside a JSON result."""

    def test_slices_array_and_keeps_siblings(self):
        """Test the array is windowed while the rest of the result is kept."""
        result = {"data": {"viewer": {"zones": list(range(7)), "budget": 3}}}

        sliced, window = paginate_at_path(result, "data.viewer.zones", page=2, page_size=3)

        assert sliced["data"]["viewer"]["zones"] == [3, 4, 5]
        assert sliced["data"]["viewer"]["budget"] == 3
        assert window.total == 7
        assert window.total_pages == 3
        # Original untouched
        assert result["data"]["viewer"]["zones"] == list(range(7))

    def test_defaults_to_whole_array(self):
        """Test omitted page size returns everything as one page."""
        result = {"data": {"items": ["a", "b"]}}

        sliced, window = paginate_at_path(result, "data.items")

        assert sliced["data"]["items"] == ["a", "b"]
        assert window.page == 1
        assert window.page_size == 2
        assert window.total_pages == 1

    def test_missing_path_returns_result_unchanged(self):
        """Test a missing key yields the original result and no metadata."""
        result = {"data": {"viewer": {"accounts": []}}}

        sliced, window = paginate_at_path(result, "data.viewer.zones", page=1, page_size=10)

        assert sliced is result
        assert window is None

    def test_non_array_target(self):
        """Test a path to an object yields no metadata."""
        result = {"data": {"viewer": {"zones": {"count": 3}}}}

        sliced, window = paginate_at_path(result, "data.viewer.zones", page=1, page_size=10)

        assert sliced == result
        assert window is None

    def test_array_inside_list(self):
        """Test paginating an array reached through a list index."""
        result = {"data": {"zones": [{"groups": list(range(5))}]}}

        sliced, window = paginate_at_path(result, "data.zones.0.groups", page=1, page_size=2)

        assert sliced["data"]["zones"][0]["groups"] == [0, 1]
        assert window.total == 5
