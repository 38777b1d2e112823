"""Unit tests for the pagination marker builder."""

import pytest

from app.core.pagination import ELLIPSIS, page_markers, total_pages


class TestPageMarkers:
    """Test page_markers function."""

    def test_small_total_not_compressed(self) -> None:
        """Up to 7 pages every number is listed."""
        assert page_markers(1, 5) == [1, 2, 3, 4, 5]
        assert page_markers(4, 7) == [1, 2, 3, 4, 5, 6, 7]

    def test_near_start(self) -> None:
        """Current page in the first three pages."""
        assert page_markers(1, 10) == [1, 2, 3, 4, ELLIPSIS, 10]
        assert page_markers(3, 10) == [1, 2, 3, 4, ELLIPSIS, 10]

    def test_near_end(self) -> None:
        """Current page in the last three pages."""
        assert page_markers(10, 10) == [1, ELLIPSIS, 7, 8, 9, 10]
        assert page_markers(8, 10) == [1, ELLIPSIS, 7, 8, 9, 10]

    def test_middle(self) -> None:
        """Window around the current page with two ellipses."""
        assert page_markers(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]

    def test_boundary_eight_pages(self) -> None:
        """Eight pages is the first compressed total."""
        assert page_markers(1, 8) == [1, 2, 3, 4, ELLIPSIS, 8]
        assert page_markers(4, 8) == [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 8]
        assert page_markers(6, 8) == [1, ELLIPSIS, 5, 6, 7, 8]

    def test_zero_or_negative_total(self) -> None:
        """No pages, no markers."""
        assert page_markers(1, 0) == []
        assert page_markers(1, -3) == []

    def test_ellipsis_is_not_a_page_number(self) -> None:
        """The sentinel can never be confused with an int page."""
        assert not isinstance(ELLIPSIS, int)

    @pytest.mark.parametrize("total", [1, 2, 7, 8, 9, 15, 100])
    def test_invariants(self, total: int) -> None:
        """Starts at 1, ends at total, numbers strictly increase without repeats."""
        for current in range(1, total + 1):
            markers = page_markers(current, total)
            numbers = [m for m in markers if m != ELLIPSIS]
            assert markers[0] == 1
            assert markers[-1] == total
            assert numbers == sorted(set(numbers))
            assert current in numbers


class TestTotalPages:
    """Test total_pages function."""

    def test_rounds_up(self) -> None:
        assert total_pages(0, 9) == 0
        assert total_pages(9, 9) == 1
        assert total_pages(10, 9) == 2
