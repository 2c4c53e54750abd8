import pytest

from data_browser.app.ui.pagination import (
    ELLIPSIS,
    build_pager,
    can_go_next,
    can_go_prev,
    compute_page_window,
    next_page,
    prev_page,
    total_pages,
)


def test_total_pages_rounds_up_and_never_drops_below_one() -> None:
    assert total_pages(47, 5) == 10
    assert total_pages(50, 5) == 10
    assert total_pages(51, 5) == 11
    assert total_pages(0, 5) == 1
    assert total_pages(3, 50) == 1


def test_total_pages_rejects_zero_page_size() -> None:
    with pytest.raises(ValueError):
        total_pages(10, 0)


@pytest.mark.parametrize("pages", range(1, 8))
def test_small_page_counts_are_listed_in_full(pages: int) -> None:
    for current in range(1, pages + 1):
        window = compute_page_window(current, pages)
        assert window == list(range(1, pages + 1))
        assert ELLIPSIS not in window


def test_zero_pages_is_a_single_page() -> None:
    assert compute_page_window(1, 0) == [1]
    assert compute_page_window(3, 0) == [1]


@pytest.mark.parametrize("pages", [8, 10, 25])
def test_large_windows_always_bracket_first_and_last(pages: int) -> None:
    for current in range(1, pages + 1):
        window = compute_page_window(current, pages)
        assert window[0] == 1
        assert window[-1] == pages
        assert current in window


def test_first_page_of_ten() -> None:
    # total=47, page_size=5
    assert compute_page_window(1, total_pages(47, 5)) == [1, 2, 3, ELLIPSIS, 10]


def test_middle_page_gets_both_ellipses() -> None:
    assert compute_page_window(5, 10) == [1, ELLIPSIS, 3, 4, 5, 6, 7, ELLIPSIS, 10]


def test_leading_ellipsis_starts_after_page_four() -> None:
    assert compute_page_window(4, 10) == [1, 2, 3, 4, 5, 6, ELLIPSIS, 10]


def test_trailing_ellipsis_threshold() -> None:
    assert compute_page_window(7, 10) == [1, ELLIPSIS, 5, 6, 7, 8, 9, 10]
    assert compute_page_window(6, 10) == [1, ELLIPSIS, 4, 5, 6, 7, 8, ELLIPSIS, 10]
    assert compute_page_window(10, 10) == [1, ELLIPSIS, 8, 9, 10]


def test_out_of_range_current_page_is_clamped() -> None:
    assert compute_page_window(0, 10) == compute_page_window(1, 10)
    assert compute_page_window(99, 10) == compute_page_window(10, 10)


def test_prev_next_are_noops_at_the_boundaries() -> None:
    assert can_go_prev(1, 10) is False
    assert prev_page(1, 10) == 1
    assert can_go_next(10, 10) is False
    assert next_page(10, 10) == 10

    assert prev_page(5, 10) == 4
    assert next_page(5, 10) == 6


def test_single_page_disables_both_directions() -> None:
    pager = build_pager(1, 1)

    assert pager.window == (1,)
    assert pager.can_go_prev is False
    assert pager.can_go_next is False


def test_build_pager_clamps_and_reports_navigation() -> None:
    pager = build_pager(12, 10)

    assert pager.current_page == 10
    assert pager.total_pages == 10
    assert pager.window[-1] == 10
    assert pager.can_go_prev is True
    assert pager.can_go_next is False
