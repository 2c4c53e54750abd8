from dataclasses import replace

import pytest

from data_browser.app.state import (
    FetchParams,
    ViewState,
    ViewStateStore,
    abandon_fetch,
    begin_fetch,
    clear_filters,
    commit_fetch,
    fail_fetch,
    set_category,
    set_current_page,
    set_filter,
    set_page_size,
)


def _loaded(**overrides) -> ViewState:
    base = ViewState(page_size=5, current_page=3, total=47, items=({"id": 11},), category="")
    return replace(base, **overrides)


@pytest.mark.parametrize("current_page", [1, 2, 3, 10])
def test_page_size_change_resets_to_first_page(current_page: int) -> None:
    transition = set_page_size(_loaded(current_page=current_page), 10)

    assert transition.state.page_size == 10
    assert transition.state.current_page == 1
    assert transition.fetch_requested is True


@pytest.mark.parametrize("current_page", [1, 4, 9])
def test_category_change_resets_to_first_page(current_page: int) -> None:
    transition = set_category(_loaded(current_page=current_page), "laptops")

    assert transition.state.category == "laptops"
    assert transition.state.current_page == 1
    assert transition.fetch_requested is True


def test_page_change_keeps_other_fields() -> None:
    state = _loaded(filters={"title": "x"})

    transition = set_current_page(state, 5)

    assert transition.state.current_page == 5
    assert transition.state.page_size == 5
    assert dict(transition.state.filters) == {"title": "x"}
    assert transition.fetch_requested is True


def test_page_change_is_clamped_to_known_pages() -> None:
    state = _loaded()

    assert set_current_page(state, 0).state.current_page == 1
    assert set_current_page(state, 99).state.current_page == 10


def test_same_page_does_not_fetch_unless_forced() -> None:
    state = _loaded()

    assert set_current_page(state, 3).fetch_requested is False
    assert set_current_page(state, 3, force=True).fetch_requested is True


def test_same_page_fetches_again_after_a_failure() -> None:
    transition = set_current_page(_loaded(error="[NETWORK_ERROR] offline"), 3)

    assert transition.fetch_requested is True
    assert transition.state.current_page == 3


def test_page_change_while_loading_is_not_clamped_to_stale_total() -> None:
    # switched to a bigger category; total still holds the previous one-page result
    state = _loaded(current_page=1, total=5, loading=True)

    transition = set_current_page(state, 3)

    assert transition.state.current_page == 3
    assert transition.fetch_requested is True
    assert set_current_page(state, 0).state.current_page == 1


def test_abandoned_fetch_clears_loading_and_keeps_data() -> None:
    state = abandon_fetch(begin_fetch(_loaded()))

    assert state.loading is False
    assert state.error is None
    assert state.items == ({"id": 11},)
    assert state.total == 47


def test_filter_changes_never_fetch_or_touch_paging() -> None:
    state = _loaded()

    transition = set_filter(state, "title", "lap")

    assert transition.fetch_requested is False
    assert dict(transition.state.filters) == {"title": "lap"}
    assert (transition.state.page_size, transition.state.current_page, transition.state.category) == (5, 3, "")


def test_empty_filter_value_removes_the_key() -> None:
    state = set_filter(_loaded(), "title", "lap").state

    assert "title" not in set_filter(state, "title", "").state.filters
    assert "title" not in set_filter(state, "title", None).state.filters
    assert dict(clear_filters(state).state.filters) == {}


def test_whitespace_filter_value_is_kept() -> None:
    state = set_filter(_loaded(), "title", " ").state

    assert dict(state.filters) == {"title": " "}


def test_total_pages_is_derived_from_total_and_page_size() -> None:
    state = _loaded()

    assert state.total_pages == 10
    assert set_page_size(state, 20).state.total_pages == 3
    assert ViewState().total_pages == 1


def test_fetch_params_use_skip_offset() -> None:
    assert _loaded().fetch_params() == FetchParams(page_size=5, skip=10, category="")
    assert FetchParams.for_page(10, 1) == FetchParams(page_size=10, skip=0)


def test_fetch_lifecycle_keeps_last_good_data_on_failure() -> None:
    state = begin_fetch(_loaded(error="old"))
    assert state.loading is True
    assert state.error is None

    failed = fail_fetch(state, "boom")
    assert failed.loading is False
    assert failed.error == "boom"
    assert failed.items == ({"id": 11},)
    assert failed.total == 47


def test_commit_replaces_items_and_total_together() -> None:
    state = commit_fetch(begin_fetch(_loaded()), [{"id": 1}, {"id": 2}], 12)

    assert state.items == ({"id": 1}, {"id": 2})
    assert state.total == 12
    assert state.loading is False
    assert state.error is None


def test_commit_clamps_current_page_when_total_shrinks() -> None:
    state = commit_fetch(_loaded(current_page=9), [], 12)

    assert state.current_page == 3


def test_store_rejects_unknown_page_sizes_and_filters() -> None:
    store = ViewStateStore(filterable_keys={"title"})

    with pytest.raises(ValueError):
        store.set_page_size(7)
    with pytest.raises(ValueError):
        store.set_filter("price", "10")


def test_store_defaults() -> None:
    store = ViewStateStore()

    assert store.state.page_size == 5
    assert store.state.current_page == 1
    assert store.state.loading is False
    assert store.state.error is None
    assert store.state.items == ()


def test_store_setters_report_fetch_intent() -> None:
    store = ViewStateStore(initial=_loaded(), filterable_keys={"title"})

    assert store.set_filter("title", "x") is False
    assert store.set_page_size(10) is True
    assert store.state.current_page == 1
    assert store.set_category("laptops") is True
    assert store.set_current_page(1) is False
