from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from data_browser.app.config import DEFAULT_PAGE_SIZE_OPTIONS
from data_browser.app.ui.pagination import clamp_page, total_pages as compute_total_pages

Record = dict[str, Any]


@dataclass(frozen=True)
class FetchParams:
    page_size: int
    skip: int
    category: str = ""

    @classmethod
    def for_page(cls, page_size: int, page: int, category: str = "") -> "FetchParams":
        return cls(page_size=page_size, skip=(max(1, page) - 1) * page_size, category=category)


@dataclass(frozen=True)
class ViewState:
    page_size: int = 5
    current_page: int = 1
    category: str = ""
    filters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    items: tuple[Record, ...] = ()
    total: int = 0
    loading: bool = False
    error: str | None = None

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total, self.page_size)

    def fetch_params(self) -> FetchParams:
        return FetchParams.for_page(self.page_size, self.current_page, self.category)


@dataclass(frozen=True)
class Transition:
    state: ViewState
    fetch_requested: bool = False


def _frozen_filters(filters: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(filters))


def set_page_size(state: ViewState, page_size: int) -> Transition:
    return Transition(replace(state, page_size=page_size, current_page=1), fetch_requested=True)


def set_current_page(state: ViewState, page: int, force: bool = False) -> Transition:
    # while loading, total may still belong to the previous category or page size
    target = max(1, page) if state.loading else clamp_page(page, state.total_pages)
    changed = target != state.current_page
    # re-selecting the page after a failed fetch is the retry
    retry = state.error is not None
    return Transition(replace(state, current_page=target), fetch_requested=changed or force or retry)


def set_category(state: ViewState, category: str) -> Transition:
    return Transition(replace(state, category=category, current_page=1), fetch_requested=True)


def set_filter(state: ViewState, key: str, value: str | None) -> Transition:
    filters = dict(state.filters)
    if value is None or str(value) == "":
        filters.pop(key, None)
    else:
        filters[key] = str(value)
    return Transition(replace(state, filters=_frozen_filters(filters)))


def clear_filters(state: ViewState) -> Transition:
    return Transition(replace(state, filters=_frozen_filters({})))


def begin_fetch(state: ViewState) -> ViewState:
    return replace(state, loading=True, error=None)


def commit_fetch(state: ViewState, items: list[Record], total: int) -> ViewState:
    committed = replace(state, items=tuple(items), total=max(0, total), loading=False, error=None)
    # a shrinking total can leave the current page past the end
    return replace(committed, current_page=clamp_page(committed.current_page, committed.total_pages))


def fail_fetch(state: ViewState, message: str) -> ViewState:
    return replace(state, loading=False, error=message)


def abandon_fetch(state: ViewState) -> ViewState:
    return replace(state, loading=False)


class ViewStateStore:
    """Single writer of a browser session's :class:`ViewState`.

    Setters validate their input, apply the matching transition and return
    whether the caller should issue a fetch. Readers get the immutable
    current state through :attr:`state`.
    """

    def __init__(
        self,
        initial: ViewState | None = None,
        page_size_options: tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS,
        filterable_keys: set[str] | None = None,
    ) -> None:
        self.page_size_options = tuple(page_size_options)
        self.filterable_keys = set(filterable_keys) if filterable_keys is not None else None
        self._state = initial or ViewState(page_size=self.page_size_options[0])
        if self._state.page_size not in self.page_size_options:
            raise ValueError(f"page_size {self._state.page_size} is not one of {list(self.page_size_options)}")

    @property
    def state(self) -> ViewState:
        return self._state

    def set_page_size(self, page_size: int) -> bool:
        if page_size not in self.page_size_options:
            raise ValueError(f"page_size {page_size} is not one of {list(self.page_size_options)}")
        return self._apply(set_page_size(self._state, page_size))

    def set_current_page(self, page: int, force: bool = False) -> bool:
        return self._apply(set_current_page(self._state, page, force=force))

    def set_category(self, category: str) -> bool:
        return self._apply(set_category(self._state, category))

    def set_filter(self, key: str, value: str | None) -> bool:
        if self.filterable_keys is not None and key not in self.filterable_keys:
            raise ValueError(f"column {key!r} is not filterable")
        return self._apply(set_filter(self._state, key, value))

    def clear_filters(self) -> bool:
        return self._apply(clear_filters(self._state))

    def begin_fetch(self) -> None:
        self._state = begin_fetch(self._state)

    def commit_fetch(self, items: list[Record], total: int) -> None:
        self._state = commit_fetch(self._state, items, total)

    def fail_fetch(self, message: str) -> None:
        self._state = fail_fetch(self._state, message)

    def abandon_fetch(self) -> None:
        self._state = abandon_fetch(self._state)

    def _apply(self, transition: Transition) -> bool:
        self._state = transition.state
        return transition.fetch_requested
