from __future__ import annotations

import logging
from typing import Any

from data_browser.app.config import AppConfig
from data_browser.app.datasets import DatasetConfig
from data_browser.app.fetch_coordinator import FetchCoordinator, PageSource
from data_browser.app.state import ViewState, ViewStateStore
from data_browser.app.ui.filters import apply_filters
from data_browser.app.ui.pagination import PagerModel, build_pager


class BrowserSession:
    """One browsing page: a dataset, its store and the coordinator feeding it.

    Control callbacks (``set_*``) update the store and await the fetch when
    the change touches a remote parameter. Derived views (``visible_rows``,
    ``pager``) are recomputed from the store on every read.
    """

    def __init__(
        self,
        dataset: DatasetConfig,
        source: PageSource,
        config: AppConfig | None = None,
        initial: ViewState | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.dataset = dataset
        self.config = config or AppConfig()
        self.store = ViewStateStore(
            initial=initial
            or ViewState(
                page_size=self.config.default_page_size,
                category=dataset.category_for(dataset.default_category),
            ),
            page_size_options=self.config.page_size_options,
            filterable_keys=dataset.filterable_keys,
        )
        self.coordinator = FetchCoordinator(self.store, source, module=dataset.name, logger=logger)

    @property
    def state(self) -> ViewState:
        return self.store.state

    @property
    def active_tab(self) -> str | None:
        for tab, category in self.dataset.categories.items():
            if category == self.state.category:
                return tab
        return None

    @property
    def visible_rows(self) -> list[dict[str, Any]]:
        return apply_filters(
            self.state.items,
            self.state.filters,
            columns=self.dataset.columns,
            matchers=self.dataset.matchers,
        )

    @property
    def pager(self) -> PagerModel:
        return build_pager(self.state.current_page, self.state.total_pages)

    @property
    def is_empty_result(self) -> bool:
        return not self.state.loading and not self.visible_rows

    @property
    def empty_message(self) -> str | None:
        if not self.is_empty_result:
            return None
        if self.state.items and self.state.filters:
            return "No rows on this page match the active filters"
        return "No data found"

    async def load(self) -> bool:
        return await self._fetch_current()

    async def retry(self) -> bool:
        return await self._fetch_current()

    async def set_page_size(self, page_size: int) -> bool:
        if self.store.set_page_size(page_size):
            return await self._fetch_current()
        return False

    async def set_current_page(self, page: int, force: bool = False) -> bool:
        if self.store.set_current_page(page, force=force):
            return await self._fetch_current()
        return False

    async def next_page(self) -> bool:
        if not self.pager.can_go_next:
            return False
        return await self.set_current_page(self.state.current_page + 1)

    async def prev_page(self) -> bool:
        if not self.pager.can_go_prev:
            return False
        return await self.set_current_page(self.state.current_page - 1)

    async def set_active_tab(self, tab: str) -> bool:
        if self.store.set_category(self.dataset.category_for(tab)):
            return await self._fetch_current()
        return False

    def set_filter(self, key: str, value: str | None) -> None:
        self.store.set_filter(key, value)

    def clear_filters(self) -> None:
        self.store.clear_filters()

    async def _fetch_current(self) -> bool:
        params = self.state.fetch_params()
        committed = await self.coordinator.fetch(params)
        if committed and self.state.fetch_params() != params:
            # commit clamped the page after the total shrank; load the page it landed on
            return await self.coordinator.fetch(self.state.fetch_params())
        return committed
