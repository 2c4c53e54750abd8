from __future__ import annotations

import asyncio
import itertools
import logging
import time
from typing import Protocol

from data_browser.app.infrastructure.errors.error_mapper import ErrorMapper
from data_browser.app.infrastructure.logging.logger import get_logger, log_action
from data_browser.app.state import FetchParams, ViewStateStore
from data_browser.clients.browser_sdk.errors import ApiError
from data_browser.clients.browser_sdk.normalizers import CollectionPage


class PageSource(Protocol):
    async def list_page(self, limit: int, skip: int, category: str = "") -> CollectionPage: ...


class FetchCoordinator:
    """Runs page fetches for one store and commits only the latest one issued.

    Every call to :meth:`fetch` takes the next sequence number before it
    suspends on the network. When the response (or failure) comes back it is
    committed only if no newer request has been issued since; otherwise it is
    dropped, whatever order the responses arrive in.
    """

    def __init__(
        self,
        store: ViewStateStore,
        source: PageSource,
        module: str = "collection",
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.source = source
        self.module = module
        self.logger = logger or get_logger("data_browser.fetch")
        self._sequence = itertools.count(1)
        self._latest_issued = 0
        self.last_committed: int | None = None

    @property
    def latest_issued(self) -> int:
        return self._latest_issued

    def is_current(self, seq: int) -> bool:
        return seq == self._latest_issued

    async def fetch(self, params: FetchParams) -> bool:
        seq = next(self._sequence)
        self._latest_issued = seq
        self.store.begin_fetch()
        self._log("issued", seq, params)
        started = time.monotonic()

        try:
            page = await self.source.list_page(limit=params.page_size, skip=params.skip, category=params.category)
        except asyncio.CancelledError:
            if self.is_current(seq):
                self.store.abandon_fetch()
            self._log("cancelled", seq, params, started=started)
            raise
        except ApiError as error:
            return self._settle_failure(seq, params, error, started)
        except Exception as error:  # noqa: BLE001
            # still has to clear the loading flag
            self._settle_failure(seq, params, error, started)
            raise

        if not self.is_current(seq):
            self._log("discarded_stale", seq, params, started=started)
            return False
        self.store.commit_fetch(page.items, page.total)
        self.last_committed = seq
        self._log("committed", seq, params, started=started, total=page.total, count=len(page.items))
        return True

    def _settle_failure(self, seq: int, params: FetchParams, error: Exception, started: float) -> bool:
        if not self.is_current(seq):
            self._log("discarded_stale", seq, params, started=started, error=str(error))
            return False
        message = ErrorMapper.to_display_message(error)
        self.store.fail_fetch(message)
        self._log(
            "failed",
            seq,
            params,
            started=started,
            level=logging.WARNING,
            error=str(error),
            details=getattr(error, "details", None),
        )
        return False

    def _log(
        self,
        outcome: str,
        seq: int,
        params: FetchParams,
        started: float | None = None,
        level: int = logging.INFO,
        **fields: object,
    ) -> None:
        if started is not None:
            fields["duration_ms"] = int((time.monotonic() - started) * 1000)
        log_action(
            self.logger,
            module=self.module,
            action="fetch_page",
            outcome=outcome,
            level=level,
            seq=seq,
            limit=params.page_size,
            skip=params.skip,
            category=params.category or None,
            **fields,
        )
