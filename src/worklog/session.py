"""Analysis session - one date-range analysis as a small state machine."""

import asyncio
import logging
from enum import Enum
from typing import Callable

from .clients import AnalysisClient
from .core.entries import AnalysisResult, default_range, filter_by_range, sort_by_date
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


class AnalysisState(Enum):
    """Where the current analysis invocation stands."""

    IDLE = "idle"  # Nothing requested yet
    LOADING = "loading"  # Request in flight, result cleared
    SUCCEEDED = "succeeded"  # Holding a result
    EMPTY = "empty"  # No entries in range, or the remote call failed


class AnalysisSession:
    """
    Orchestrates analysis requests over the entry store.

    Overlapping requests are not cancelled. By default whichever completes
    last owns the result slot. With guard_stale=True each request carries a
    sequence number and completions from superseded requests are dropped.
    """

    def __init__(self, store: EntryStore, client: AnalysisClient, *, guard_stale: bool = False):
        self.store = store
        self.client = client
        self.guard_stale = guard_stale
        self.state = AnalysisState.IDLE
        self.result: AnalysisResult | None = None
        self.start_date, self.end_date = default_range(store.list_all())
        self._latest_request = 0
        self._subscribers: list[Callable[["AnalysisSession"], None]] = []

    @property
    def is_loading(self) -> bool:
        return self.state is AnalysisState.LOADING

    def subscribe(self, callback: Callable[["AnalysisSession"], None]) -> None:
        """Call callback with the session on every state change."""
        self._subscribers.append(callback)

    def _notify(self) -> None:
        for callback in self._subscribers:
            callback(self)

    def _begin(self, start_date: str, end_date: str) -> int:
        self._latest_request += 1
        self.start_date = start_date
        self.end_date = end_date
        self.result = None
        self.state = AnalysisState.LOADING
        self._notify()
        return self._latest_request

    def _complete(self, request_id: int, result: AnalysisResult | None) -> None:
        if self.guard_stale and request_id < self._latest_request:
            logger.debug(f"Dropping stale analysis #{request_id} (latest is #{self._latest_request})")
            return
        self.result = result
        self.state = AnalysisState.SUCCEEDED if result is not None else AnalysisState.EMPTY
        self._notify()

    async def request(self, start_date: str | None = None, end_date: str | None = None) -> AnalysisResult | None:
        """
        Analyze entries in [start_date, end_date], inclusive.

        The previous result is cleared before the first suspension point, so
        it is never visible alongside the new loading state. Returns what
        this request produced, which may differ from self.result if another
        request completed later.
        """
        start_date = start_date or self.start_date
        end_date = end_date or self.end_date
        request_id = self._begin(start_date, end_date)

        entries = sort_by_date(filter_by_range(self.store.list_all(), start_date, end_date))
        if not entries:
            logger.info(f"No entries between {start_date} and {end_date}")
            self._complete(request_id, None)
            return None

        try:
            result = await asyncio.to_thread(self.client.analyze, entries, start_date, end_date)
        except Exception:
            logger.exception(f"Analysis #{request_id} failed")
            result = None
        self._complete(request_id, result)
        return result
