from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Optional

from itemgroups.items.messages import LOAD_FAILED, UNKNOWN_ERROR
from itemgroups.items.models import GroupedResult
from itemgroups.items.pipeline import fetch_grouped_items

log = logging.getLogger("itemgroups.session")


@dataclass(frozen=True)
class LoadState:
    """The three pieces of state a list screen renders from."""

    loading: bool = True
    result: GroupedResult = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class ItemListSession:
    """Runs the items pipeline once, off the caller's thread.

    Design goals:
    - One load per session: start() launches a single background task; later
      calls hand back the same future.
    - One transition: state goes from loading to success or failure exactly
      once, and on_change (if given) is called with the new state.
    - Safe teardown: after close() a late result is dropped, not published.

    on_change runs on the worker thread. A UI toolkit caller should marshal it
    onto its own event loop.
    """

    def __init__(
        self,
        fetch: Callable[[], GroupedResult] = fetch_grouped_items,
        on_change: Optional[Callable[[LoadState], None]] = None,
    ) -> None:
        self._fetch = fetch
        self._on_change = on_change
        self._state = LoadState()
        self._lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None
        self._future: Optional["Future[LoadState]"] = None
        self._closed = False

    @property
    def state(self) -> LoadState:
        with self._lock:
            return self._state

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def start(self) -> "Future[LoadState]":
        with self._lock:
            if self._closed:
                raise RuntimeError("Session is closed; create a new one to load again.")
            if self._future is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="items")
                self._future = self._executor.submit(self._run)
            return self._future

    def _run(self) -> LoadState:
        try:
            result = self._fetch()
        except Exception as exc:
            log.error("Loading items failed: %s", exc)
            new_state = LoadState(loading=False, error=LOAD_FAILED.format(detail=str(exc) or UNKNOWN_ERROR))
        else:
            log.info("Loaded %d lists", len(result))
            new_state = LoadState(loading=False, result=result)
        self._publish(new_state)
        return new_state

    def _publish(self, new_state: LoadState) -> None:
        with self._lock:
            if self._closed:
                log.debug("Session closed before load finished; result discarded")
                return
            self._state = new_state
            listener = self._on_change
        if listener is not None:
            listener(new_state)

    def close(self) -> None:
        """Stop accepting results. Does not wait for an in-flight request."""
        with self._lock:
            self._closed = True
            executor = self._executor
        if executor is not None:
            executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "ItemListSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["LoadState", "ItemListSession"]
