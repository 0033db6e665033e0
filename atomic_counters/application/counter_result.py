"""CounterResult — the per-call result object handed back to callers.

Wraps one asyncio future. Observers of all three kinds share a single list
that is drained once the future settles, in registration order. An observer
registered after settlement is delivered immediately, synchronously.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Generator

logger = logging.getLogger(__name__)

_SUCCESS = "success"
_FAILURE = "failure"
_SETTLED = "settled"


class CounterResult:
    def __init__(self, future: asyncio.Future):
        self._future = future
        self._observers: list[tuple[str, Callable[[Any], Any]]] = []
        future.add_done_callback(self._on_done)

    def on_success(self, callback: Callable[[int], Any]) -> CounterResult:
        """Call ``callback(value)`` once the counter operation succeeds."""
        return self._register(_SUCCESS, callback)

    def on_failure(self, callback: Callable[[BaseException], Any]) -> CounterResult:
        """Call ``callback(error)`` once the counter operation fails."""
        return self._register(_FAILURE, callback)

    def on_settled(self, callback: Callable[[Any], Any]) -> CounterResult:
        """Call ``callback(value_or_error)`` once the operation settles either way."""
        return self._register(_SETTLED, callback)

    def done(self) -> bool:
        return self._future.done()

    def __await__(self) -> Generator[Any, None, int]:
        return self._future.__await__()

    # ─── Internals ──────────────────────────────────────────────────

    def _register(self, kind: str, callback: Callable[[Any], Any]) -> CounterResult:
        self._observers.append((kind, callback))
        if self._future.done():
            self._flush()
        return self

    def _on_done(self, future: asyncio.Future) -> None:
        self._flush()

    def _outcome(self) -> tuple[bool, Any]:
        if self._future.cancelled():
            return False, asyncio.CancelledError()
        error = self._future.exception()
        if error is not None:
            return False, error
        return True, self._future.result()

    def _flush(self) -> None:
        # Reading the outcome also marks a failure as retrieved.
        succeeded, payload = self._outcome()
        while self._observers:
            kind, callback = self._observers.pop(0)
            if kind == _SETTLED or kind == (_SUCCESS if succeeded else _FAILURE):
                try:
                    callback(payload)
                except Exception:
                    logger.exception("Counter result observer %r raised", callback)
