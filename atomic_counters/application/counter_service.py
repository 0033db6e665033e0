"""AtomicCounters — the counter operations facade.

Resolves per-call options against the configured defaults, picks the store
handle through the CounterClientManager and runs the use case as an asyncio
task wrapped in a CounterResult.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine

from atomic_counters.application.client_manager import CounterClientManager
from atomic_counters.application.counter_result import CounterResult
from atomic_counters.application.options import CounterOptions, attach_callbacks
from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.application.use_cases.get_last_value import GetLastValueUseCase
from atomic_counters.application.use_cases.increment_counter import IncrementCounterUseCase
from atomic_counters.domain.errors import StoreError
from atomic_counters.domain.value_objects.counter_defaults import CounterDefaults
from atomic_counters.domain.value_objects.counter_request import (
    AtomicAddRequest,
    GetCountRequest,
)

logger = logging.getLogger(__name__)


class AtomicCounters:
    def __init__(
        self,
        store_factory: Callable[[], CounterStorePort],
        defaults: CounterDefaults | None = None,
        client: CounterStorePort | None = None,
    ):
        self._clients = CounterClientManager(store_factory, client)
        self._defaults = defaults or CounterDefaults()

    @property
    def defaults(self) -> CounterDefaults:
        return self._defaults

    def increment(self, counter_id: str, options: CounterOptions | None = None) -> CounterResult:
        """Increment ``counter_id`` and return a CounterResult for the new value.

        Must be called with a running event loop. Invalid arguments raise
        ValueError here, before anything is sent to the store.
        """
        options = options or CounterOptions()
        loop = asyncio.get_running_loop()
        request = AtomicAddRequest(
            table_name=options.table_name or self._defaults.table_name,
            key_attribute=options.key_attribute or self._defaults.key_attribute,
            counter_id=counter_id,
            count_attribute=options.count_attribute or self._defaults.count_attribute,
            amount=self._defaults.increment if options.increment is None else options.increment,
            overrides=options.request_overrides or {},
        )
        logger.debug("Incrementing counter '%s' by %s", counter_id, request.amount)
        return self._start(
            loop, options, lambda store: IncrementCounterUseCase(store).execute(request)
        )

    def get_last_value(
        self, counter_id: str, options: CounterOptions | None = None
    ) -> CounterResult:
        """Read the last value of ``counter_id`` (0 if it was never incremented)."""
        options = options or CounterOptions()
        loop = asyncio.get_running_loop()
        request = GetCountRequest(
            table_name=options.table_name or self._defaults.table_name,
            key_attribute=options.key_attribute or self._defaults.key_attribute,
            counter_id=counter_id,
            count_attribute=options.count_attribute or self._defaults.count_attribute,
            overrides=options.request_overrides or {},
        )
        logger.debug("Reading counter '%s'", counter_id)
        return self._start(
            loop, options, lambda store: GetLastValueUseCase(store).execute(request)
        )

    def set_client(self, client: CounterStorePort) -> None:
        self._clients.set_client(client)

    def get_client(self) -> CounterStorePort:
        return self._clients.get_client()

    def _start(
        self,
        loop: asyncio.AbstractEventLoop,
        options: CounterOptions,
        execute: Callable[[CounterStorePort], Coroutine[Any, Any, int]],
    ) -> CounterResult:
        """Resolve the store once for this operation and run it as a task.

        A store that cannot be created (missing region, unknown backend, ...)
        settles the result as a StoreError instead of raising here.
        """
        try:
            store = self._clients.resolve(options.client)
        except Exception as e:
            logger.warning("Could not create counter store: %s", e)
            task = loop.create_task(_reject(StoreError(e), e))
        else:
            task = loop.create_task(execute(store))
        return attach_callbacks(CounterResult(task), options)


async def _reject(error: StoreError, cause: Exception) -> int:
    raise error from cause
