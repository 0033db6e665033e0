"""CounterClientManager — owns the shared store handle and its lazy creation."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from atomic_counters.application.ports.counter_store import CounterStorePort

logger = logging.getLogger(__name__)


class CounterClientManager:
    """Create the store handle on first use unless one is supplied or set.

    A per-call override always wins and is never cached.
    """

    def __init__(
        self,
        factory: Callable[[], CounterStorePort],
        client: CounterStorePort | None = None,
    ):
        self._factory = factory
        self._client = client
        self._lock = threading.Lock()

    def resolve(self, override: CounterStorePort | None = None) -> CounterStorePort:
        if override is not None:
            return override

        client = self._client
        if client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._factory()
                    logger.debug("Created default counter store %s", type(self._client).__name__)
                client = self._client
        return client

    def set_client(self, client: CounterStorePort) -> None:
        self._client = client

    def get_client(self) -> CounterStorePort:
        return self.resolve()
