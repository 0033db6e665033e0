"""Module-level counter API backed by one process default AtomicCounters.

The default store is created lazily on first use from the configured backend;
``set_client`` replaces it for every later call without an explicit client.
"""

from __future__ import annotations

from atomic_counters.application.counter_result import CounterResult
from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.application.options import CounterOptions
from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.config import settings
from atomic_counters.domain.value_objects.counter_defaults import CounterDefaults
from atomic_counters.infrastructure.store_factory import build_default_store

default_counters = AtomicCounters(
    store_factory=build_default_store,
    defaults=CounterDefaults.from_settings(settings),
)


def increment(counter_id: str, options: CounterOptions | None = None) -> CounterResult:
    return default_counters.increment(counter_id, options)


def get_last_value(counter_id: str, options: CounterOptions | None = None) -> CounterResult:
    return default_counters.get_last_value(counter_id, options)


def set_client(client: CounterStorePort) -> None:
    default_counters.set_client(client)


def get_client() -> CounterStorePort:
    return default_counters.get_client()
