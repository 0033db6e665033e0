"""Pytest configuration and shared fixtures."""

import pytest

from atomic_counters.adapters.memory.in_memory_store import InMemoryCounterStore
from atomic_counters.application.counter_service import AtomicCounters


@pytest.fixture
def memory_store():
    return InMemoryCounterStore()


@pytest.fixture
def counters(memory_store):
    """Facade whose lazily created default store is ``memory_store``."""
    return AtomicCounters(store_factory=lambda: memory_store)
