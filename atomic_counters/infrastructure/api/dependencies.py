"""FastAPI dependency injection — hands the counters facade to the routes."""

from __future__ import annotations

from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.counters import default_counters


def get_counters() -> AtomicCounters:
    return default_counters
