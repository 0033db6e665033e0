"""Distributed atomic counters backed by DynamoDB atomic adds."""

from atomic_counters.application.counter_result import CounterResult
from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.application.options import CounterOptions
from atomic_counters.counters import get_client, get_last_value, increment, set_client
from atomic_counters.domain.errors import (
    CounterError,
    MalformedResponse,
    ProtectedFieldError,
    StoreError,
)

__all__ = [
    "AtomicCounters",
    "CounterError",
    "CounterOptions",
    "CounterResult",
    "MalformedResponse",
    "ProtectedFieldError",
    "StoreError",
    "get_client",
    "get_last_value",
    "increment",
    "set_client",
]
