"""Builds the default counter store for the configured backend."""

from __future__ import annotations

import logging

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.config import settings

logger = logging.getLogger(__name__)


def build_default_store() -> CounterStorePort:
    backend = settings.store_backend.strip().lower()
    if backend == "memory":
        from atomic_counters.adapters.memory.in_memory_store import InMemoryCounterStore

        logger.info("Using in-memory counter store")
        return InMemoryCounterStore()
    if backend == "dynamodb":
        from atomic_counters.adapters.dynamodb.dynamodb_adapter import DynamoDBCounterStore

        logger.info("Using DynamoDB counter store")
        return DynamoDBCounterStore()
    raise ValueError(f"Unknown counter store backend: {settings.store_backend!r}")
