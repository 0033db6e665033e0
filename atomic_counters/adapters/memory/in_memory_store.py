"""In-memory adapter — implements CounterStorePort inside the current process."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.domain.value_objects.counter_request import (
    AtomicAddRequest,
    GetCountRequest,
)

logger = logging.getLogger(__name__)


class InMemoryCounterStore(CounterStorePort):
    """Tables of items keyed by (key attribute, counter id).

    The read-modify-write in ``atomic_add`` has no await inside it, so
    concurrent tasks on one event loop can never interleave an add. Of the raw
    request overrides only ``TableName`` is honoured.
    """

    def __init__(self) -> None:
        self._tables: dict[str, dict[tuple[str, str], dict[str, Any]]] = {}

    async def atomic_add(self, request: AtomicAddRequest) -> Mapping[str, Any] | None:
        await asyncio.sleep(0)  # behave like a real round trip
        table = self._tables.setdefault(self._table_name(request), {})
        item = table.setdefault(
            (request.key_attribute, request.counter_id),
            {request.key_attribute: request.counter_id},
        )
        item[request.count_attribute] = item.get(request.count_attribute, 0) + request.amount
        return {request.count_attribute: item[request.count_attribute]}

    async def get_item(self, request: GetCountRequest) -> Mapping[str, Any] | None:
        await asyncio.sleep(0)
        table = self._tables.get(self._table_name(request), {})
        item = table.get((request.key_attribute, request.counter_id))
        if item is None:
            return None
        if request.count_attribute not in item:
            return {}
        return {request.count_attribute: item[request.count_attribute]}

    def put_item(self, table_name: str, item: Mapping[str, Any], key_attribute: str = "id") -> None:
        """Store ``item`` verbatim (used to seed tables, including bad data)."""
        table = self._tables.setdefault(table_name, {})
        table[(key_attribute, item[key_attribute])] = dict(item)
        logger.debug("Seeded %s item %r", table_name, item[key_attribute])

    @staticmethod
    def _table_name(request: AtomicAddRequest | GetCountRequest) -> str:
        return request.overrides.get("TableName", request.table_name)
