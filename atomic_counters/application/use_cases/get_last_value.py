"""GetLastValueUseCase — read a counter without changing it."""

from __future__ import annotations

import logging

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.domain.errors import StoreError
from atomic_counters.domain.policies.count_value import parse_count_value
from atomic_counters.domain.value_objects.counter_request import GetCountRequest

logger = logging.getLogger(__name__)


class GetLastValueUseCase:
    def __init__(self, store: CounterStorePort):
        self._store = store

    async def execute(self, request: GetCountRequest) -> int:
        """Return the last value generated for the counter.

        A counter that was never incremented (no item, or no count attribute)
        reads as 0. A count attribute that is present but not numeric is a
        MalformedResponse, never 0.
        """
        try:
            item = await self._store.get_item(request)
        except StoreError:
            raise
        except Exception as e:
            logger.warning(
                "Read of counter '%s' in %s failed: %s",
                request.counter_id, request.table_name, e,
            )
            raise StoreError(e) from e

        if not item or request.count_attribute not in item:
            logger.debug("Counter '%s' not found, defaulting to 0", request.counter_id)
            return 0

        value = parse_count_value(item[request.count_attribute], request.count_attribute)
        logger.info("Counter '%s' last value: %d", request.counter_id, value)
        return value
