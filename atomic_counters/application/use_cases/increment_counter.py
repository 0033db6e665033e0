"""IncrementCounterUseCase — one atomic add against the counter store."""

from __future__ import annotations

import logging

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.domain.errors import MalformedResponse, StoreError
from atomic_counters.domain.policies.count_value import parse_count_value
from atomic_counters.domain.value_objects.counter_request import AtomicAddRequest

logger = logging.getLogger(__name__)


class IncrementCounterUseCase:
    """Issues the atomic add and validates the returned count."""

    def __init__(self, store: CounterStorePort):
        self._store = store

    async def execute(self, request: AtomicAddRequest) -> int:
        """Increment the counter and return its new value.

        Single round trip, no retries here; the store client owns retry policy.

        Raises:
            StoreError: the store call failed (original error as ``cause``).
            MalformedResponse: the count attribute was missing or not numeric.
        """
        try:
            attributes = await self._store.atomic_add(request)
        except StoreError:
            raise
        except Exception as e:
            logger.warning(
                "Increment of counter '%s' in %s failed: %s",
                request.counter_id, request.table_name, e,
            )
            raise StoreError(e) from e

        if not attributes or request.count_attribute not in attributes:
            logger.warning(
                "Increment of counter '%s' returned no '%s' attribute",
                request.counter_id, request.count_attribute,
            )
            raise MalformedResponse(
                f"No count attribute '{request.count_attribute}' returned for "
                f"counter '{request.counter_id}'"
            )

        value = parse_count_value(attributes[request.count_attribute], request.count_attribute)
        logger.info(
            "Counter '%s' incremented by %s → %d",
            request.counter_id, request.amount, value,
        )
        return value
