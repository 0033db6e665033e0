"""Port interface for the key-value store holding the counters."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from atomic_counters.domain.value_objects.counter_request import (
    AtomicAddRequest,
    GetCountRequest,
)


class CounterStorePort(ABC):
    @abstractmethod
    async def atomic_add(self, request: AtomicAddRequest) -> Mapping[str, Any] | None:
        """Atomically add ``request.amount`` to the count attribute.

        Creates the item with ``count_attribute = amount`` if it is absent.
        Returns the post-update attributes (at least the count attribute),
        with numbers deserialized to Python values.
        """
        ...

    @abstractmethod
    async def get_item(self, request: GetCountRequest) -> Mapping[str, Any] | None:
        """Read the count attribute of the counter item.

        Returns None if the item does not exist.
        """
        ...
