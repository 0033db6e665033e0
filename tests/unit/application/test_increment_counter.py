"""Tests for IncrementCounterUseCase with fake stores."""

from decimal import Decimal

import pytest

from atomic_counters.application.ports.counter_store import CounterStorePort
from atomic_counters.application.use_cases.increment_counter import IncrementCounterUseCase
from atomic_counters.domain.errors import MalformedResponse, StoreError
from atomic_counters.domain.value_objects.counter_request import AtomicAddRequest


class FakeStore(CounterStorePort):
    def __init__(self, attributes=None, error: Exception | None = None):
        self._attributes = attributes
        self._error = error
        self.requests = []

    async def atomic_add(self, request):
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._attributes

    async def get_item(self, request):
        raise AssertionError("increment must not read")


def _request(amount=1) -> AtomicAddRequest:
    return AtomicAddRequest(
        table_name="AtomicCounters", key_attribute="id",
        counter_id="Users", count_attribute="lastValue", amount=amount,
    )


@pytest.mark.asyncio
async def test_returns_new_value():
    store = FakeStore({"lastValue": Decimal("6")})
    value = await IncrementCounterUseCase(store).execute(_request(5))
    assert value == 6
    assert store.requests[0].amount == 5


@pytest.mark.asyncio
async def test_missing_attributes_is_malformed():
    store = FakeStore(None)
    with pytest.raises(MalformedResponse, match="No count attribute"):
        await IncrementCounterUseCase(store).execute(_request())


@pytest.mark.asyncio
async def test_missing_count_attribute_is_malformed():
    store = FakeStore({"other": Decimal("1")})
    with pytest.raises(MalformedResponse):
        await IncrementCounterUseCase(store).execute(_request())


@pytest.mark.asyncio
async def test_non_numeric_count_is_malformed():
    store = FakeStore({"lastValue": "seven"})
    with pytest.raises(MalformedResponse, match="not a number"):
        await IncrementCounterUseCase(store).execute(_request())


@pytest.mark.asyncio
async def test_store_failure_wrapped_with_original_cause():
    original = ConnectionError("network down")
    store = FakeStore(error=original)
    with pytest.raises(StoreError) as exc_info:
        await IncrementCounterUseCase(store).execute(_request())
    assert exc_info.value.cause is original
    assert exc_info.value.__cause__ is original
    assert exc_info.value.code is None


@pytest.mark.asyncio
async def test_store_error_not_double_wrapped():
    original = StoreError(TimeoutError("slow"))
    store = FakeStore(error=original)
    with pytest.raises(StoreError) as exc_info:
        await IncrementCounterUseCase(store).execute(_request())
    assert exc_info.value is original
