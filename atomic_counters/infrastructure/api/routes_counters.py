"""Counter endpoints — increment and read counters over HTTP."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from atomic_counters.application.counter_result import CounterResult
from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.application.options import CounterOptions
from atomic_counters.domain.errors import MalformedResponse, StoreError
from atomic_counters.infrastructure.api.dependencies import get_counters
from atomic_counters.infrastructure.api.schemas import CounterValueResponse, IncrementRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/counters", tags=["counters"])


async def _await_value(result: CounterResult) -> int:
    try:
        return await result
    except MalformedResponse as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
    except StoreError as e:
        raise HTTPException(
            status_code=503,
            detail={"error": str(e), "code": e.code},
        ) from e


@router.post("/{counter_id}/increment", response_model=CounterValueResponse)
async def increment_counter(
    counter_id: str,
    body: IncrementRequest | None = None,
    counters: AtomicCounters = Depends(get_counters),
):
    """Atomically increment a counter and return its new value."""
    body = body or IncrementRequest()
    try:
        result = counters.increment(
            counter_id,
            CounterOptions(table_name=body.table_name, increment=body.amount),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    value = await _await_value(result)
    return CounterValueResponse(counter_id=counter_id, value=value)


@router.get("/{counter_id}", response_model=CounterValueResponse)
async def get_counter(
    counter_id: str,
    table_name: str | None = Query(default=None),
    counters: AtomicCounters = Depends(get_counters),
):
    """Return the last value of a counter (0 if it was never incremented)."""
    try:
        result = counters.get_last_value(counter_id, CounterOptions(table_name=table_name))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    value = await _await_value(result)
    return CounterValueResponse(counter_id=counter_id, value=value)
