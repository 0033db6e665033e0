"""Health check endpoint."""

from fastapi import APIRouter, Depends

from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.infrastructure.api.dependencies import get_counters

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(counters: AtomicCounters = Depends(get_counters)):
    """Report the service status and the counter store in use."""
    try:
        store = type(counters.get_client()).__name__
    except Exception as e:
        store = f"error: {e}"

    return {
        "status": "degraded" if store.startswith("error") else "ok",
        "store": store,
        "table": counters.defaults.table_name,
        "service": "Atomic Counters",
    }
