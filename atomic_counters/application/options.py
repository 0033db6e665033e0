"""CounterOptions — per-call options for increment / get_last_value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from atomic_counters.application.counter_result import CounterResult
from atomic_counters.application.ports.counter_store import CounterStorePort


@dataclass(frozen=True)
class CounterOptions:
    """Unset fields fall back to the configured CounterDefaults.

    ``request_overrides`` are raw DynamoDB request fields merged on top of the
    derived request (see request_overrides policy for the protected fields).
    ``on_success`` / ``on_error`` / ``on_complete`` are plain callbacks fired
    before any observer registered on the returned CounterResult.
    """

    table_name: str | None = None
    key_attribute: str | None = None
    count_attribute: str | None = None
    increment: int | None = None
    client: CounterStorePort | None = None
    request_overrides: Mapping[str, Any] = field(default_factory=dict)
    on_success: Callable[[int], Any] | None = None
    on_error: Callable[[BaseException], Any] | None = None
    on_complete: Callable[[Any], Any] | None = None


def attach_callbacks(result: CounterResult, options: CounterOptions) -> CounterResult:
    """Register the option callbacks on ``result`` (success/error before complete)."""
    if options.on_success is not None:
        result.on_success(options.on_success)
    if options.on_error is not None:
        result.on_failure(options.on_error)
    if options.on_complete is not None:
        result.on_settled(options.on_complete)
    return result
