"""Request value objects — immutable descriptions of one store round trip."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from atomic_counters.domain.policies.request_overrides import (
    PROTECTED_READ_FIELDS,
    PROTECTED_UPDATE_FIELDS,
    check_overrides,
)

def _check_counter_id(counter_id: str) -> None:
    if not isinstance(counter_id, str) or not counter_id:
        raise ValueError("counter_id must be a non-empty string")


def _check_amount(amount: int | float | Decimal) -> int | Decimal:
    """Return the amount ready for the store; reject bools, non-numbers and inf/nan.

    Floats become ``Decimal(str(amount))`` so they serialize without binary noise.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise ValueError(f"increment must be a number, got {amount!r}")
    if isinstance(amount, int):
        return amount
    finite = amount.is_finite() if isinstance(amount, Decimal) else math.isfinite(amount)
    if not finite:
        raise ValueError(f"increment must be a finite number, got {amount!r}")
    return Decimal(str(amount)) if isinstance(amount, float) else amount


@dataclass(frozen=True)
class AtomicAddRequest:
    """Add ``amount`` to ``count_attribute`` of the counter item, returning the new value."""

    table_name: str
    key_attribute: str
    counter_id: str
    count_attribute: str
    amount: int | Decimal
    overrides: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_counter_id(self.counter_id)
        object.__setattr__(self, "amount", _check_amount(self.amount))
        check_overrides(self.overrides, PROTECTED_UPDATE_FIELDS)
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    @property
    def key(self) -> dict[str, str]:
        return {self.key_attribute: self.counter_id}


@dataclass(frozen=True)
class GetCountRequest:
    """Point read of ``count_attribute`` on the counter item."""

    table_name: str
    key_attribute: str
    counter_id: str
    count_attribute: str
    overrides: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_counter_id(self.counter_id)
        check_overrides(self.overrides, PROTECTED_READ_FIELDS)
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    @property
    def key(self) -> dict[str, str]:
        return {self.key_attribute: self.counter_id}
