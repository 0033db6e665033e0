"""CounterDefaults value object — fallbacks for unset per-call options."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TABLE_NAME = "AtomicCounters"
DEFAULT_KEY_ATTRIBUTE = "id"
DEFAULT_COUNT_ATTRIBUTE = "lastValue"
DEFAULT_INCREMENT = 1


@dataclass(frozen=True)
class CounterDefaults:
    table_name: str = DEFAULT_TABLE_NAME
    key_attribute: str = DEFAULT_KEY_ATTRIBUTE
    count_attribute: str = DEFAULT_COUNT_ATTRIBUTE
    increment: int = DEFAULT_INCREMENT

    @classmethod
    def from_settings(cls, settings) -> "CounterDefaults":
        return cls(
            table_name=settings.table_name or DEFAULT_TABLE_NAME,
            key_attribute=settings.key_attribute or DEFAULT_KEY_ATTRIBUTE,
            count_attribute=settings.count_attribute or DEFAULT_COUNT_ATTRIBUTE,
            increment=settings.increment,
        )
