"""Increment or read counters from the command line.

Usage:
    python -m atomic_counters.tools.counters increment Users
    python -m atomic_counters.tools.counters increment Users --amount 5
    python -m atomic_counters.tools.counters get Users --table AtomicCounters
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from atomic_counters.application.counter_service import AtomicCounters
from atomic_counters.application.options import CounterOptions
from atomic_counters.config import settings
from atomic_counters.domain.errors import CounterError
from atomic_counters.domain.value_objects.counter_defaults import CounterDefaults
from atomic_counters.infrastructure.store_factory import build_default_store

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Atomic counters CLI")
    parser.add_argument("--table", default=None, help="Counters table name")
    parser.add_argument("--key-attribute", default=None, help="Key attribute name")
    parser.add_argument("--count-attribute", default=None, help="Count attribute name")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    inc = sub.add_parser("increment", help="Increment a counter and print the new value")
    inc.add_argument("counter_id")
    inc.add_argument("--amount", type=int, default=None, help="Increment amount (may be negative)")

    get = sub.add_parser("get", help="Print the last value of a counter")
    get.add_argument("counter_id")
    return parser


async def run(args: argparse.Namespace, counters: AtomicCounters) -> int:
    options = CounterOptions(
        table_name=args.table,
        key_attribute=args.key_attribute,
        count_attribute=args.count_attribute,
        increment=getattr(args, "amount", None),
    )
    if args.command == "increment":
        result = counters.increment(args.counter_id, options)
    else:
        result = counters.get_last_value(args.counter_id, options)
    return await result


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    counters = AtomicCounters(
        store_factory=build_default_store,
        defaults=CounterDefaults.from_settings(settings),
    )
    try:
        value = asyncio.run(run(args, counters))
    except (CounterError, ValueError) as e:
        logger.error("%s %s failed: %s", args.command, args.counter_id, e)
        return 1

    print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
