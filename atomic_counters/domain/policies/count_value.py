"""Count attribute parsing — turns a stored attribute into a counter value."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from atomic_counters.domain.errors import MalformedResponse


def parse_count_value(raw: Any, attribute: str) -> int:
    """Convert a deserialized DynamoDB number into an int.

    DynamoDB numbers arrive as ``Decimal``. Fractional values are truncated
    toward zero. Anything that is not a finite number (strings, sets, bools,
    inf/nan) is a malformed response.

    Raises:
        MalformedResponse: if ``raw`` is not a finite number.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, float, Decimal)):
        raise MalformedResponse(f"Count attribute '{attribute}' is not a number: {raw!r}")
    if isinstance(raw, int):
        return raw
    finite = raw.is_finite() if isinstance(raw, Decimal) else math.isfinite(raw)
    if not finite:
        raise MalformedResponse(
            f"Could not parse count attribute '{attribute}' as a finite number: {raw!r}"
        )
    return int(raw)
