"""Raw request override policy.

Caller-supplied DynamoDB request fields are merged last and win over derived
fields, except for the fields that define the operation itself: replacing the
key or the update expression would silently change what is being counted.

Expression placeholder maps are merged instead of replaced, so a caller's
``ConditionExpression`` can bring its own names and values (``#count < :max``)
as long as it does not redefine the ``#count`` / ``:amount`` placeholders.
"""

from __future__ import annotations

from typing import Any, Mapping

from atomic_counters.domain.errors import ProtectedFieldError

# Placeholders used by the derived expressions.
COUNT_NAME = "#count"
AMOUNT_VALUE = ":amount"

PROTECTED_UPDATE_FIELDS = frozenset({
    "Key",
    "UpdateExpression",
    "ReturnValues",
})

PROTECTED_READ_FIELDS = frozenset({
    "Key",
    "ProjectionExpression",
})

PLACEHOLDER_FIELDS = {
    "ExpressionAttributeNames": COUNT_NAME,
    "ExpressionAttributeValues": AMOUNT_VALUE,
}


def check_overrides(overrides: Mapping[str, Any], protected: frozenset[str]) -> None:
    """Raise ProtectedFieldError if ``overrides`` touches any ``protected`` field
    or redefines one of the derived expression placeholders."""
    clashes = sorted(protected.intersection(overrides))
    if clashes:
        raise ProtectedFieldError(
            f"Request overrides may not replace {', '.join(clashes)}"
        )

    for name, reserved in PLACEHOLDER_FIELDS.items():
        if name not in overrides:
            continue
        extra = overrides[name]
        if not isinstance(extra, Mapping):
            raise ProtectedFieldError(f"{name} override must be a mapping")
        if reserved in extra:
            raise ProtectedFieldError(f"{name} override may not redefine {reserved}")


def merge_overrides(derived: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new request with ``overrides`` applied on top of ``derived``.

    Placeholder maps are combined key by key; every other field is replaced.
    """
    merged = dict(derived)
    for name, value in overrides.items():
        if name in PLACEHOLDER_FIELDS and name in merged:
            merged[name] = {**merged[name], **value}
        else:
            merged[name] = value
    return merged
