"""Counter error taxonomy."""

from __future__ import annotations


class CounterError(Exception):
    """Base class for failures delivered through a CounterResult."""


class StoreError(CounterError):
    """The store operation itself failed (network, permissions, throttling, ...).

    The original exception is kept unchanged as ``cause`` (and ``__cause__``).
    """

    def __init__(self, cause: BaseException):
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause

    @property
    def code(self) -> str | None:
        """DynamoDB error code (e.g. ``ProvisionedThroughputExceededException``), if any."""
        response = getattr(self.cause, "response", None)
        if isinstance(response, dict):
            return response.get("Error", {}).get("Code")
        return None


class MalformedResponse(CounterError):
    """The store answered, but the count attribute was missing or not numeric."""


class ProtectedFieldError(ValueError):
    """A raw request override tried to replace a field that defines the operation."""
