"""Exception hierarchy for the planner core."""
from typing import Optional


class PlannerError(Exception):
    """Base class for planner errors."""


class RemoteFetchError(PlannerError):
    """A single attempt to fetch a catalog endpoint failed."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint


class TransportFailure(RemoteFetchError):
    """Network unreachable, connection dropped or request timed out."""


class HttpStatusFailure(RemoteFetchError):
    """Server answered with a non-success status code."""

    def __init__(self, endpoint: str, status_code: int, reason: Optional[str] = None) -> None:
        message = f"HTTP {status_code}" + (f" {reason}" if reason else "")
        super().__init__(endpoint, message)
        self.status_code = status_code


class DecodeFailure(RemoteFetchError):
    """Response body was not valid JSON."""


class OutOfRangeError(PlannerError, IndexError):
    """A grid row, column or linear index is outside the current grid."""
