from __future__ import annotations


class PlannerError(Exception):
    """Base class for failures that abort a place-selection request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(PlannerError):
    """A required request field is missing or empty."""


class NotFound(PlannerError):
    """The geocoder has no match for the destination."""


class UpstreamError(PlannerError):
    """An upstream service is unreachable or answered with garbage."""
