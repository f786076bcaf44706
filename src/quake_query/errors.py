"""Exceptions raised by quake_query."""

from __future__ import annotations


class QuakeQueryError(Exception):
    """Base class for all quake_query errors."""


class QueryValidationError(QuakeQueryError):
    """Raised at finalization when constraints are inconsistent."""

    message = "Invalid query"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class MissingStartTime(QueryValidationError):
    message = "Start time cannot be empty"


class StartAfterEnd(QueryValidationError):
    message = "Start time cannot be after end time"


class StartInFuture(QueryValidationError):
    message = "Start time cannot be in the future"


class MagnitudeBelowFloor(QueryValidationError):
    message = "Minimum magnitude cannot be smaller than 0"


class MagnitudeAboveCeiling(QueryValidationError):
    message = "Maximum magnitude cannot be greater than 10"


class TransportFailure(QuakeQueryError):
    """Network, HTTP status or body decoding failure. Never retried."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BoundaryDatasetError(QuakeQueryError):
    """The country boundary dataset could not be loaded."""
