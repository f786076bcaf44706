"""Client for the USGS earthquake catalog with country filtering."""

from quake_query.config import ClientConfig
from quake_query.errors import (
    BoundaryDatasetError,
    MagnitudeAboveCeiling,
    MagnitudeBelowFloor,
    MissingStartTime,
    QuakeQueryError,
    QueryValidationError,
    StartAfterEnd,
    StartInFuture,
    TransportFailure,
)
from quake_query.models import Event, EventSet, Geometry, Metadata, Properties
from quake_query.query import AlertLevel, OrderBy, QueryConstraints
from quake_query.usgs_client import UsgsClient

__all__ = [
    "UsgsClient", "ClientConfig", "QueryConstraints", "AlertLevel", "OrderBy",
    "EventSet", "Event", "Geometry", "Metadata", "Properties",
    "QuakeQueryError", "QueryValidationError", "MissingStartTime", "StartAfterEnd",
    "StartInFuture", "MagnitudeBelowFloor", "MagnitudeAboveCeiling",
    "TransportFailure", "BoundaryDatasetError",
]
