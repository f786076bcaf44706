"""Query builder, validation and request assembly for the FDSN event service.

A query is built with chained ``with_*`` calls, validated once when it is
finalized, and rendered into an ``httpx.Request``::

    query = (
        QueryConstraints()
        .filter_by_country_code("TR")
        .with_start_time(2024, 1, 1, 0, 0)
        .with_min_magnitude(4.0)
    )
    request = build_request(query, DEFAULT_BASE_URL)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

import httpx

from quake_query.errors import (
    MagnitudeAboveCeiling,
    MagnitudeBelowFloor,
    MissingStartTime,
    StartAfterEnd,
    StartInFuture,
)
from quake_query.timeutils import format_wire_time, make_instant, now_utc, to_utc

if TYPE_CHECKING:
    from quake_query.models import EventSet
    from quake_query.usgs_client import UsgsClient

DEFAULT_BASE_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"

MIN_MAGNITUDE = 0.0
MAX_MAGNITUDE = 10.0


class AlertLevel(Enum):
    """PAGER alert levels. ``ALL`` means no alert filter."""

    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    ALL = "all"

    @property
    def param_value(self) -> str | None:
        # The service treats a missing alertlevel as "any level"
        if self is AlertLevel.ALL:
            return None
        return self.value


class OrderBy(Enum):
    TIME = "time"
    TIME_ASC = "time-asc"
    MAGNITUDE = "magnitude"
    MAGNITUDE_ASC = "magnitude-asc"


@dataclass
class QueryConstraints:
    """Constraint aggregate for one catalog query.

    Mutators never fail and always return the same instance, so calls can
    be chained in any order. Consistency is checked by :func:`validate`
    when the query is finalized.
    """

    country_code: str = "US"
    start_time: datetime | None = None
    end_time: datetime = field(default_factory=now_utc)
    min_magnitude: float = MIN_MAGNITUDE
    max_magnitude: float = MAX_MAGNITUDE
    alert_level: AlertLevel = AlertLevel.ALL
    order_by: OrderBy = OrderBy.TIME
    client: UsgsClient | None = field(default=None, repr=False, compare=False)

    def filter_by_country_code(self, country_code: str) -> QueryConstraints:
        """Keep only events inside this country (e.g. ``"TR"``). ``""`` disables."""
        self.country_code = country_code
        return self

    def with_start_time(
        self, year: int, month: int, day: int, hour: int, minute: int
    ) -> QueryConstraints:
        """Set the window start from local wall-clock components."""
        self.start_time = to_utc(make_instant(year, month, day, hour, minute))
        return self

    def with_end_time(
        self, year: int, month: int, day: int, hour: int, minute: int
    ) -> QueryConstraints:
        """Set the window end from local wall-clock components."""
        self.end_time = to_utc(make_instant(year, month, day, hour, minute))
        return self

    def with_min_magnitude(self, value: float) -> QueryConstraints:
        self.min_magnitude = value
        return self

    def with_max_magnitude(self, value: float) -> QueryConstraints:
        self.max_magnitude = value
        return self

    def with_alert_level(self, level: AlertLevel) -> QueryConstraints:
        self.alert_level = level
        return self

    def with_order_by(self, order: OrderBy) -> QueryConstraints:
        self.order_by = order
        return self

    def fetch(self) -> EventSet:
        """Validate, run the query and apply the country filter."""
        return self._bound_client().fetch(self)

    async def fetch_async(self) -> EventSet:
        """Async variant of :meth:`fetch`."""
        return await self._bound_client().fetch_async(self)

    def _bound_client(self) -> UsgsClient:
        if self.client is None:
            from quake_query.usgs_client import UsgsClient

            self.client = UsgsClient()
        return self.client


def validate(constraints: QueryConstraints, now: datetime | None = None) -> None:
    """Check constraints in a fixed order and raise the first violation.

    Raises:
        MissingStartTime: no start time was set.
        StartAfterEnd: start time is later than end time.
        StartInFuture: start time is later than ``now``.
        MagnitudeBelowFloor: minimum magnitude is below 0 or NaN.
        MagnitudeAboveCeiling: maximum magnitude is above 10 or NaN.
    """
    start = constraints.start_time
    if start is None:
        raise MissingStartTime()

    if start > constraints.end_time:
        raise StartAfterEnd()

    if start > (now or now_utc()):
        raise StartInFuture()

    # NaN fails both range checks
    if not constraints.min_magnitude >= MIN_MAGNITUDE:
        raise MagnitudeBelowFloor()

    if not constraints.max_magnitude <= MAX_MAGNITUDE:
        raise MagnitudeAboveCeiling()


def _format_magnitude(value: float) -> str:
    # Shortest round-trip text; 4.0 -> "4", 4.1234567 -> "4.1234567"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def build_params(constraints: QueryConstraints) -> dict[str, str]:
    """Render constraints as FDSN query parameters.

    Assumes ``constraints`` already passed :func:`validate`.
    """
    params = {
        "format": "geojson",
        "starttime": format_wire_time(constraints.start_time),
        "endtime": format_wire_time(constraints.end_time),
        "minmagnitude": _format_magnitude(constraints.min_magnitude),
        "maxmagnitude": _format_magnitude(constraints.max_magnitude),
    }
    alert = constraints.alert_level.param_value
    if alert is not None:
        params["alertlevel"] = alert
    params["orderby"] = constraints.order_by.value
    return params


def build_request(
    constraints: QueryConstraints,
    base_url: str = DEFAULT_BASE_URL,
    now: datetime | None = None,
) -> httpx.Request:
    """Validate ``constraints`` and build the GET request for them."""
    validate(constraints, now=now)
    return httpx.Request("GET", base_url, params=build_params(constraints))
