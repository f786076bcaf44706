"""HTTP client for the USGS FDSN event query service."""

from __future__ import annotations

import logging
import time

import httpx

from quake_query.boundaries import get_boundaries
from quake_query.config import ClientConfig
from quake_query.errors import TransportFailure
from quake_query.filtering import filter_by_country
from quake_query.models import EventSet
from quake_query.query import QueryConstraints, build_request

logger = logging.getLogger(__name__)


class UsgsClient:
    """Runs :class:`QueryConstraints` against the event query endpoint.

    Example:
        >>> client = UsgsClient()
        >>> result = (
        ...     client.query()
        ...     .filter_by_country_code("TR")
        ...     .with_start_time(2024, 1, 1, 0, 0)
        ...     .with_end_time(2024, 12, 31, 23, 59)
        ...     .with_min_magnitude(4.0)
        ...     .fetch()
        ... )
        >>> print(result.metadata.count)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
        boundary_lookup=None,
    ):
        """
        Args:
            config: Endpoint and dataset settings. Defaults to ``ClientConfig()``.
            http_client: Shared sync client; a short-lived one is used if omitted.
            async_http_client: Shared async client for :meth:`fetch_async`.
            boundary_lookup: Object with ``region_ids_for(lat, lon)``. Defaults
                to the process-wide index from :func:`get_boundaries`.
        """
        self.config = config or ClientConfig()
        self._http = http_client
        self._async_http = async_http_client
        self._boundary_lookup = boundary_lookup

    def query(self) -> QueryConstraints:
        """Start a new query with default constraints bound to this client."""
        return QueryConstraints(client=self)

    @property
    def boundary_lookup(self):
        if self._boundary_lookup is None:
            self._boundary_lookup = get_boundaries(
                self.config.boundaries_path, self.config.boundary_id_property
            )
        return self._boundary_lookup

    def _prepare(self, query: QueryConstraints) -> httpx.Request:
        request = build_request(query, self.config.base_url)
        request.headers["User-Agent"] = self.config.user_agent
        request.extensions["timeout"] = httpx.Timeout(self.config.timeout_seconds).as_dict()
        logger.debug("GET %s", request.url, extra={"url": str(request.url)})
        return request

    def fetch(self, query: QueryConstraints) -> EventSet:
        """Validate ``query``, send it, decode the body and filter by country.

        Raises:
            QueryValidationError: constraints are inconsistent (nothing is sent).
            TransportFailure: connection error, non-2xx status or bad body.
        """
        request = self._prepare(query)
        started = time.monotonic()
        try:
            if self._http is not None:
                resp = self._http.send(request)
            else:
                with httpx.Client() as client:
                    resp = client.send(request)
        except httpx.RequestError as exc:
            raise self._transport_failure(request, exc) from exc

        return self._finish(query, request, resp, started)

    async def fetch_async(self, query: QueryConstraints) -> EventSet:
        """Async variant of :meth:`fetch`."""
        request = self._prepare(query)
        started = time.monotonic()
        try:
            if self._async_http is not None:
                resp = await self._async_http.send(request)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.send(request)
        except httpx.RequestError as exc:
            raise self._transport_failure(request, exc) from exc

        return self._finish(query, request, resp, started)

    def _finish(
        self,
        query: QueryConstraints,
        request: httpx.Request,
        resp: httpx.Response,
        started: float,
    ) -> EventSet:
        try:
            resp.raise_for_status()
            event_set = EventSet.from_geojson(resp.json())
        except httpx.HTTPStatusError as exc:
            raise self._transport_failure(request, exc, resp.status_code) from exc
        except (ValueError, KeyError, TypeError, IndexError) as exc:
            raise self._transport_failure(request, exc, resp.status_code) from exc

        received = len(event_set.features)
        lookup = self.boundary_lookup if query.country_code else None
        event_set = filter_by_country(event_set, query.country_code, lookup)

        logger.info(
            "Fetched %d events (%d after country filter)",
            received, len(event_set.features),
            extra={
                "country_code": query.country_code or None,
                "event_count": len(event_set.features),
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )
        return event_set

    @staticmethod
    def _transport_failure(
        request: httpx.Request, exc: Exception, status_code: int | None = None
    ) -> TransportFailure:
        logger.warning(
            "Request to %s failed: %s", request.url, exc,
            extra={"url": str(request.url), "status_code": status_code},
        )
        return TransportFailure(f"Request error: {exc}", status_code=status_code)
