"""Post-fetch country filter for decoded event sets."""

from __future__ import annotations

import logging

from quake_query.models import Event, EventSet

logger = logging.getLogger(__name__)


def _in_country(event: Event, country_code: str, lookup) -> bool:
    lat, lon = event.latitude, event.longitude
    if lat is None or lon is None:
        return False
    return country_code in lookup.region_ids_for(lat, lon)


def filter_by_country(event_set: EventSet, country_code: str, lookup) -> EventSet:
    """Keep only events whose epicenter lies inside ``country_code``.

    ``lookup`` is anything with ``region_ids_for(lat, lon) -> set[str]``.
    Codes are matched exactly (case-sensitive). The event list is replaced
    in place and ``metadata.count`` is rewritten to match it. An empty
    ``country_code`` leaves the set untouched, reported count included.
    """
    if not country_code:
        return event_set

    before = len(event_set.features)
    event_set.features = [
        e for e in event_set.features if _in_country(e, country_code, lookup)
    ]
    event_set.metadata.count = len(event_set.features)

    logger.debug(
        "Country filter %s kept %d of %d events",
        country_code, event_set.metadata.count, before,
    )
    return event_set
