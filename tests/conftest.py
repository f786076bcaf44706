"""Shared fixtures: a synthetic FDSN GeoJSON response and a stub boundary lookup."""

from __future__ import annotations

import copy

import pytest

# One event in central Turkey, one in Leipzig, one far out in the Pacific.
SAMPLE_GEOJSON = {
    "type": "FeatureCollection",
    "metadata": {
        "generated": 1704067200000,
        "url": "https://earthquake.usgs.gov/fdsnws/event/1/query?format=geojson",
        "title": "USGS Earthquakes",
        "status": 200,
        "api": "1.14.1",
        "count": 3,
    },
    "features": [
        {
            "type": "Feature",
            "id": "us7000tr01",
            "properties": {
                "mag": 5.9,
                "place": "12 km NE of Elazig, Turkey",
                "time": 1700000000000,
                "updated": 1700000500000,
                "alert": "yellow",
                "status": "reviewed",
                "tsunami": 0,
                "sig": 536,
                "magType": "mww",
                "type": "earthquake",
                "title": "M 5.9 - 12 km NE of Elazig, Turkey",
            },
            "geometry": {"type": "Point", "coordinates": [39.2, 38.7, 10.0]},
        },
        {
            "type": "Feature",
            "id": "us7000de01",
            "properties": {
                "mag": 3.1,
                "place": "Leipzig, Germany",
                "time": 1699999000000,
                "alert": None,
                "magType": "mb",
            },
            "geometry": {"type": "Point", "coordinates": [12.4, 51.3, 8.2]},
        },
        {
            "type": "Feature",
            "id": "us7000pc01",
            "properties": {"mag": 4.4, "place": "central Pacific Ocean", "time": 1699998000000},
            "geometry": {"type": "Point", "coordinates": [-150.0, 0.0, 15.0]},
        },
    ],
    "bbox": [-150.0, 0.0, 8.2, 39.2, 51.3, 15.0],
}


class StubLookup:
    """Maps exact (lat, lon) pairs to region ids and records every call."""

    def __init__(self, regions: dict[tuple[float, float], set[str]]):
        self.regions = regions
        self.calls: list[tuple[float, float]] = []

    def region_ids_for(self, lat: float, lon: float) -> set[str]:
        self.calls.append((lat, lon))
        return self.regions.get((lat, lon), set())


@pytest.fixture
def sample_geojson() -> dict:
    return copy.deepcopy(SAMPLE_GEOJSON)


@pytest.fixture
def stub_lookup() -> StubLookup:
    return StubLookup({
        (38.7, 39.2): {"TR"},
        (51.3, 12.4): {"DE"},
    })
