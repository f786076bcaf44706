"""Tests for the country boundary index."""

from __future__ import annotations

import json

import pytest

from quake_query.boundaries import BoundaryIndex, get_boundaries, load_boundaries
from quake_query.errors import BoundaryDatasetError

SQUARE = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "properties": {"ISO_A2": "AA"},
            "geometry": {"type": "Polygon", "coordinates": [[
                [0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0], [0.0, 0.0],
            ]]},
        },
        {
            "type": "Feature",
            "properties": {"ISO_A2": "BB"},
            "geometry": {"type": "Polygon", "coordinates": [[
                [5.0, 5.0], [15.0, 5.0], [15.0, 15.0], [5.0, 15.0], [5.0, 5.0],
            ]]},
        },
        {
            "type": "Feature",
            "properties": {"ISO_A2": None},
            "geometry": {"type": "Polygon", "coordinates": [[
                [20.0, 20.0], [21.0, 20.0], [21.0, 21.0], [20.0, 20.0],
            ]]},
        },
    ],
}


class TestBoundaryIndex:
    def test_point_inside_single_region(self):
        index = BoundaryIndex.from_geojson(SQUARE, id_property="ISO_A2")
        assert index.region_ids_for(lat=2.0, lon=2.0) == {"AA"}

    def test_overlapping_regions(self):
        index = BoundaryIndex.from_geojson(SQUARE, id_property="ISO_A2")
        assert index.region_ids_for(lat=7.0, lon=7.0) == {"AA", "BB"}

    def test_point_outside(self):
        index = BoundaryIndex.from_geojson(SQUARE, id_property="ISO_A2")
        assert index.region_ids_for(lat=-5.0, lon=-5.0) == set()

    def test_boundary_point_counts_as_inside(self):
        index = BoundaryIndex.from_geojson(SQUARE, id_property="ISO_A2")
        assert "AA" in index.region_ids_for(lat=0.0, lon=3.0)

    def test_features_without_id_are_skipped(self):
        index = BoundaryIndex.from_geojson(SQUARE, id_property="ISO_A2")
        assert len(index) == 2

    def test_missing_iso_placeholder_is_skipped(self):
        doc = {"features": [{
            "properties": {"ISO_A2_EH": "-99"},
            "geometry": {"type": "Polygon", "coordinates": [[
                [0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 0.0],
            ]]},
        }]}
        assert len(BoundaryIndex.from_geojson(doc)) == 0

    def test_lat_lon_order(self):
        # Narrow strip: lon 0..1, lat 0..50
        doc = {"features": [{
            "properties": {"id": "ST"},
            "geometry": {"type": "Polygon", "coordinates": [[
                [0.0, 0.0], [1.0, 0.0], [1.0, 50.0], [0.0, 50.0], [0.0, 0.0],
            ]]},
        }]}
        index = BoundaryIndex.from_geojson(doc, id_property="id")
        assert index.region_ids_for(lat=40.0, lon=0.5) == {"ST"}
        assert index.region_ids_for(lat=0.5, lon=40.0) == set()


class TestBundledDataset:
    @pytest.mark.parametrize("lat,lon,code", [
        (38.7, 39.2, "TR"),   # Elazig
        (37.2, 37.0, "TR"),   # Kahramanmaras
        (51.3, 12.4, "DE"),   # Leipzig
        (35.7, 139.7, "JP"),  # Tokyo
        (34.0, -118.0, "US"),  # Los Angeles
        (-33.4, -70.6, "CL"),  # Santiago
        (61.2, -149.9, "US"),  # Anchorage
        (43.65, -79.38, "CA"),  # Toronto
        (48.86, 2.35, "FR"),   # Paris
        (59.91, 10.75, "NO"),  # Oslo
        (18.2, -66.5, "PR"),   # Puerto Rico
        (-0.9, 100.35, "ID"),  # Padang, Sumatra
        (37.98, 23.73, "GR"),  # Athens
        (23.99, 121.6, "TW"),  # Hualien
        (27.7, 85.3, "NP"),    # Kathmandu
    ])
    def test_known_epicenters(self, lat, lon, code):
        assert get_boundaries().region_ids_for(lat, lon) == {code}

    def test_neighbour_not_claimed(self):
        assert "US" not in get_boundaries().region_ids_for(43.65, -79.38)
        assert "TR" not in get_boundaries().region_ids_for(39.1, 26.4)  # Lesbos

    def test_uses_iso_alpha2_ids(self):
        boundaries = get_boundaries()
        assert len(boundaries) > 150
        assert boundaries.region_ids_for(48.86, 2.35) == {"FR"}
        assert "FRA" not in boundaries.region_ids_for(48.86, 2.35)

    def test_open_ocean(self):
        assert get_boundaries().region_ids_for(0.0, -150.0) == set()

    def test_loaded_once_per_process(self):
        assert get_boundaries() is get_boundaries()


class TestLoadBoundaries:
    def test_custom_file_and_id_property(self, tmp_path):
        path = tmp_path / "countries.geojson"
        path.write_text(json.dumps(SQUARE))
        index = load_boundaries(path, id_property="ISO_A2")
        assert index.region_ids_for(2.0, 2.0) == {"AA"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(BoundaryDatasetError, match="Failed to load boundaries"):
            load_boundaries(tmp_path / "nope.geojson")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.geojson"
        path.write_text("{not json")
        with pytest.raises(BoundaryDatasetError):
            load_boundaries(path)
