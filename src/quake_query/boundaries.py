"""Country boundary lookup backed by a bundled GeoJSON dataset.

The bundled file is Natural Earth 1:110m admin-0 countries (public domain)
keyed by ISO 3166-1 alpha-2 in ``ISO_A2_EH``. The 1:10m or 1:50m release
resolves small islands; point ``ClientConfig.boundaries_path`` at it.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from shapely.errors import ShapelyError
from shapely.geometry import Point, shape
from shapely.strtree import STRtree

from quake_query.errors import BoundaryDatasetError

logger = logging.getLogger(__name__)

DEFAULT_BOUNDARIES_PATH = Path(__file__).parent / "data" / "country_boundaries.geojson"
DEFAULT_ID_PROPERTY = "ISO_A2_EH"

# Natural Earth marks regions without an ISO code this way
MISSING_ID = "-99"


class BoundaryIndex:
    """Read-only point-in-polygon index over region polygons."""

    def __init__(self, region_ids: list[str], geometries: list):
        if len(region_ids) != len(geometries):
            raise ValueError("region_ids and geometries must have the same length")
        self._ids = list(region_ids)
        self._geometries = list(geometries)
        self._tree = STRtree(self._geometries)

    @classmethod
    def from_geojson(cls, document: dict, id_property: str = DEFAULT_ID_PROPERTY) -> BoundaryIndex:
        region_ids: list[str] = []
        geometries = []
        for feature in document.get("features", []):
            props = feature.get("properties") or {}
            region_id = props.get(id_property) or feature.get("id")
            geom = feature.get("geometry")
            if not region_id or region_id == MISSING_ID or not geom:
                continue
            region_ids.append(str(region_id))
            geometries.append(shape(geom))
        return cls(region_ids, geometries)

    def __len__(self) -> int:
        return len(self._ids)

    def region_ids_for(self, lat: float, lon: float) -> set[str]:
        """Return ids of every region whose polygon covers the point."""
        hits = self._tree.query(Point(lon, lat), predicate="covered_by")
        return {self._ids[i] for i in hits}


def load_boundaries(
    path: str | Path | None = None,
    id_property: str = DEFAULT_ID_PROPERTY,
) -> BoundaryIndex:
    """Parse a GeoJSON FeatureCollection into a :class:`BoundaryIndex`.

    Raises:
        BoundaryDatasetError: file missing, not JSON, or bad geometry.
    """
    source = Path(path) if path else DEFAULT_BOUNDARIES_PATH
    try:
        document = json.loads(source.read_text(encoding="utf-8"))
        index = BoundaryIndex.from_geojson(document, id_property=id_property)
    except (OSError, ValueError, TypeError, KeyError, AttributeError, ShapelyError) as exc:
        raise BoundaryDatasetError(f"Failed to load boundaries from {source}: {exc}") from exc

    logger.info("Loaded %d region boundaries from %s", len(index), source)
    return index


@lru_cache(maxsize=None)
def get_boundaries(
    path: str | None = None,
    id_property: str = DEFAULT_ID_PROPERTY,
) -> BoundaryIndex:
    """Process-wide boundary index, loaded on first use and then shared."""
    return load_boundaries(path, id_property=id_property)
