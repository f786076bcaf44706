"""Typed records for the USGS FDSN GeoJSON response."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _ms_to_datetime(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


@dataclass(frozen=True)
class Geometry:
    """Point geometry in ``[longitude, latitude, depth]`` order.

    A null GeoJSON geometry decodes to empty coordinates.
    """

    type: str
    coordinates: tuple[float, ...]

    @classmethod
    def from_geojson(cls, geometry: dict | None) -> Geometry:
        geometry = geometry or {}
        return cls(
            type=geometry.get("type") or "Point",
            coordinates=tuple(float(c) for c in geometry.get("coordinates") or ()),
        )

    @property
    def longitude(self) -> float | None:
        return self.coordinates[0] if len(self.coordinates) > 0 else None

    @property
    def latitude(self) -> float | None:
        return self.coordinates[1] if len(self.coordinates) > 1 else None

    @property
    def depth(self) -> float | None:
        return self.coordinates[2] if len(self.coordinates) > 2 else None


@dataclass(frozen=True)
class Properties:
    """Descriptive fields of one event.

    Every field is optional: upstream completeness varies per network.
    """

    mag: float | None = None
    place: str | None = None
    time: int | None = None
    updated: int | None = None
    tz: int | None = None
    url: str | None = None
    detail: str | None = None
    felt: int | None = None
    cdi: float | None = None
    mmi: float | None = None
    alert: str | None = None
    status: str | None = None
    tsunami: int | None = None
    sig: int | None = None
    net: str | None = None
    code: str | None = None
    ids: str | None = None
    sources: str | None = None
    types: str | None = None
    nst: int | None = None
    dmin: float | None = None
    rms: float | None = None
    gap: float | None = None
    mag_type: str | None = None
    event_type: str | None = None
    title: str | None = None

    @classmethod
    def from_geojson(cls, props: dict | None) -> Properties:
        props = props or {}
        return cls(
            mag=props.get("mag"),
            place=props.get("place"),
            time=props.get("time"),
            updated=props.get("updated"),
            tz=props.get("tz"),
            url=props.get("url"),
            detail=props.get("detail"),
            felt=props.get("felt"),
            cdi=props.get("cdi"),
            mmi=props.get("mmi"),
            alert=props.get("alert"),
            status=props.get("status"),
            tsunami=props.get("tsunami"),
            sig=props.get("sig"),
            net=props.get("net"),
            code=props.get("code"),
            ids=props.get("ids"),
            sources=props.get("sources"),
            types=props.get("types"),
            nst=props.get("nst"),
            dmin=props.get("dmin"),
            rms=props.get("rms"),
            gap=props.get("gap"),
            mag_type=props.get("magType"),
            event_type=props.get("type"),
            title=props.get("title"),
        )

    @property
    def origin_time(self) -> datetime | None:
        return _ms_to_datetime(self.time)

    @property
    def updated_time(self) -> datetime | None:
        return _ms_to_datetime(self.updated)


@dataclass(frozen=True)
class Event:
    """A single earthquake feature."""

    id: str
    feature_type: str
    geometry: Geometry
    properties: Properties

    @classmethod
    def from_geojson_feature(cls, feature: dict) -> Event:
        return cls(
            id=feature["id"],
            feature_type=feature.get("type") or "Feature",
            geometry=Geometry.from_geojson(feature.get("geometry")),
            properties=Properties.from_geojson(feature.get("properties")),
        )

    @property
    def longitude(self) -> float | None:
        return self.geometry.longitude

    @property
    def latitude(self) -> float | None:
        return self.geometry.latitude

    @property
    def depth(self) -> float | None:
        return self.geometry.depth

    @property
    def magnitude(self) -> float | None:
        return self.properties.mag


@dataclass
class Metadata:
    """Response metadata. ``count`` is rewritten after country filtering."""

    generated: int
    url: str
    title: str
    status: int
    api: str
    count: int

    @classmethod
    def from_geojson(cls, metadata: dict) -> Metadata:
        return cls(
            generated=metadata["generated"],
            url=metadata["url"],
            title=metadata["title"],
            status=metadata["status"],
            api=metadata["api"],
            count=metadata["count"],
        )

    @property
    def generated_time(self) -> datetime:
        return _ms_to_datetime(self.generated)


@dataclass
class EventSet:
    """Decoded FeatureCollection returned by the event query endpoint."""

    type: str
    metadata: Metadata
    features: list[Event] = field(default_factory=list)
    bbox: list[float] | None = None

    @classmethod
    def from_geojson(cls, data: dict) -> EventSet:
        return cls(
            type=data["type"],
            metadata=Metadata.from_geojson(data["metadata"]),
            features=[Event.from_geojson_feature(f) for f in data["features"]],
            bbox=data.get("bbox"),
        )
