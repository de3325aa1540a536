"""
geomath.py

Thin layer over the geometry libraries. Everything the typed wrappers need
from the outside world goes through here:

- `decode_binary(hex_string)` / `decode_text(wkt_string)` -> shapely geometry
- `encode_text(geometry)` / `encode_geojson(geometry)`
- `bounding_box(geometry)` -> `Bound`
- `planar_centroid_area(geometry)` -> (centroid geometry, area)
- `geodesic_distance(a, b)` / `geodesic_length(a, b)` -> metres
- `geodesic_area(bound)` -> square metres

Codecs and planar math come from shapely; geodesic math comes from
`pyproj.Geod` on the ellipsoid named in `config.GEODESIC`.
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple
import logging
import math

from pyproj import Geod
from shapely import wkb, wkt
from shapely.errors import GEOSException
from shapely.geometry import Polygon as ShapelyPolygon, mapping
from shapely.geometry.base import BaseGeometry

from geoshape.config import GEODESIC, WKT_OUTPUT
from geoshape.errors import DecodeError

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]

_GEOD = Geod(**GEODESIC)


@dataclass(frozen=True)
class Bound:
    """Axis-aligned rectangle between two (lon, lat) corners."""

    min: Coordinate
    max: Coordinate

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry) -> 'Bound':
        if geometry.is_empty:
            raise ValueError(f'empty {geometry.geom_type} has no bounds')
        minx, miny, maxx, maxy = geometry.bounds
        return cls((float(minx), float(miny)), (float(maxx), float(maxy)))

    @property
    def width(self) -> float:
        return self.max[0] - self.min[0]

    @property
    def height(self) -> float:
        return self.max[1] - self.min[1]

    @property
    def center(self) -> Coordinate:
        return ((self.min[0] + self.max[0]) / 2, (self.min[1] + self.max[1]) / 2)

    def corners(self):
        """Counter-clockwise corners starting at `min` (ring left open)."""
        return [
            self.min,
            (self.max[0], self.min[1]),
            self.max,
            (self.min[0], self.max[1]),
        ]

    def to_polygon(self) -> ShapelyPolygon:
        """Closed rectangular polygon: min, (maxx, miny), max, (minx, maxy), min."""
        ring = self.corners()
        ring.append(self.min)
        return ShapelyPolygon(ring)


def decode_binary(hex_string: str) -> BaseGeometry:
    """Decode a hex-encoded WKB payload.

    Raises `DecodeError` for bad hex as well as for bytes that are not WKB.
    """
    try:
        payload = bytes.fromhex(hex_string)
    except (TypeError, ValueError) as e:
        raise DecodeError(f'invalid hex payload: {e}') from e
    try:
        geometry = wkb.loads(payload)
    except (GEOSException, TypeError, ValueError) as e:
        raise DecodeError(f'invalid WKB payload: {e}') from e
    logger.debug('decoded %d WKB bytes into %s', len(payload), geometry.geom_type)
    return geometry


def decode_text(wkt_string: str) -> BaseGeometry:
    """Decode a WKT string. Raises `DecodeError` on malformed text."""
    try:
        geometry = wkt.loads(wkt_string)
    except (GEOSException, TypeError, ValueError) as e:
        raise DecodeError(f'invalid WKT payload: {e}') from e
    logger.debug('decoded WKT into %s', geometry.geom_type)
    return geometry


def encode_text(geometry: BaseGeometry) -> str:
    return wkt.dumps(geometry, **WKT_OUTPUT)


def encode_geojson(geometry: BaseGeometry) -> Dict[str, Any]:
    """GeoJSON-style mapping with `type` and `coordinates` keys."""
    return dict(mapping(geometry))


def bounding_box(geometry: BaseGeometry) -> Bound:
    return Bound.from_geometry(geometry)


def planar_centroid_area(geometry: BaseGeometry) -> Tuple[BaseGeometry, float]:
    """Centroid and area treating lon/lat as flat cartesian values.

    Area is in squared coordinate units (degrees²), not metres.
    """
    return geometry.centroid, float(geometry.area)


def geodesic_distance(a: Coordinate, b: Coordinate) -> float:
    """Ellipsoidal distance in metres between two (lon, lat) positions."""
    _, _, dist = _GEOD.inv(a[0], a[1], b[0], b[1])
    return float(dist)


def geodesic_length(a: Coordinate, b: Coordinate) -> float:
    """Distance in metres from `a` to `b` without wrapping the antimeridian.

    Spans of 180° of longitude or more are measured as two halves, so a
    bound edge from -180 to 180 keeps its full length.
    """
    if abs(b[0] - a[0]) < 180.0:
        return geodesic_distance(a, b)
    mid = ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)
    return geodesic_length(a, mid) + geodesic_length(mid, b)


def geodesic_area(bound: Bound) -> float:
    """Ellipsoidal area of `bound` in square metres (always >= 0).

    The bound is the region between two meridians and two parallels, so the
    area is the closed-form band area scaled by the longitude span. Spans of
    180° or more are handled like any other.
    """
    dlon = math.radians(abs(bound.width))
    band = _authalic(bound.max[1]) - _authalic(bound.min[1])
    return abs(dlon * _GEOD.b ** 2 * band)


def _authalic(lat: float) -> float:
    """Area from the equator to `lat` per radian of longitude, over b²."""
    s = math.sin(math.radians(lat))
    es = _GEOD.es
    if es == 0:
        return s
    e = math.sqrt(es)
    return s / (2 * (1 - es * s * s)) + math.log((1 + e * s) / (1 - e * s)) / (4 * e)
