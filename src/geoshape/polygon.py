"""
polygon.py

`Polygon`: a validated area geometry (Polygon or MultiPolygon) with its
planar centroid and area computed once, at construction.

Constructors:
- `Polygon.from_wkb(hex_string)`: also accepts a GeometryCollection, which
  is replaced by its bounding rectangle before centroid/area are computed.
- `Polygon.from_wkt(wkt_string)`
- `Polygon.from_shapely(geometry)`
- `Polygon.from_planar_points(points)`: single exterior ring from `Point`s,
  closed automatically when the first and last points differ.

Only `from_wkb` has the GeometryCollection fallback; the other paths reject
anything that is not a non-empty 2D Polygon/MultiPolygon with
`GeometryTypeError`.
"""
from typing import List, Sequence
import logging

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from geoshape import geomath
from geoshape.errors import GeometryTypeError
from geoshape.point import Point
from geoshape.shape import Shape, describe

logger = logging.getLogger(__name__)

AREA_TYPES = ('Polygon', 'MultiPolygon')


class Polygon(Shape):
    __slots__ = ('_centroid', '_area')

    def __init__(self, geometry: BaseGeometry, centroid: Point, area: float):
        super().__init__(geometry)
        self._centroid = centroid
        self._area = area

    @classmethod
    def from_wkb(cls, hex_string: str) -> 'Polygon':
        geometry = geomath.decode_binary(hex_string)
        if geometry.geom_type == 'GeometryCollection':
            if geometry.is_empty:
                raise GeometryTypeError(AREA_TYPES, describe(geometry))
            logger.debug('GeometryCollection of %d parts replaced by its bounding box',
                         len(geometry.geoms))
            geometry = geomath.bounding_box(geometry).to_polygon()
        return cls.from_shapely(geometry)

    @classmethod
    def from_wkt(cls, wkt_string: str) -> 'Polygon':
        return cls.from_shapely(geomath.decode_text(wkt_string))

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> 'Polygon':
        if not is_polygon(geometry):
            raise GeometryTypeError(AREA_TYPES, describe(geometry))
        centroid, area = geomath.planar_centroid_area(geometry)
        return cls(geometry, Point.from_shapely(centroid), area)

    @classmethod
    def from_planar_points(cls, points: Sequence[Point]) -> 'Polygon':
        """Build a one-ring polygon from `points`, closing the ring if needed.

        Raises ValueError for an empty sequence or a ring with fewer than
        four positions once closed.
        """
        points = list(points)
        if not points:
            raise ValueError('a ring needs at least one point')
        ring = [p.coords for p in points]
        if points[0] != points[-1]:
            ring.append(points[0].coords)
        if len(ring) < 4:
            raise ValueError(f'a closed ring needs at least 4 positions, got {len(ring)}')
        return cls.from_shapely(ShapelyPolygon(ring))

    @property
    def centroid(self) -> Point:
        return self._centroid

    @property
    def area(self) -> float:
        """Planar area in squared coordinate units (degrees²)."""
        return self._area

    def divide(self, max_area_km2: float, **options) -> List['Polygon']:
        """Tile this polygon's bounding box, see `geoshape.subdivide.divide`."""
        from geoshape.subdivide import divide
        return divide(self, max_area_km2, **options)


def is_polygon(geometry: BaseGeometry) -> bool:
    return geometry.geom_type in AREA_TYPES and not geometry.is_empty and not geometry.has_z
