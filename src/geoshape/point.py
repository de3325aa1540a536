"""
point.py

`Point`: a validated single (lon, lat) position.

Constructors:
- `Point.from_wkb(hex_string)`
- `Point.from_wkt(wkt_string)`
- `Point.from_shapely(geometry)`

All three raise `GeometryTypeError` when the input is not a single,
non-empty, two-dimensional point. The two text/binary constructors additionally raise
`DecodeError` when the payload cannot be parsed.
"""
from shapely.geometry.base import BaseGeometry

from geoshape import geomath
from geoshape.errors import GeometryTypeError
from geoshape.shape import Shape, describe

POINT_TYPES = ('Point',)


class Point(Shape):
    __slots__ = ()

    @classmethod
    def from_wkb(cls, hex_string: str) -> 'Point':
        return cls.from_shapely(geomath.decode_binary(hex_string))

    @classmethod
    def from_wkt(cls, wkt_string: str) -> 'Point':
        return cls.from_shapely(geomath.decode_text(wkt_string))

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> 'Point':
        if not is_point(geometry):
            raise GeometryTypeError(POINT_TYPES, describe(geometry))
        return cls(geometry)

    @property
    def lon(self) -> float:
        return float(self._geometry.x)

    @property
    def lat(self) -> float:
        return float(self._geometry.y)

    @property
    def coords(self) -> geomath.Coordinate:
        return (self.lon, self.lat)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.coords == other.coords

    def __hash__(self):
        return hash(self.coords)


def is_point(geometry: BaseGeometry) -> bool:
    return geometry.geom_type in POINT_TYPES and not geometry.is_empty and not geometry.has_z

