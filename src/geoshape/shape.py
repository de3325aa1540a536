"""Shared base for the typed geometry wrappers.

A `Shape` holds a shapely geometry and forwards the handful of
capabilities every wrapper exposes (type name, dimensions, bound and the
two encoders). Subclasses add their own validated constructors.
"""
from typing import Any, Dict

import shapely
from shapely.geometry.base import BaseGeometry

from geoshape import geomath
from geoshape.geomath import Bound


class Shape:
    __slots__ = ('_geometry',)

    def __init__(self, geometry: BaseGeometry):
        self._geometry = geometry

    @property
    def geometry(self) -> BaseGeometry:
        """The wrapped shapely geometry."""
        return self._geometry

    @property
    def geojson_type(self) -> str:
        return self._geometry.geom_type

    @property
    def dimensions(self) -> int:
        return int(shapely.get_dimensions(self._geometry))

    def bound(self) -> Bound:
        return geomath.bounding_box(self._geometry)

    def to_wkt(self) -> str:
        return geomath.encode_text(self._geometry)

    def to_geojson(self) -> Dict[str, Any]:
        return geomath.encode_geojson(self._geometry)

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        return self.to_geojson()

    def __repr__(self):
        return f'{type(self).__name__}({self.to_wkt()!r})'


def describe(geometry: BaseGeometry) -> str:
    """Type name used in error messages, flagging empty and 3D geometries."""
    if geometry.is_empty:
        return f'empty {geometry.geom_type}'
    if geometry.has_z:
        return f'{geometry.geom_type} Z'
    return geometry.geom_type
