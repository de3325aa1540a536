"""geoshape: typed Point/Polygon wrappers over WKB/WKT plus area-bounded tiling."""
from geoshape.errors import DecodeError, GeometryError, GeometryTypeError, SubdivisionError
from geoshape.geomath import Bound
from geoshape.point import Point
from geoshape.polygon import Polygon
from geoshape.subdivide import bisect, divide

__all__ = [
    'Bound',
    'DecodeError',
    'GeometryError',
    'GeometryTypeError',
    'Point',
    'Polygon',
    'SubdivisionError',
    'bisect',
    'divide',
]
