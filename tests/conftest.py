import pytest
from shapely.geometry import box

from geoshape import geomath
from geoshape.polygon import Polygon

UNIT_SQUARE_WKT = "POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))"


@pytest.fixture
def unit_square():
    return Polygon.from_wkt(UNIT_SQUARE_WKT)


@pytest.fixture
def degree_box():
    """1° x 1° box sitting on the equator at the prime meridian."""
    return Polygon.from_shapely(box(0.0, 0.0, 1.0, 1.0))


@pytest.fixture
def degree_box_km2(degree_box):
    return geomath.geodesic_area(degree_box.bound()) / 1_000_000
