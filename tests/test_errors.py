import pytest

from geoshape.errors import DecodeError, GeometryError, GeometryTypeError, SubdivisionError


def test_geometry_type_error_carries_expected_and_actual():
    err = GeometryTypeError(('Polygon', 'MultiPolygon'), 'LineString')
    assert err.expected == ('Polygon', 'MultiPolygon')
    assert err.actual == 'LineString'
    assert str(err).startswith('failed geometry type')
    assert 'Polygon or MultiPolygon' in str(err)
    assert 'LineString' in str(err)


@pytest.mark.parametrize('cls', [DecodeError, GeometryTypeError, SubdivisionError])
def test_errors_share_base_and_value_error(cls):
    assert issubclass(cls, GeometryError)
    assert issubclass(cls, ValueError)


def test_decode_and_type_errors_are_distinct():
    assert not issubclass(DecodeError, GeometryTypeError)
    assert not issubclass(GeometryTypeError, DecodeError)
