import io
import json

import pytest
from shapely.geometry import box

from geoshape import cli, geomath

SQUARE = 'POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))'


def _run(argv, stdin=None, monkeypatch=None):
    out = io.StringIO()
    if stdin is not None:
        monkeypatch.setattr('sys.stdin', io.StringIO(stdin))
    code = cli.main(argv, out=out)
    return code, out.getvalue()


def test_divide_single_tile():
    code, out = _run(['divide', SQUARE, '--max-area', '1e9'])
    assert code == 0
    assert out.splitlines() == ['POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))']


def test_divide_geojson_output():
    km2 = geomath.geodesic_area(geomath.Bound((0.0, 0.0), (1.0, 1.0))) / 1_000_000
    code, out = _run(['divide', SQUARE, '--max-area', str(km2 / 3), '--output', 'geojson'])
    assert code == 0
    fc = json.loads(out)
    assert fc['type'] == 'FeatureCollection'
    assert [f['properties']['index'] for f in fc['features']] == [0, 1, 2, 3]
    assert all(f['geometry']['type'] == 'Polygon' for f in fc['features'])


def test_divide_reads_wkb_from_stdin(monkeypatch):
    code, out = _run(['divide', '-', '--input-format', 'wkb', '--max-area', '1e9'],
                     stdin=box(0, 0, 2, 1).wkb_hex + '\n', monkeypatch=monkeypatch)
    assert code == 0
    assert out.strip() == 'POLYGON ((0 0, 2 0, 2 1, 0 1, 0 0))'


def test_divide_max_depth_flag():
    code, out = _run(['divide', SQUARE, '--max-area', '1e-9', '--max-depth', '2'])
    assert code == 0
    assert len(out.splitlines()) == 4


def test_info_polygon():
    code, out = _run(['info', SQUARE])
    assert code == 0
    assert 'type: Polygon' in out
    assert 'area: 1.0' in out
    assert 'centroid: POINT (0.5 0.5)' in out
    assert 'bound: 0.0 0.0 1.0 1.0' in out


def test_info_point():
    code, out = _run(['info', 'POINT (3 4)'])
    assert code == 0
    assert 'type: Point' in out
    assert 'coordinates: 3.0 4.0' in out


@pytest.mark.parametrize('argv', [
    ['info', 'LINESTRING (0 0, 1 1)'],
    ['info', 'POINT (1'],
    ['divide', 'POINT (1 1)', '--max-area', '10'],
    ['divide', SQUARE, '--max-area', '-5'],
    ['divide', 'zz', '--input-format', 'wkb', '--max-area', '10'],
])
def test_errors_exit_one(argv, caplog):
    code, out = _run(argv)
    assert code == 1
    assert out == ''
    assert any(r.levelname == 'ERROR' for r in caplog.records)


def test_missing_max_area_is_usage_error():
    with pytest.raises(SystemExit) as info:
        cli.main(['divide', SQUARE])
    assert info.value.code == 2
