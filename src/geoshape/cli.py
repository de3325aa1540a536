"""
Command line entry point for geoshape.

usage:
    geoshape info "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))"
    geoshape divide "POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))" --max-area 5000
    echo 0103000000... | geoshape divide - --input-format wkb --max-area 100 --output geojson
"""
import argparse
import json
import logging
import sys

from geoshape.config import LOGGING
from geoshape.errors import GeometryError, GeometryTypeError
from geoshape.point import POINT_TYPES, Point
from geoshape.polygon import AREA_TYPES, Polygon

log = logging.getLogger('geoshape')


def configure_logging(verbose=False):
    # avoid duplicate handlers on repeated main()
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(LOGGING['format']))
        log.addHandler(h)
    log.setLevel(logging.DEBUG if verbose else LOGGING['level'])


def build_parser():
    parser = argparse.ArgumentParser(prog='geoshape', description='Inspect and tile WKT/WKB geometries')
    parser.add_argument('--verbose', dest='verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    def add_geometry_args(p):
        p.add_argument('geometry', help="WKT text or hex WKB; '-' reads stdin")
        p.add_argument('--input-format', dest='input_format', choices=('wkt', 'wkb'), default='wkt',
                       help='Encoding of GEOMETRY (default: wkt)')

    info = sub.add_parser('info', help='Print type, centroid, area and bound')
    add_geometry_args(info)

    divide = sub.add_parser('divide', help='Tile the bounding box into pieces of at most --max-area km²')
    add_geometry_args(divide)
    divide.add_argument('--max-area', dest='max_area', type=float, required=True, help='Maximum tile area (km²)')
    divide.add_argument('--max-depth', dest='max_depth', type=int, default=None, help='Maximum bisection depth')
    divide.add_argument('--min-tile-area', dest='min_tile_area', type=float, default=None,
                        help='Never split boxes at or below this area (km²)')
    divide.add_argument('--output', choices=('wkt', 'geojson'), default='wkt', help='Tile encoding (default: wkt)')
    return parser


def _read_geometry(args):
    text = sys.stdin.read() if args.geometry == '-' else args.geometry
    return text.strip()


def _load(cls, text, input_format):
    if input_format == 'wkb':
        return cls.from_wkb(text)
    return cls.from_wkt(text)


def cmd_info(args, out):
    text = _read_geometry(args)
    try:
        shape = _load(Polygon, text, args.input_format)
    except GeometryTypeError:
        try:
            shape = _load(Point, text, args.input_format)
        except GeometryTypeError as e:
            raise GeometryTypeError(POINT_TYPES + AREA_TYPES, e.actual) from None

    bound = shape.bound()
    out.write(f'type: {shape.geojson_type}\n')
    if isinstance(shape, Polygon):
        out.write(f'area: {shape.area!r}\n')
        out.write(f'centroid: {shape.centroid.to_wkt()}\n')
    else:
        out.write(f'coordinates: {shape.lon!r} {shape.lat!r}\n')
    out.write(f'bound: {bound.min[0]!r} {bound.min[1]!r} {bound.max[0]!r} {bound.max[1]!r}\n')


def cmd_divide(args, out):
    polygon = _load(Polygon, _read_geometry(args), args.input_format)
    tiles = polygon.divide(args.max_area, max_depth=args.max_depth, min_tile_area_km2=args.min_tile_area)
    log.info('%d tiles', len(tiles))

    if args.output == 'geojson':
        collection = {
            'type': 'FeatureCollection',
            'features': [
                {'type': 'Feature', 'properties': {'index': i}, 'geometry': tile.to_geojson()}
                for i, tile in enumerate(tiles)
            ],
        }
        json.dump(collection, out)
        out.write('\n')
        return
    for tile in tiles:
        out.write(tile.to_wkt() + '\n')


COMMANDS = {
    'info': cmd_info,
    'divide': cmd_divide,
}


def main(argv=None, out=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    out = out or sys.stdout
    try:
        COMMANDS[args.command](args, out)
    except GeometryError as e:
        log.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
