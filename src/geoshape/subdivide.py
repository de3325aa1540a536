"""
subdivide.py

Area-bounded tiling of a polygon's bounding box.

`divide(polygon, max_area_km2)` bisects the bounding box along its longer
geodesic side until every piece covers at most `max_area_km2` square
kilometres, and returns the pieces as rectangular `Polygon` tiles.

Notes:
- Tiles cover the bounding box, not the polygon outline. A concave or
  irregular input is replaced by its enclosing rectangle before tiling.
- Output order is depth-first: all tiles of the first half (left/bottom)
  before all tiles of the second half (right/top).
- Recursion is capped by `max_depth` and by `min_tile_area_km2` (defaults in
  `config.SUBDIVISION`); boxes stopped by either guard are emitted as-is.
"""
from typing import List, Optional, Tuple
import logging
import math
import numbers

from geoshape import geomath
from geoshape.config import SUBDIVISION
from geoshape.errors import SubdivisionError
from geoshape.geomath import Bound
from geoshape.polygon import Polygon

logger = logging.getLogger(__name__)

M2_PER_KM2 = 1_000_000


def divide(polygon: Polygon, max_area_km2: float, *, max_depth: Optional[int] = None,
           min_tile_area_km2: Optional[float] = None) -> List[Polygon]:
    """Split `polygon`'s bounding box into tiles of at most `max_area_km2`.

    Parameters:
    - polygon: the `Polygon` whose bounding box is tiled.
    - max_area_km2: target geodesic tile area in km². Must be > 0; `inf`
      returns the bounding box as a single tile.
    - max_depth: maximum number of bisections along any branch.
    - min_tile_area_km2: boxes at or below this area are never split.

    Returns: list of `Polygon` tiles in deterministic order.

    Raises `SubdivisionError` for a non-positive/NaN threshold or invalid
    guard values.
    """
    max_area_km2 = _check_area('max_area_km2', max_area_km2, allow_zero=False)
    if max_depth is None:
        max_depth = SUBDIVISION['max_depth']
    if min_tile_area_km2 is None:
        min_tile_area_km2 = SUBDIVISION['min_tile_area_km2']
    if isinstance(max_depth, bool) or not isinstance(max_depth, numbers.Integral) or max_depth < 0:
        raise SubdivisionError(f'max_depth must be a non-negative integer, got {max_depth!r}')
    min_tile_area_km2 = _check_area('min_tile_area_km2', min_tile_area_km2, allow_zero=True)

    tiles: List[Polygon] = []
    capped = _divide(polygon.bound(), max_area_km2, int(max_depth), min_tile_area_km2, 0, tiles)
    if capped:
        logger.warning('%d of %d tiles stopped at max_depth=%d and exceed %.6g km²',
                       capped, len(tiles), max_depth, max_area_km2)
    logger.debug('divided bound into %d tiles (max %.6g km²)', len(tiles), max_area_km2)
    return tiles


def bisect(bbox: Bound) -> Tuple[Bound, Bound]:
    """Split `bbox` in two across its longer geodesic side.

    Width is measured along the southern edge and height along the western
    edge; spans of 180° or more are measured without wrapping the
    antimeridian. Ties split horizontally.
    """
    (minx, miny), (maxx, maxy) = bbox.min, bbox.max
    width = geomath.geodesic_length(bbox.min, (maxx, miny))
    height = geomath.geodesic_length(bbox.min, (minx, maxy))
    centerx, centery = bbox.center

    if width > height:
        return (
            Bound(bbox.min, (centerx, maxy)),
            Bound((centerx, miny), bbox.max),
        )
    return (
        Bound(bbox.min, (maxx, centery)),
        Bound((minx, centery), bbox.max),
    )


def _divide(bbox: Bound, max_area_km2: float, max_depth: int, min_tile_area_km2: float,
            depth: int, tiles: List[Polygon]) -> int:
    """Append the tiles for `bbox` to `tiles`; return how many hit `max_depth`."""
    area_km2 = geomath.geodesic_area(bbox) / M2_PER_KM2
    if area_km2 <= max_area_km2:
        tiles.append(_tile(bbox))
        return 0
    if area_km2 <= min_tile_area_km2:
        logger.debug('%.6g km² box at depth %d is below min_tile_area_km2, not split',
                     area_km2, depth)
        tiles.append(_tile(bbox))
        return 0
    if depth >= max_depth:
        tiles.append(_tile(bbox))
        return 1

    capped = 0
    for half in bisect(bbox):
        capped += _divide(half, max_area_km2, max_depth, min_tile_area_km2, depth + 1, tiles)
    return capped


def _tile(bbox: Bound) -> Polygon:
    return Polygon.from_shapely(bbox.to_polygon())


def _check_area(name: str, value, allow_zero: bool) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise SubdivisionError(f'{name} must be a number, got {value!r}')
    value = float(value)
    if math.isnan(value) or value < 0 or (value == 0 and not allow_zero):
        bound = '>= 0' if allow_zero else '> 0'
        raise SubdivisionError(f'{name} must be {bound}, got {value!r}')
    return value
