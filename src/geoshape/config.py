# -*- coding: utf-8 -*-

"""
geoshape/config.py

Central place for the constants used across geoshape. Keeping them here
keeps the codecs, the geodesic helpers and the subdivider consistent with
each other.

Contents:
---------
1. GEODESIC:
   - Ellipsoid handed to `pyproj.Geod` for distances and areas.

2. WKT_OUTPUT:
   - Options forwarded to `shapely.wkt.dumps`. Full precision with trailing
     zeros trimmed so that WKT -> Polygon -> WKT keeps every coordinate.

3. SUBDIVISION:
   - Guards that force `divide` to terminate when the requested tile area
     cannot be reached (tiny thresholds, degenerate boxes).

4. LOGGING:
   - Console format and default level used by the `geoshape` command.

Usage:
------
    from geoshape.config import SUBDIVISION

    SUBDIVISION["max_depth"]   # -> 24

Keyword arguments at call sites always win over these defaults.
"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) GEODESIC MODEL
# ───────────────────────────────────────────────────────────────────────────────
GEODESIC = {
    'ellps': 'WGS84',           # reference ellipsoid for pyproj.Geod
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) WKT ENCODING
# ───────────────────────────────────────────────────────────────────────────────
WKT_OUTPUT = {
    'trim': True,               # drop trailing zeros ("1" not "1.0000000000000000")
    'rounding_precision': -1,   # -1 = no rounding
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) SUBDIVISION GUARDS
# ───────────────────────────────────────────────────────────────────────────────
SUBDIVISION = {
    'max_depth': 24,            # bisections along any branch (<= 2**24 tiles)
    'min_tile_area_km2': 1e-6,  # 1 m²; boxes this small are emitted as-is
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) LOGGING
# ───────────────────────────────────────────────────────────────────────────────
LOGGING = {
    'format': '[%(levelname)s] %(message)s',
    'level': 'INFO',
}
