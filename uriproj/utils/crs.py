"""CRS URI constants used throughout uriproj.

This module defines the URI prefixes understood by the resolvers and the
built-in CRS URIs:
- CRS84_URI: WGS84 geographic coordinates in longitude/latitude order
- EPSG4326_URI: WGS84 geographic coordinates in latitude/longitude order
- EPSG4979_URI: WGS84 geographic 3D coordinates in latitude/longitude order
"""

ROOT_PREFIX = "http://www.opengis.net/def/crs/"
OGC_PREFIX = ROOT_PREFIX + "OGC/"
EPSG_PREFIX = ROOT_PREFIX + "EPSG/0/"

CRS84_URI = OGC_PREFIX + "1.3/CRS84"
EPSG4326_URI = EPSG_PREFIX + "4326"
EPSG4979_URI = EPSG_PREFIX + "4979"

# WGS84 longitude/latitude, the geographic side of every projection
WGS84_PROJ4 = "+proj=longlat +datum=WGS84 +no_defs"

# The registry always returns lon/lat definitions, even for CRSs that are
# defined with lat/lon axis order. Projections loaded for these URIs get their
# axes swapped.
NEEDS_AXES_REORDERING = frozenset(
    [
        EPSG4326_URI,
    ]
)
