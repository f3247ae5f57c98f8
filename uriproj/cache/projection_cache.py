"""In-memory store of projections keyed by CRS URI.

The cache never fetches anything; it only stores what it is given. Entries are
never evicted and live as long as the cache object.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from uriproj.projections.axis_order import reverse_axes as reverse_projection_axes
from uriproj.projections.projection_interface import ProjectionInterface
from uriproj.projections.pyproj_projection import PyprojProjection
from uriproj.projections.source import ProjectionSource, TextDefinition, to_projection
from uriproj.utils.crs import CRS84_URI, EPSG4979_URI, WGS84_PROJ4
from uriproj.utils.exceptions import InvalidArgument

log = logging.getLogger(__name__)


class ProjectionCache:
    """
    Mapping from CRS URI to projection.

    A new cache is seeded with the projections the registry does not provide:
    CRS84 (WGS84 lon/lat, the identity) and EPSG:4979 (WGS84 with lat/lon axes).

    Args:
        seed: Whether to store the built-in projections. Default is True.

    Examples:
        >>> cache = ProjectionCache()
        >>> cache.get('http://www.opengis.net/def/crs/EPSG/0/4979').forward((-71, 41))
        (41.0, -71.0)
        >>> cache.get('http://www.opengis.net/def/crs/EPSG/0/27700') is None
        True
    """

    def __init__(self, seed: bool = True):
        self._projections: Dict[str, ProjectionInterface] = {}

        if seed:
            lonlat = PyprojProjection.from_proj4(WGS84_PROJ4)
            self.set(CRS84_URI, lonlat)
            self.set(EPSG4979_URI, lonlat, reverse_axes=True)

    def __contains__(self, uri: object) -> bool:
        return uri in self._projections

    def __len__(self) -> int:
        return len(self._projections)

    def __repr__(self):
        return f"ProjectionCache(uris={self.uris()})"

    def uris(self) -> List[str]:
        """The URIs currently stored."""
        return list(self._projections)

    def get(self, uri: str) -> Optional[ProjectionInterface]:
        """
        Return the stored projection for a URI.

        Args:
            uri: The CRS URI

        Returns:
            The projection stored by set (or a resolver), or None if there is none
        """
        return self._projections.get(uri)

    def set(
        self, uri: str, source: ProjectionSource, reverse_axes: bool = False
    ) -> ProjectionInterface:
        """
        Store a projection for a URI, replacing any previous entry.

        Args:
            uri: The CRS URI under which to store the projection
            source: A projection, any object with forward and inverse methods,
                a TextDefinition or a PROJ.4 string. Text is parsed with pyproj.
            reverse_axes: Whether to reverse the projected axis order before storing

        Returns:
            The stored projection

        Raises:
            InvalidArgument: If uri or source is empty or None
            ParseError: If source is text that pyproj cannot parse

        Examples:
            >>> cache = ProjectionCache()
            >>> proj = cache.set(
            ...     'http://www.opengis.net/def/crs/EPSG/0/27700',
            ...     '+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 '
            ...     '+y_0=-100000 +ellps=airy +units=m +no_defs',
            ... )
        """
        if (
            not uri
            or source is None
            or (isinstance(source, str) and not source)
            or (isinstance(source, TextDefinition) and not source.text)
        ):
            raise InvalidArgument("crs_uri and proj cannot be empty")

        projection = to_projection(source)
        if reverse_axes:
            projection = reverse_projection_axes(projection)

        self._projections[uri] = projection
        log.debug("stored projection for %s", uri)

        return projection
