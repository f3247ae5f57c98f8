"""Resolve CRS URIs into projections between WGS84 and the CRS.

Module-level functions work on a default, process-wide resolver backed by
epsg.io:

    >>> import asyncio
    >>> import uriproj
    >>> proj = asyncio.run(uriproj.load('http://www.opengis.net/def/crs/EPSG/0/27700'))
    >>> easting, northing = proj.forward((-1.54, 55.5))
    >>> uriproj.get('http://www.opengis.net/def/crs/EPSG/0/27700') is proj
    True
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from uriproj.cache.projection_cache import ProjectionCache
from uriproj.projections.axis_order import reverse_axes
from uriproj.projections.projection_interface import (
    FunctionProjection,
    ProjectionInterface,
)
from uriproj.projections.pyproj_projection import PyprojProjection
from uriproj.projections.source import ProjectionSource, TextDefinition
from uriproj.resolvers.epsg_io import EpsgIoResolver
from uriproj.resolvers.resolver_interface import ResolverInterface
from uriproj.utils.exceptions import (
    HttpError,
    InvalidArgument,
    ParseError,
    UnsupportedURI,
    UriProjError,
)

__version__ = "0.1.0"

_default_resolver: Optional[EpsgIoResolver] = None


def get_default_resolver() -> EpsgIoResolver:
    """
    Get the process-wide resolver used by the module-level functions.

    Returns:
        The default EpsgIoResolver, created on first use
    """
    global _default_resolver

    if _default_resolver is None:
        _default_resolver = EpsgIoResolver()

    return _default_resolver


def get(uri: str) -> Optional[ProjectionInterface]:
    """Return the stored projection for a URI, or None. See ProjectionCache.get."""
    return get_default_resolver().get(uri)


def set(
    uri: str, source: ProjectionSource, reverse_axes: bool = False
) -> ProjectionInterface:
    """Store a projection for a URI. See ProjectionCache.set."""
    return get_default_resolver().set(uri, source, reverse_axes=reverse_axes)


async def load(uri: str) -> ProjectionInterface:
    """Return the projection for a URI, loading it if needed. See EpsgIoResolver.load."""
    return await get_default_resolver().load(uri)


async def load_many(uris: Iterable[str]) -> List[ProjectionInterface]:
    """Load several projections concurrently. See ResolverInterface.load_many."""
    return await get_default_resolver().load_many(uris)


__all__ = [
    "EpsgIoResolver",
    "FunctionProjection",
    "HttpError",
    "InvalidArgument",
    "ParseError",
    "ProjectionCache",
    "ProjectionInterface",
    "ProjectionSource",
    "PyprojProjection",
    "ResolverInterface",
    "TextDefinition",
    "UnsupportedURI",
    "UriProjError",
    "get",
    "get_default_resolver",
    "load",
    "load_many",
    "reverse_axes",
    "set",
]
