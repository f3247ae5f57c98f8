from __future__ import annotations

import asyncio
from abc import ABCMeta, abstractmethod
from typing import Iterable, List, Optional

from uriproj.cache.projection_cache import ProjectionCache
from uriproj.projections.projection_interface import ProjectionInterface
from uriproj.projections.source import ProjectionSource


class ResolverInterface(metaclass=ABCMeta):
    """
    Abstract base class for turning CRS URIs into projections.

    A resolver owns a ProjectionCache. get and set work on the cache directly;
    load serves cached projections and resolves the others from some source
    (subclasses decide which).

    Attributes:
        cache: The ProjectionCache holding every projection known to this resolver
    """

    cache: ProjectionCache

    @abstractmethod
    async def load(self, uri: str) -> ProjectionInterface:
        """
        Return the projection for a URI, resolving and caching it if needed.

        Args:
            uri: The CRS URI

        Returns:
            The projection for the URI
        """

    async def load_many(self, uris: Iterable[str]) -> List[ProjectionInterface]:
        """
        Load several projections concurrently.

        Args:
            uris: The CRS URIs to load

        Returns:
            The projections, in the order of uris

        Raises:
            UriProjError: The first error raised by any of the loads

        Examples:
            >>> projs = await resolver.load_many([
            ...     'http://www.opengis.net/def/crs/EPSG/0/27700',
            ...     'http://www.opengis.net/def/crs/EPSG/0/7376',
            ... ])
        """
        return list(await asyncio.gather(*(self.load(uri) for uri in uris)))

    def get(self, uri: str) -> Optional[ProjectionInterface]:
        """Return the cached projection for a URI, or None. Never fetches."""
        return self.cache.get(uri)

    def set(
        self, uri: str, source: ProjectionSource, reverse_axes: bool = False
    ) -> ProjectionInterface:
        """Store a projection for a URI. See ProjectionCache.set."""
        return self.cache.set(uri, source, reverse_axes=reverse_axes)
