from __future__ import annotations

import asyncio
import logging
from typing import Collection, Dict, Optional

import requests

from uriproj.cache.projection_cache import ProjectionCache
from uriproj.projections.projection_interface import ProjectionInterface
from uriproj.projections.source import TextDefinition
from uriproj.resolvers.resolver_interface import ResolverInterface
from uriproj.utils.crs import NEEDS_AXES_REORDERING
from uriproj.utils.exceptions import HttpError
from uriproj.utils.uri import crs_uri_to_epsg
from uriproj.utils.url import registry_url

log = logging.getLogger(__name__)

DEFAULT_REGISTRY_ADDRESS = "http://epsg.io"


class EpsgIoResolver(ResolverInterface):
    """
    Resolver that loads EPSG projections as PROJ.4 strings from epsg.io.

    Cached URIs are served without touching the network. Any other URI must be an
    OGC EPSG URI (http://www.opengis.net/def/crs/EPSG/0/<code>); its PROJ.4
    definition is fetched from <registry_url>/<code>.proj4, parsed with pyproj,
    axis-corrected if the URI is listed in axes_reordering, and cached.

    Concurrent loads of the same uncached URI share a single request.

    Args:
        cache: The ProjectionCache to use. Default is a new, seeded cache.
        registry_url: The base URL of the registry. Default is http://epsg.io
        session: A requests.Session (or anything with a compatible get method)
            used for fetching. Default is the requests module itself.
        timeout: Request timeout in seconds passed to requests. Default is None (no timeout).
        axes_reordering: URIs whose projected axes must be swapped after loading.
            Default is NEEDS_AXES_REORDERING.

    Attributes:
        cache: The ProjectionCache this resolver reads and fills

    Examples:
        >>> import asyncio
        >>> from uriproj.resolvers.epsg_io import EpsgIoResolver
        >>>
        >>> resolver = EpsgIoResolver()
        >>> proj = asyncio.run(resolver.load('http://www.opengis.net/def/crs/EPSG/0/27700'))
        >>> easting, northing = proj.forward((-1.54, 55.5))
    """

    def __init__(
        self,
        cache: Optional[ProjectionCache] = None,
        registry_url: str = DEFAULT_REGISTRY_ADDRESS,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        axes_reordering: Collection[str] = NEEDS_AXES_REORDERING,
    ):
        self.cache = cache if cache is not None else ProjectionCache()
        self.registry_url = registry_url
        self.session = session
        self.timeout = timeout
        self.axes_reordering = frozenset(axes_reordering)

        self._pending: Dict[str, asyncio.Task] = {}

    async def load(self, uri: str) -> ProjectionInterface:
        """
        Return the projection for a URI, loading it from the registry if not cached.

        A cached projection is returned without suspending. On failure the cache
        is left unchanged.

        Args:
            uri: The CRS URI

        Returns:
            The cached or newly loaded projection

        Raises:
            UnsupportedURI: If the URI is not cached and is not an EPSG URI
            HttpError: If the registry answers with a non-success status
            ParseError: If the returned PROJ.4 string cannot be parsed
        """
        projection = self.cache.get(uri)
        if projection is not None:
            log.debug("cache hit for %s", uri)
            return projection

        code = crs_uri_to_epsg(uri)

        loop = asyncio.get_running_loop()
        pending = self._pending.get(uri)
        if pending is None or pending.get_loop() is not loop:
            pending = loop.create_task(self._load_remote(uri, code))
            self._pending[uri] = pending
            pending.add_done_callback(lambda task: self._forget(uri, task))
        else:
            log.debug("joining in-flight request for %s", uri)

        # a cancelled caller must not cancel the request other callers wait on
        return await asyncio.shield(pending)

    def _forget(self, uri: str, task: asyncio.Task) -> None:
        if self._pending.get(uri) is task:
            del self._pending[uri]

    async def _load_remote(self, uri: str, code: str) -> ProjectionInterface:
        definition = await asyncio.to_thread(self.fetch_definition, code)

        if uri in self.cache:
            log.warning("replacing projection for %s stored while loading", uri)

        return self.cache.set(
            uri, TextDefinition(definition), reverse_axes=uri in self.axes_reordering
        )

    def fetch_definition(self, code: str) -> str:
        """
        Fetch the PROJ.4 definition of an EPSG code from the registry.

        This is a blocking call; load runs it in a worker thread.

        Args:
            code: The EPSG code, e.g. '27700'

        Returns:
            The response body, a PROJ.4 string

        Raises:
            HttpError: If the registry answers with a non-success status
        """
        url = registry_url(self.registry_url, code)
        log.info("fetching proj4 definition from %s", url)

        client = self.session if self.session is not None else requests
        r = client.get(url, timeout=self.timeout)

        if not (requests.codes.ok <= r.status_code < requests.codes.multiple_choices):
            raise HttpError(r.status_code, url=url, response=r)

        return r.text
