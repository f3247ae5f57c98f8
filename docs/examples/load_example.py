"""
# Loading Example

An example of resolving CRS URIs into projections with uriproj
"""


def main():
    import asyncio

    import uriproj

    """
    A few projections are built in and can be used straight away, without any network access.
    CRS84 is WGS84 in longitude/latitude order, so its projection is the identity:
    """

    crs84 = uriproj.get("http://www.opengis.net/def/crs/OGC/1.3/CRS84")
    print(crs84.forward((-71, 41)))

    """
    EPSG:4979 is also WGS84, but its axes are in latitude/longitude order.
    Projections always take (longitude, latitude) on the geographic side, and return coordinates in the order of the CRS:
    """

    epsg4979 = uriproj.get("http://www.opengis.net/def/crs/EPSG/0/4979")
    print(epsg4979.forward((-71, 41)))

    """
    Any other EPSG CRS is loaded from epsg.io the first time it is requested.
    `load` is a coroutine; once loaded, the projection is cached and `get` returns it directly:
    """

    bng_uri = "http://www.opengis.net/def/crs/EPSG/0/27700"
    bng = asyncio.run(uriproj.load(bng_uri))

    easting, northing = bng.forward((-1.54, 55.5))
    print(easting, northing)
    print(bng.inverse((easting, northing)))

    print(uriproj.get(bng_uri) is bng)

    """
    Several projections can be loaded at once; requests run concurrently:
    """

    uris = [
        "http://www.opengis.net/def/crs/EPSG/0/27700",
        "http://www.opengis.net/def/crs/EPSG/0/7376",
        "http://www.opengis.net/def/crs/EPSG/0/7375",
    ]
    projs = asyncio.run(uriproj.load_many(uris))

    """
    If you already know the PROJ.4 definition of a CRS, you can store it yourself and skip the network entirely.
    The URI does not need to be an EPSG URI in this case:
    """

    uriproj.set(
        "urn:example:bng",
        "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 "
        "+ellps=airy +towgs84=446.448,-125.157,542.06,0.15,0.247,0.842,-20.489 +units=m +no_defs",
    )

    """
    Projections also work on shapely geometries:
    """

    from shapely.geometry import LineString

    line = LineString([(-1.54, 55.5), (-1.6, 55.4)])
    print(uriproj.get("urn:example:bng").forward_geometry(line))

    """
    Finally, for isolated use (tests, different registries) build your own resolver and cache
    instead of the process-wide default:
    """

    from uriproj import EpsgIoResolver, ProjectionCache

    resolver = EpsgIoResolver(cache=ProjectionCache(), timeout=10)
    print(asyncio.run(resolver.load(uris[1])) is projs[1])


if __name__ == "__main__":
    main()
