from uriproj.utils.crs import EPSG_PREFIX
from uriproj.utils.exceptions import UnsupportedURI


def crs_uri_to_epsg(uri: str) -> str:
    """
    Return the EPSG code of an OGC CRS URI.

    Only URIs of the form http://www.opengis.net/def/crs/EPSG/0/<code> are
    understood. CRS84 never reaches this function; it is served by the
    pre-seeded cache entries.

    Args:
        uri: The CRS URI to parse

    Returns:
        The EPSG code, as the string following the EPSG prefix

    Raises:
        UnsupportedURI: If the URI does not start with the EPSG prefix

    Examples:
        >>> crs_uri_to_epsg('http://www.opengis.net/def/crs/EPSG/0/27700')
        '27700'
    """
    if not isinstance(uri, str) or not uri.startswith(EPSG_PREFIX):
        raise UnsupportedURI(uri)

    return uri[len(EPSG_PREFIX) :]
