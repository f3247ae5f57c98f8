from urllib.parse import quote, urljoin


def _parse_uri(uri: str) -> str:
    """Internal use."""
    return uri if uri.endswith("/") else f"{uri}/"


def registry_url(base: str, code: str) -> str:
    """
    Build the URL of the PROJ.4 definition for an EPSG code.

    Args:
        base: The base URL of the registry, with or without a trailing slash.
            Example: 'http://epsg.io'
        code: The EPSG code, as returned by crs_uri_to_epsg

    Returns:
        The URL of the PROJ.4 definition.
        Example: 'http://epsg.io/27700.proj4'

    Examples:
        >>> registry_url('http://epsg.io', '27700')
        'http://epsg.io/27700.proj4'
    """
    return urljoin(_parse_uri(base), f"{quote(code, safe='')}.proj4")
