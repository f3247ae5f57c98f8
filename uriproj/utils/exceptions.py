"""Errors raised by uriproj.

Every error derives from UriProjError so callers can catch the whole family,
and from the builtin (or requests) exception that matches its meaning.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class UriProjError(Exception):
    """Base class for all uriproj errors."""


class UnsupportedURI(UriProjError, ValueError):
    """The CRS URI does not match any prefix that can be resolved remotely."""

    def __init__(self, uri: Any):
        self.uri = uri
        super().__init__(f"Unsupported CRS URI: {uri}")


class HttpError(UriProjError, requests.HTTPError):
    """The registry answered with a non-success status."""

    def __init__(
        self,
        status: int,
        url: Optional[str] = None,
        response: Optional[requests.Response] = None,
    ):
        self.status = status
        self.url = url
        super().__init__(f"HTTP response code: {status}", response=response)


class ParseError(UriProjError, ValueError):
    """A PROJ.4 definition could not be turned into a projection."""

    def __init__(self, definition: Any):
        self.definition = definition
        super().__init__(f"Unsupported proj4 string: {definition}")


class InvalidArgument(UriProjError, ValueError):
    """An operation was called with an empty or missing argument."""
