from __future__ import annotations

from typing import NamedTuple, Union

from uriproj.projections.projection_interface import (
    FunctionProjection,
    ProjectionInterface,
)
from uriproj.projections.pyproj_projection import PyprojProjection
from uriproj.utils.exceptions import InvalidArgument


class TextDefinition(NamedTuple):
    """
    A textual PROJ.4 definition waiting to be parsed into a projection.

    Attributes:
        text: The PROJ.4 string, e.g. '+proj=longlat +datum=WGS84 +no_defs'
    """

    text: str

    def to_projection(self) -> ProjectionInterface:
        return PyprojProjection.from_proj4(self.text)


# what ProjectionCache.set accepts; a bare str is read as a TextDefinition
ProjectionSource = Union[TextDefinition, ProjectionInterface, str]


def to_projection(source: ProjectionSource) -> ProjectionInterface:
    """
    Resolve a projection source into a projection.

    Args:
        source: A ready projection, any object with forward and inverse
            methods, a TextDefinition or a PROJ.4 string

    Returns:
        The projection itself if it was ready, otherwise the parsed definition

    Raises:
        ParseError: If a textual definition cannot be parsed
        InvalidArgument: If source is neither a projection nor text
    """
    if isinstance(source, str):
        source = TextDefinition(source)

    if isinstance(source, TextDefinition):
        return source.to_projection()

    if isinstance(source, ProjectionInterface):
        return source

    forward = getattr(source, "forward", None)
    inverse = getattr(source, "inverse", None)
    if callable(forward) and callable(inverse):
        return FunctionProjection(forward, inverse)

    raise InvalidArgument(
        f"Expected a projection or a proj4 string, got {type(source).__name__}"
    )
