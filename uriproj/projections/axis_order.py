from __future__ import annotations

from typing import Sequence

from uriproj.projections.projection_interface import Position, ProjectionInterface


class ReversedAxesProjection(ProjectionInterface):
    """
    Wraps a projection to swap the order of its projected axes.

    Geographic projections in PROJ.4 can only be defined in lon/lat order, but
    some CRSs (EPSG:4326, EPSG:4979) are defined in lat/lon order, and the
    registry still returns a lon/lat definition for them. This wrapper leaves
    the geographic side untouched and swaps only the projected side:

    - forward(pos) is the reversed result of the wrapped forward(pos)
    - inverse(pos) is the wrapped inverse applied to the reversed pos

    Attributes:
        projection: The wrapped projection
    """

    def __init__(self, projection: ProjectionInterface):
        self.projection = projection

    def __repr__(self):
        return f"ReversedAxesProjection({self.projection!r})"

    def _forward(self, position: Sequence[float]) -> Position:
        x, y = self.projection.forward(position)
        return y, x

    def _inverse(self, position: Sequence[float]) -> Position:
        return self.projection.inverse((position[1], position[0]))


def reverse_axes(projection: ProjectionInterface) -> ProjectionInterface:
    """
    Reverse the projected axis order of a projection.

    Reversing an already reversed projection unwraps it instead of nesting.

    Args:
        projection: The projection whose axis order to reverse

    Returns:
        A projection with reversed axis order

    Examples:
        >>> import uriproj
        >>> crs84 = uriproj.get('http://www.opengis.net/def/crs/OGC/1.3/CRS84')
        >>> reverse_axes(crs84).forward((-71, 41))
        (41.0, -71.0)
    """
    if isinstance(projection, ReversedAxesProjection):
        return projection.projection
    return ReversedAxesProjection(projection)
