from __future__ import annotations

import math
from abc import ABCMeta, abstractmethod
from typing import Sequence, Tuple

import numpy as np
import shapely
from shapely.geometry.base import BaseGeometry

Position = Tuple[float, float]


def _check_finite(source: Sequence[float], result: Position) -> Position:
    if math.isinf(result[0]) or math.isinf(result[1]):
        raise ValueError(f"Unable to convert ({source[0]}, {source[1]}) -> {result}")
    return result


def _transform_vertices(fn, geom: BaseGeometry) -> BaseGeometry:
    # 2D only, z values are dropped
    return shapely.transform(
        geom, lambda coords: np.array([fn(c) for c in coords], dtype=float).reshape(-1, 2)
    )


class ProjectionInterface(metaclass=ABCMeta):
    """
    Abstract base class for projections between WGS84 and a CRS.

    A projection is a pair of pure functions. forward maps a geographic WGS84
    (longitude, latitude) position to an (x, y) position in the coordinate order
    native to the CRS, and inverse maps it back. Implementations hold no state
    besides what they are constructed with.

    Examples:
        >>> import uriproj
        >>> proj = uriproj.get('http://www.opengis.net/def/crs/OGC/1.3/CRS84')
        >>> proj.forward((-71, 41))
        (-71.0, 41.0)
    """

    @abstractmethod
    def _forward(self, position: Sequence[float]) -> Position:
        """Project a (longitude, latitude) position."""

    @abstractmethod
    def _inverse(self, position: Sequence[float]) -> Position:
        """Unproject an (x, y) position."""

    def forward(self, position: Sequence[float]) -> Position:
        """
        Transform a geographic WGS84 position to a position in this CRS.

        Args:
            position: A (longitude, latitude) pair in decimal degrees

        Returns:
            An (x, y) tuple in the axis order of this CRS

        Raises:
            ValueError: If the transformation results in infinite values
        """
        return _check_finite(position, self._forward(position))

    def inverse(self, position: Sequence[float]) -> Position:
        """
        Transform a position in this CRS to a geographic WGS84 position.

        Args:
            position: An (x, y) pair in the axis order of this CRS

        Returns:
            A (longitude, latitude) tuple in decimal degrees

        Raises:
            ValueError: If the transformation results in infinite values
        """
        return _check_finite(position, self._inverse(position))

    def forward_geometry(self, geom: BaseGeometry) -> BaseGeometry:
        """
        Apply forward to every vertex of a shapely geometry in lon/lat.

        Args:
            geom: Any shapely geometry with (longitude, latitude) coordinates

        Returns:
            A new geometry of the same type in this CRS
        """
        return _transform_vertices(self.forward, geom)

    def inverse_geometry(self, geom: BaseGeometry) -> BaseGeometry:
        """
        Apply inverse to every vertex of a shapely geometry in this CRS.

        Args:
            geom: Any shapely geometry with coordinates in this CRS

        Returns:
            A new geometry of the same type with (longitude, latitude) coordinates
        """
        return _transform_vertices(self.inverse, geom)


class FunctionProjection(ProjectionInterface):
    """
    A projection built from a pair of plain callables.

    Args:
        forward: Callable mapping a (longitude, latitude) pair to an (x, y) pair
        inverse: Callable mapping an (x, y) pair to a (longitude, latitude) pair

    Examples:
        >>> swap = FunctionProjection(lambda p: (p[1], p[0]), lambda p: (p[1], p[0]))
        >>> swap.forward((1, 2))
        (2.0, 1.0)
    """

    def __init__(self, forward, inverse):
        self._forward_fn = forward
        self._inverse_fn = inverse

    def __repr__(self):
        return f"FunctionProjection(forward={self._forward_fn!r}, inverse={self._inverse_fn!r})"

    def _forward(self, position: Sequence[float]) -> Position:
        x, y = self._forward_fn(position)
        return float(x), float(y)

    def _inverse(self, position: Sequence[float]) -> Position:
        x, y = self._inverse_fn(position)
        return float(x), float(y)
