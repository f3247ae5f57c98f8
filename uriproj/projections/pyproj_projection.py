from __future__ import annotations

import logging
from typing import Sequence

from pyproj import CRS, Transformer
from pyproj.enums import TransformDirection
from pyproj.exceptions import ProjError

from uriproj.projections.projection_interface import Position, ProjectionInterface
from uriproj.utils.crs import WGS84_PROJ4
from uriproj.utils.exceptions import ParseError

log = logging.getLogger(__name__)

WGS84_CRS = CRS.from_proj4(WGS84_PROJ4)


class PyprojProjection(ProjectionInterface):
    """
    A projection between WGS84 longitude/latitude and a CRS, backed by pyproj.

    The underlying transformer always works in (longitude, latitude) / (x, y)
    order (always_xy), which is the order PROJ.4 definitions are written in.

    Attributes:
        crs: The pyproj CRS on the projected side
        transformer: The pyproj Transformer from WGS84 to crs

    Examples:
        >>> proj = PyprojProjection.from_proj4('+proj=merc +datum=WGS84 +units=m +no_defs')
        >>> x, y = proj.forward((-74.0060, 40.7128))
    """

    def __init__(self, crs: CRS):
        self.crs = crs
        self.transformer = Transformer.from_crs(WGS84_CRS, crs, always_xy=True)

    def __repr__(self):
        return f"PyprojProjection(crs={self.crs.srs!r})"

    @classmethod
    def from_proj4(cls, definition: str) -> PyprojProjection:
        """
        Build a projection from a PROJ.4 definition string.

        Args:
            definition: A PROJ.4 string such as
                '+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 +x_0=400000 +y_0=-100000 +ellps=airy +units=m +no_defs'

        Returns:
            A new PyprojProjection

        Raises:
            ParseError: If pyproj cannot build a CRS or transformer from the definition
        """
        # an empty or whitespace-only definition would otherwise be accepted by
        # pyproj as an empty pipeline
        if not isinstance(definition, str) or not definition.strip():
            raise ParseError(definition)

        try:
            crs = CRS.from_user_input(definition.strip())
            return cls(crs)
        except ProjError as e:
            log.debug("pyproj rejected definition %r: %s", definition, e)
            raise ParseError(definition) from e

    def _forward(self, position: Sequence[float]) -> Position:
        lon, lat = position
        x, y = self.transformer.transform(lon, lat)
        return float(x), float(y)

    def _inverse(self, position: Sequence[float]) -> Position:
        x, y = position
        lon, lat = self.transformer.transform(
            x, y, direction=TransformDirection.INVERSE
        )
        return float(lon), float(lat)
