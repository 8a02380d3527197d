"""Geographic point and rectangle components.

Continuous coordinates enter the engine as :class:`Point` values. The board
maps them onto discrete cells and reports a cell's extent as :class:`Bounds`.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Latitude / longitude pair in degrees.

    Attributes:
        lat: Latitude; divided by the tile width to get the cell's ``i``.
        lng: Longitude; divided by the tile width to get the cell's ``j``.
    """

    lat: float
    lng: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle, closed at ``south_west`` and open at ``north_east``."""

    south_west: Point
    north_east: Point

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies inside the half-open rectangle."""
        return (
            self.south_west.lat <= point.lat < self.north_east.lat
            and self.south_west.lng <= point.lng < self.north_east.lng
        )
