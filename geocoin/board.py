"""Board: the grid index.

Maps continuous :class:`Point` coordinates onto discrete :class:`Cell` values
and enumerates the neighborhood visible from a point.

Cells are canonicalized through a registry owned by each board instance: the
first request for ``(i, j)`` creates the cell and every later request returns
that same object. Consumers may therefore use cell identity as a cache key.
The registry only grows; cells live as long as the board.

Example
-------
>>> board = Board(tile_width=1e-4, tile_visibility_radius=1)
>>> a = board.get_cell_for_point(Point(36.99951, -122.05331))
>>> b = board.get_cell_for_point(Point(36.99959, -122.05339))
>>> a is b
True
"""

import logging
import math
from fractions import Fraction
from typing import Dict, Iterator, List, Tuple

from geocoin.components import Bounds, Cell, Point
from geocoin.errors import ConfigurationError

logger = logging.getLogger(__name__)


def check_visibility_radius(radius: object) -> int:
    """Return ``radius`` if it is a non-negative int, else raise ConfigurationError."""
    if not isinstance(radius, int) or isinstance(radius, bool):
        raise ConfigurationError("tile_visibility_radius", "must be an integer")
    if radius < 0:
        raise ConfigurationError("tile_visibility_radius", "must be non-negative")
    return radius


def _floor_div(value: float, width: float) -> int:
    quotient = value / width
    if math.isfinite(quotient):
        return math.floor(quotient)
    # quotient overflowed; exact rational division is still well defined
    return math.floor(Fraction(value) / Fraction(width))


class Board:
    """Fixed-width square tiling of the lat/lng plane.

    Attributes:
        tile_width (float): Side length of one cell in degrees.
        tile_visibility_radius (int): Chebyshev radius, in cells, of the
            neighborhood returned by :meth:`get_cells_near_point`.
    """

    def __init__(self, tile_width: float, tile_visibility_radius: int) -> None:
        if not (math.isfinite(tile_width) and tile_width > 0):
            raise ConfigurationError("tile_width", "must be a positive finite number")
        self.tile_width = tile_width
        self.tile_visibility_radius = check_visibility_radius(tile_visibility_radius)
        self._known_cells: Dict[Tuple[int, int], Cell] = {}

    def __len__(self) -> int:
        return len(self._known_cells)

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, Cell):
            return False
        return (cell.i, cell.j) in self._known_cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._known_cells.values())

    def get_canonical_cell(self, i: int, j: int) -> Cell:
        """Return the registered cell for ``(i, j)``, creating it on first use."""
        key = (i, j)
        cell = self._known_cells.get(key)
        if cell is None:
            cell = Cell(i, j)
            self._known_cells[key] = cell
            logger.debug("Registered cell %s", key)
        return cell

    def get_cell_for_point(self, point: Point) -> Cell:
        """Return the canonical cell containing ``point``.

        Raises:
            ValueError: If either coordinate is NaN or infinite. Any finite
                coordinate maps to a cell, however large.
        """
        if not (math.isfinite(point.lat) and math.isfinite(point.lng)):
            raise ValueError(f"Point {point} has non-finite coordinates")
        return self.get_canonical_cell(
            _floor_div(point.lat, self.tile_width),
            _floor_div(point.lng, self.tile_width),
        )

    def get_cell_bounds(self, cell: Cell) -> Bounds:
        """Return the half-open rectangle covered by ``cell``.

        Pure function of ``cell`` and the tile width; the registry is not
        consulted, so cells from elsewhere (e.g. decoded mementos) work too.
        """
        return Bounds(
            south_west=Point(cell.i * self.tile_width, cell.j * self.tile_width),
            north_east=Point(
                (cell.i + 1) * self.tile_width, (cell.j + 1) * self.tile_width
            ),
        )

    def get_cell_center(self, cell: Cell) -> Point:
        """Return the midpoint of ``cell``'s bounds."""
        return Point(
            (cell.i + 0.5) * self.tile_width, (cell.j + 0.5) * self.tile_width
        )

    def get_cells_near_point(self, point: Point) -> List[Cell]:
        """Return the ``(2r+1)**2`` cells within radius ``r`` of ``point``'s cell.

        Cells are listed row-major: outer loop over ``i``, inner over ``j``,
        both ascending. Each ``(i, j)`` appears exactly once.
        """
        origin = self.get_cell_for_point(point)
        radius = self.tile_visibility_radius
        return [
            self.get_canonical_cell(i, j)
            for i in range(origin.i - radius, origin.i + radius + 1)
            for j in range(origin.j - radius, origin.j + radius + 1)
        ]
