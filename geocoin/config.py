"""Board configuration.

Defaults mirror the original game: tiles of ``1e-4`` degrees (roughly the
size of a house), an 8-cell visibility radius, a 10% chance of a cache per
cell, and the classroom the game starts in.
"""

import math
from dataclasses import dataclass

from geocoin.board import Board, check_visibility_radius
from geocoin.components import Point
from geocoin.errors import ConfigurationError


CLASSROOM = Point(36.9995, -122.0533)


@dataclass(frozen=True)
class BoardConfig:
    """Tiling and spawn parameters.

    Attributes:
        tile_width: Cell side length in degrees.
        tile_visibility_radius: Neighborhood radius in cells.
        cache_spawn_probability: Chance a cell hosts a cache, for callers
            building a ``SpawnFn`` from a luck function.
        origin: Starting location of the player.
    """

    tile_width: float = 1e-4
    tile_visibility_radius: int = 8
    cache_spawn_probability: float = 0.1
    origin: Point = CLASSROOM

    def __post_init__(self) -> None:
        if not (math.isfinite(self.tile_width) and self.tile_width > 0):
            raise ConfigurationError("tile_width", "must be a positive finite number")
        check_visibility_radius(self.tile_visibility_radius)
        if not 0.0 <= self.cache_spawn_probability <= 1.0:
            raise ConfigurationError(
                "cache_spawn_probability", "must be between 0 and 1"
            )

    def make_board(self) -> Board:
        return Board(self.tile_width, self.tile_visibility_radius)
