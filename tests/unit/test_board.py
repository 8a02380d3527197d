# tests/unit/test_board.py

import math

import pytest

from geocoin.board import Board
from geocoin.components import Bounds, Cell, Point
from geocoin.errors import ConfigurationError
from tests.test_utils import make_board


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(0.0, 0.0), (0, 0)),
        (Point(0.999, 0.5), (0, 0)),
        (Point(1.0, 2.0), (1, 2)),
        (Point(3.5, 3.5), (3, 3)),
        # floor, not truncation, below zero
        (Point(-0.5, -0.001), (-1, -1)),
        (Point(-1.0, -2.5), (-1, -3)),
    ],
)
def test_get_cell_for_point(point: Point, expected: tuple[int, int]) -> None:
    board = make_board()
    cell = board.get_cell_for_point(point)
    assert (cell.i, cell.j) == expected


def test_points_in_same_tile_share_cell_identity() -> None:
    board = Board(tile_width=1e-4, tile_visibility_radius=8)
    cell = board.get_cell_for_point(Point(36.9995, -122.0533))
    center = board.get_cell_center(cell)
    quarter = board.tile_width / 4
    for d_lat, d_lng in [(0, 0), (quarter, quarter), (-quarter, quarter)]:
        other = board.get_cell_for_point(Point(center.lat + d_lat, center.lng + d_lng))
        assert other is cell


def test_canonical_cell_identity_across_queries() -> None:
    board = make_board()
    via_point = board.get_cell_for_point(Point(3.2, 3.7))
    via_neighbors = board.get_cells_near_point(Point(3.5, 3.5))
    assert any(cell is via_point for cell in via_neighbors)
    assert board.get_canonical_cell(3, 3) is via_point


def test_equal_cells_from_different_boards_are_not_identical() -> None:
    a = make_board().get_canonical_cell(1, 1)
    b = make_board().get_canonical_cell(1, 1)
    assert a == b
    assert a is not b


def test_get_cells_near_point_row_major() -> None:
    board = make_board(radius=1)
    cells = board.get_cells_near_point(Point(3.5, 3.5))
    assert [(c.i, c.j) for c in cells] == [
        (2, 2),
        (2, 3),
        (2, 4),
        (3, 2),
        (3, 3),
        (3, 4),
        (4, 2),
        (4, 3),
        (4, 4),
    ]


@pytest.mark.parametrize("radius", [0, 1, 2, 8])
def test_get_cells_near_point_size_and_origin(radius: int) -> None:
    board = Board(tile_width=1e-4, tile_visibility_radius=radius)
    origin = board.get_canonical_cell(-7, 12)
    cells = board.get_cells_near_point(board.get_cell_center(origin))
    assert len(cells) == (2 * radius + 1) ** 2
    assert len({(c.i, c.j) for c in cells}) == len(cells)
    assert any(c is origin for c in cells)
    assert all(
        max(abs(c.i - origin.i), abs(c.j - origin.j)) <= radius for c in cells
    )


def test_registry_grows_lazily() -> None:
    board = make_board(radius=1)
    assert len(board) == 0
    board.get_cell_for_point(Point(0.5, 0.5))
    assert len(board) == 1
    board.get_cells_near_point(Point(0.5, 0.5))
    assert len(board) == 9
    board.get_cells_near_point(Point(0.5, 0.5))
    assert len(board) == 9
    assert Cell(1, -1) in board
    assert Cell(2, 2) not in board
    assert "0,0" not in board


def test_get_cell_bounds() -> None:
    board = make_board(tile_width=2.0)
    bounds = board.get_cell_bounds(Cell(1, -2))
    assert bounds == Bounds(Point(2.0, -4.0), Point(4.0, -2.0))
    assert bounds.contains(Point(2.0, -4.0))
    assert not bounds.contains(Point(4.0, -3.0))


def test_get_cell_bounds_does_not_register() -> None:
    board = make_board()
    board.get_cell_bounds(Cell(10, 10))
    assert len(board) == 0


def test_cell_center_lies_in_bounds_and_maps_back() -> None:
    board = Board(tile_width=1e-4, tile_visibility_radius=0)
    cell = board.get_canonical_cell(369995, -1220534)
    center = board.get_cell_center(cell)
    assert board.get_cell_bounds(cell).contains(center)
    assert board.get_cell_for_point(center) is cell


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_point_raises(value: float) -> None:
    board = make_board()
    with pytest.raises(ValueError):
        board.get_cell_for_point(Point(value, 0.0))


@pytest.mark.parametrize(
    "tile_width, radius",
    [
        (0.0, 1),
        (-1e-4, 1),
        (math.inf, 1),
        (math.nan, 1),
        (1e-4, -1),
        (1e-4, 1.5),
        (1e-4, 2.0),
        (1e-4, math.nan),
        (1e-4, math.inf),
        (1e-4, True),
    ],
)
def test_invalid_configuration_raises(tile_width: float, radius: int) -> None:
    with pytest.raises(ConfigurationError):
        Board(tile_width=tile_width, tile_visibility_radius=radius)


@pytest.mark.parametrize(
    "point, expected_sign",
    [(Point(1e308, 0.0), 1), (Point(-1e308, 0.0), -1)],
)
def test_huge_finite_point_maps_to_a_cell(point: Point, expected_sign: int) -> None:
    board = Board(tile_width=1e-4, tile_visibility_radius=0)
    cell = board.get_cell_for_point(point)
    assert cell.i * expected_sign > 10**311
    assert cell.j == 0
    assert board.get_cell_for_point(point) is cell
