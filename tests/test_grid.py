import numpy as np
import pytest

from grid import Cell, Grid
from terrain import TerrainKind, CostTable


def test_cell_equality():
    assert Cell(2, 3) == Cell(2, 3)
    assert Cell(2, 3) != Cell(3, 2)
    assert Cell(2, 3) == (2, 3)


def test_grid_rejects_non_square():
    with pytest.raises(ValueError):
        Grid(np.zeros((3, 4)))
    with pytest.raises(ValueError):
        Grid([[0, 9], [0, 0]])


def test_grid_rejects_fractional_terrain():
    with pytest.raises(ValueError):
        Grid([[0, 1.5], [0, 0]])
    with pytest.raises(ValueError):
        Grid(np.ones((3, 3)))


def test_grid_copies_integer_input():
    rows = np.array([[0, 1], [2, 3]], dtype=np.int64)
    grid = Grid(rows)
    rows[0, 0] = 4
    assert grid.terrain_at((0, 0)) == TerrainKind.AIR
    assert grid.terrain_map.dtype == np.int8


def test_in_bounds():
    grid = Grid.filled(10)
    assert grid.size == 10
    assert grid.in_bounds((0, 0))
    assert grid.in_bounds((9, 9))
    assert not grid.in_bounds((10, 0))
    assert not grid.in_bounds((0, -1))


def test_terrain_is_indexed_row_then_col():
    grid = Grid.from_rows([
        [0, 4, 0],
        [0, 0, 0],
        [2, 0, 0],
    ])
    assert grid.terrain_at((1, 0)) == TerrainKind.MOUNTAIN
    assert grid.terrain_at((0, 2)) == TerrainKind.WATER
    assert grid.cost_at((1, 0)) == 100.0
    assert grid.cost_map()[2, 0] == 25.0


def test_neighbors_center_edge_corner():
    grid = Grid.filled(10)
    center = grid.neighbors((5, 5))
    assert len(center) == 8
    assert (5, 5) not in center
    assert set(center) == {(c, r) for c in (4, 5, 6) for r in (4, 5, 6)} - {(5, 5)}
    assert len(grid.neighbors((0, 5))) == 5
    assert sorted(grid.neighbors((0, 0))) == [(0, 1), (1, 0), (1, 1)]
    assert len(grid.neighbors((9, 9))) == 3


def test_neighbors_order_is_row_major():
    grid = Grid.filled(10)
    assert grid.neighbors((1, 1)) == [
        (0, 0), (1, 0), (2, 0),
        (0, 1), (2, 1),
        (0, 2), (1, 2), (2, 2),
    ]


def test_set_terrain_bumps_version():
    grid = Grid.filled(5)
    assert grid.version == 0
    grid.set_terrain((3, 1), TerrainKind.MUD)
    assert grid.terrain_at((3, 1)) == TerrainKind.MUD
    assert grid.version == 1
    with pytest.raises(IndexError):
        grid.set_terrain((5, 0), TerrainKind.MUD)


def test_passability_uses_grid_costs():
    walls = CostTable((0, 10, 25, 50, float("inf")))
    grid = Grid.filled(4, costs=walls)
    grid.set_terrain((2, 2), TerrainKind.MOUNTAIN)
    assert not grid.is_passable((2, 2))
    assert grid.is_passable((1, 1))


def test_generate_uses_noise_terrain():
    grid = Grid.generate(12, seed=1)
    assert grid.size == 12
    assert all(grid.terrain_at((c, r)) in TerrainKind for c in range(12) for r in range(12))
