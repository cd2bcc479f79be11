import math

import numpy as np
import pytest

from terrain import TerrainKind, CostTable, DEFAULT_COSTS, generate_terrain


def test_default_costs_follow_kind_order():
    assert [DEFAULT_COSTS.cost(k) for k in TerrainKind] == [0.0, 10.0, 25.0, 50.0, 100.0]


def test_cost_table_from_dict():
    costs = CostTable({TerrainKind.AIR: 1, TerrainKind.GRASS: 2, TerrainKind.WATER: 3,
                       TerrainKind.MUD: 4, TerrainKind.MOUNTAIN: 5})
    assert costs.cost(TerrainKind.MUD) == 4.0
    assert list(costs) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_cost_table_rejects_bad_input():
    with pytest.raises(ValueError):
        CostTable((0, 1, 2))
    with pytest.raises(ValueError):
        CostTable((0, 1, -2, 3, 4))
    with pytest.raises(ValueError):
        CostTable({TerrainKind.AIR: 0})


def test_cost_table_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_COSTS._costs = (1, 1, 1, 1, 1)
    assert DEFAULT_COSTS == CostTable()


def test_infinite_cost_is_impassable():
    costs = CostTable((0, 10, 25, 50, math.inf))
    assert not costs.is_passable(TerrainKind.MOUNTAIN)
    assert costs.is_passable(TerrainKind.AIR)


def test_generate_terrain_rejects_empty_size():
    with pytest.raises(ValueError):
        generate_terrain(0)


def test_generate_terrain_shape_and_values():
    terrain = generate_terrain(16, seed=3)
    assert terrain.shape == (16, 16)
    assert terrain.min() >= 0
    assert terrain.max() < len(TerrainKind)
    # noise is banded, so more than one kind shows up
    assert len(np.unique(terrain)) > 1
