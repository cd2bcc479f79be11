import math
from enum import IntEnum

import numpy as np
from noise import pnoise2

from config import (
    TERRAIN_COSTS, NOISE_SCALE, NOISE_OCTAVES, NOISE_PERSISTENCE,
    NOISE_LACUNARITY, TERRAIN_BANDS
)


class TerrainKind(IntEnum):
    AIR = 0
    GRASS = 1
    WATER = 2
    MUD = 3
    MOUNTAIN = 4


class CostTable:
    """
    Immutable TerrainKind → traversal cost mapping.
    Every kind must have a non-negative cost; math.inf marks a kind impassable.
    """

    __slots__ = ("_costs",)

    def __init__(self, costs=TERRAIN_COSTS):
        if isinstance(costs, dict):
            missing = [kind.name for kind in TerrainKind if kind not in costs]
            if missing:
                raise ValueError(f"Missing cost for terrain kind(s): {', '.join(missing)}")
            costs = [costs[kind] for kind in TerrainKind]
        costs = tuple(float(c) for c in costs)
        if len(costs) != len(TerrainKind):
            raise ValueError(f"Expected {len(TerrainKind)} costs, got {len(costs)}")
        if any(math.isnan(c) or c < 0 for c in costs):
            raise ValueError(f"Terrain costs must be non-negative: {costs}")
        object.__setattr__(self, "_costs", costs)

    def __setattr__(self, name, value):
        raise AttributeError("CostTable is immutable")

    def cost(self, kind):
        return self._costs[kind]

    def is_passable(self, kind):
        return not math.isinf(self._costs[kind])

    def as_array(self):
        return np.array(self._costs, dtype=np.float64)

    def __iter__(self):
        return iter(self._costs)

    def __eq__(self, other):
        return isinstance(other, CostTable) and self._costs == other._costs

    def __hash__(self):
        return hash(self._costs)

    def __repr__(self):
        pairs = ", ".join(f"{k.name}={c:g}" for k, c in zip(TerrainKind, self._costs))
        return f"CostTable({pairs})"


DEFAULT_COSTS = CostTable()


def generate_terrain(size, seed=0):
    """
    Use Perlin noise to create smooth terrain in [0,1], then band it into
    TerrainKind values at TERRAIN_BANDS (low noise → AIR, high → MOUNTAIN).
    """
    if size < 1:
        raise ValueError(f"Terrain size must be at least 1, got {size}")
    world = np.zeros((size, size))
    for i in range(size):
        for j in range(size):
            world[i, j] = pnoise2(
                i / NOISE_SCALE, j / NOISE_SCALE,
                octaves=NOISE_OCTAVES,
                persistence=NOISE_PERSISTENCE,
                lacunarity=NOISE_LACUNARITY,
                repeatx=size,
                repeaty=size,
                base=seed
            )
    span = world.max() - world.min()
    if span > 0:
        world = (world - world.min()) / span
    else:
        world = np.zeros_like(world)
    return np.digitize(world, TERRAIN_BANDS).astype(np.int8)
