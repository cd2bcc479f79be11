# grid.py

from typing import NamedTuple

import numpy as np

from config import GRID_SIZE
from terrain import TerrainKind, DEFAULT_COSTS, generate_terrain


class Cell(NamedTuple):
    col: int
    row: int


class Grid:
    """
    Square N×N terrain map plus the cost table used to price it.

      - terrain: int8 array indexed [row, col], values are TerrainKind
      - costs: immutable CostTable owned by the grid (no global cost state)
      - version: bumped on every mutation, so cached routes can be invalidated
    """

    def __init__(self, terrain, costs=DEFAULT_COSTS):
        terrain = np.asarray(terrain)
        if terrain.ndim != 2 or terrain.shape[0] != terrain.shape[1]:
            raise ValueError(f"Grid must be square, got shape {terrain.shape}")
        if terrain.size and not np.issubdtype(terrain.dtype, np.integer):
            raise ValueError(f"Grid values must be integer TerrainKinds, got dtype {terrain.dtype}")
        if terrain.size and (terrain.min() < 0 or terrain.max() >= len(TerrainKind)):
            raise ValueError("Grid contains values outside TerrainKind")
        self.terrain_map = terrain.astype(np.int8)
        self.costs = costs
        self.version = 0

    @classmethod
    def from_rows(cls, rows, costs=DEFAULT_COSTS):
        """Build from row-major nested lists, i.e. rows[row][col]."""
        return cls(rows, costs)

    @classmethod
    def filled(cls, size=GRID_SIZE, kind=TerrainKind.AIR, costs=DEFAULT_COSTS):
        return cls(np.full((size, size), int(kind), dtype=np.int8), costs)

    @classmethod
    def generate(cls, size=GRID_SIZE, seed=0, costs=DEFAULT_COSTS):
        return cls(generate_terrain(size, seed), costs)

    @property
    def size(self):
        return self.terrain_map.shape[0]

    def in_bounds(self, cell):
        col, row = cell
        return 0 <= col < self.size and 0 <= row < self.size

    def terrain_at(self, cell):
        col, row = cell
        return TerrainKind(int(self.terrain_map[row, col]))

    def cost_at(self, cell):
        return self.costs.cost(self.terrain_at(cell))

    def is_passable(self, cell):
        return self.costs.is_passable(self.terrain_at(cell))

    def set_terrain(self, cell, kind):
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {tuple(cell)} is outside a {self.size}x{self.size} grid")
        col, row = cell
        self.terrain_map[row, col] = int(TerrainKind(kind))
        self.version += 1

    def neighbors(self, cell):
        """
        The up to 8 in-bounds cells of the 3×3 block around `cell`, excluding it.
        Enumerated row offset -1..1, then column offset -1..1.
        """
        col, row = cell
        result = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nei = Cell(col + dc, row + dr)
                if self.in_bounds(nei):
                    result.append(nei)
        return result

    def cost_map(self):
        """Per-cell traversal cost, same [row, col] layout as terrain_map."""
        return self.costs.as_array()[self.terrain_map]
