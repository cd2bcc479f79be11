# frontier.py

import heapq
import itertools
from typing import NamedTuple, Tuple

import numpy as np

from config import UNVISITED_EPSILON
from grid import Cell


class SearchNode(NamedTuple):
    g: float
    h: float
    parent: Tuple[int, int]

    @property
    def f(self):
        return self.g + self.h


class SearchState:
    """
    One record per cell: g, h and parent, stored as (N,N) arrays indexed [row, col].
    Fresh tables are all unvisited (F = 0, parent = (-1,-1)).
    Later discoveries overwrite the record in place.
    """

    def __init__(self, size):
        self.size = size
        self.g = np.zeros((size, size), dtype=np.float64)
        self.h = np.zeros((size, size), dtype=np.float64)
        self.parent_col = np.full((size, size), -1, dtype=np.int32)
        self.parent_row = np.full((size, size), -1, dtype=np.int32)
        self.expanded = 0

    def node(self, cell):
        col, row = cell
        return SearchNode(float(self.g[row, col]), float(self.h[row, col]), self.parent(cell))

    def f(self, cell):
        col, row = cell
        return float(self.g[row, col] + self.h[row, col])

    def is_visited(self, cell):
        return self.f(cell) > UNVISITED_EPSILON

    def parent(self, cell):
        col, row = cell
        return Cell(int(self.parent_col[row, col]), int(self.parent_row[row, col]))

    def update(self, cell, g, h, parent):
        col, row = cell
        self.g[row, col] = g
        self.h[row, col] = h
        self.parent_col[row, col] = parent[0]
        self.parent_row[row, col] = parent[1]

    def mark_start(self, cell):
        """The start cell is its own parent; reconstruction stops there."""
        self.update(cell, 0.0, 0.0, cell)

    def is_start(self, cell):
        return self.parent(cell) == tuple(cell)

    def f_map(self):
        return self.g + self.h


class Frontier:
    """
    Open set, smallest F first.
    Ties on F go to the smaller h (closer to the goal), then to the earlier push.
    """

    def __init__(self):
        self._heap = []
        self._counter = itertools.count()

    def push(self, cell, g, h):
        heapq.heappush(self._heap, (g + h, h, next(self._counter), Cell(*cell)))

    def peek(self):
        return self._heap[0][3]

    def pop(self):
        return heapq.heappop(self._heap)[3]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
