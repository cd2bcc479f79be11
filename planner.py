# planner.py

import logging
import operator

import numpy as np

from config import DEFAULT_HEURISTIC, CUMULATIVE_COST
from frontier import Frontier, SearchState
from grid import Cell
from heuristic import get_heuristic, heuristic_name

logger = logging.getLogger(__name__)


class PathError(Exception):
    """Base class for search failures."""


class InvalidCellError(PathError, ValueError):
    """Start or goal is not an in-bounds integer cell of the grid."""


class UnreachableError(PathError):
    """The frontier ran out without ever reaching the goal."""


class CorruptPathError(PathError):
    """Parent links do not lead back to the start."""


def _check_cell(grid, cell, label):
    try:
        col, row = (operator.index(v) for v in cell)
    except (TypeError, ValueError):
        raise InvalidCellError(f"{label} must be a (col, row) pair of integers, got {cell!r}") from None
    cell = Cell(col, row)
    if not grid.in_bounds(cell):
        raise InvalidCellError(
            f"{label} {tuple(cell)} is outside a {grid.size}x{grid.size} grid"
        )
    return cell


def search(grid, start, goal, heuristic=DEFAULT_HEURISTIC, cumulative=CUMULATIVE_COST):
    """
    Best-first search on the 8-connected grid. Returns the filled SearchState.

    Default cost model: g is the heuristic distance of the single step from
    `current` to the neighbour, h is the heuristic distance to the goal plus the
    neighbour's terrain cost. With cumulative=True, g instead accumulates
    step distance + terrain cost from the start and h is the plain distance.

    Impassable terrain (infinite cost) is never entered. Callers are expected
    to pass in-bounds cells; find_path() checks that.
    """
    distance = get_heuristic(heuristic)
    start = Cell(*start)
    goal = Cell(*goal)
    n = grid.size

    state = SearchState(n)
    closed = np.zeros((n, n), dtype=bool)
    state.mark_start(start)
    open_list = Frontier()
    open_list.push(start, 0.0, 0.0)
    expanded = 0

    while open_list:
        current = open_list.peek()
        if current == goal:
            break

        open_list.pop()
        if closed[current.row, current.col]:
            continue  # stale entry, already expanded with a better score
        closed[current.row, current.col] = True
        expanded += 1

        for nei in grid.neighbors(current):
            if closed[nei.row, nei.col] or not grid.is_passable(nei):
                continue

            step = distance(current, nei)
            if cumulative:
                g_new = state.g[current.row, current.col] + step + grid.cost_at(nei)
                h_new = distance(nei, goal)
            else:
                g_new = step
                h_new = distance(nei, goal) + grid.cost_at(nei)

            if not state.is_visited(nei) or g_new + h_new < state.f(nei):
                open_list.push(nei, g_new, h_new)
                state.update(nei, g_new, h_new, current)

    state.expanded = expanded
    logger.debug("Search %s -> %s expanded %d cells (%d left open)",
                 tuple(start), tuple(goal), expanded, len(open_list))
    return state


def reconstruct_path(state, start, goal):
    """
    Follow parent links from goal back to the self-parented start cell.
    Returns the route start → goal. Gives up after size*size steps.
    """
    start = Cell(*start)
    current = Cell(*goal)
    rev = []
    for _ in range(state.size * state.size):
        if state.is_start(current):
            break
        rev.append(current)
        current = state.parent(current)
        if not (0 <= current.col < state.size and 0 <= current.row < state.size):
            raise CorruptPathError(f"Cell {tuple(rev[-1])} has no parent")
    else:
        raise CorruptPathError(f"No start reached from {tuple(goal)} within {state.size ** 2} steps")
    if current != start:
        raise CorruptPathError(f"Parent chain ends at {tuple(current)}, not at start {tuple(start)}")
    rev.append(start)
    return rev[::-1]


def plan(grid, start, goal, heuristic=DEFAULT_HEURISTIC, cumulative=CUMULATIVE_COST):
    """Like find_path() but also returns the SearchState for g/h/F overlays."""
    get_heuristic(heuristic)
    start = _check_cell(grid, start, "start")
    goal = _check_cell(grid, goal, "goal")

    state = search(grid, start, goal, heuristic, cumulative)
    if start == goal:
        return [start], state
    if not state.is_visited(goal):
        raise UnreachableError(f"No route from {tuple(start)} to {tuple(goal)}")
    return reconstruct_path(state, start, goal), state


def find_path(grid, start, goal, heuristic=DEFAULT_HEURISTIC, cumulative=CUMULATIVE_COST):
    """
    Lowest-cost route between two cells as a list of Cell, start and goal inclusive.
    Raises InvalidCellError for out-of-bounds cells, UnreachableError if no route exists.
    """
    route, _ = plan(grid, start, goal, heuristic, cumulative)
    return route


class PathPlanner:
    """
    Recomputes routes on demand for one grid.
      - path_cache: (start, goal, heuristic, cumulative) → (route, state)
      - last_state: SearchState behind the most recently returned route
    The cache is dropped whenever grid.version moves (terrain was edited).
    """

    def __init__(self, grid, heuristic=DEFAULT_HEURISTIC, cumulative=CUMULATIVE_COST):
        get_heuristic(heuristic)
        self.grid = grid
        self.heuristic = heuristic
        self.cumulative = cumulative
        self.path_cache = {}
        self.last_state = None
        self._cache_version = grid.version

    def clear_cache(self):
        self.path_cache.clear()
        self._cache_version = self.grid.version

    def find_path(self, start, goal, heuristic=None):
        if heuristic is None:
            heuristic = self.heuristic
        if self.grid.version != self._cache_version:
            logger.debug("Grid changed (version %d), dropping %d cached routes",
                         self.grid.version, len(self.path_cache))
            self.clear_cache()

        start = _check_cell(self.grid, start, "start")
        goal = _check_cell(self.grid, goal, "goal")
        key = (tuple(start), tuple(goal), heuristic_name(heuristic), self.cumulative)
        if key in self.path_cache:
            route, state = self.path_cache[key]
            logger.debug("Cache hit for %s -> %s", key[0], key[1])
        else:
            route, state = plan(self.grid, start, goal, heuristic, self.cumulative)
            self.path_cache[key] = (route, state)
        self.last_state = state
        return list(route)
