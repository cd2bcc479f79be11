# simulation.py

import argparse
import logging
import sys
import time

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from config import (
    GRID_SIZE, DEFAULT_HEURISTIC, START_CELL, GOAL_CELL, PLOT_OUTPUT,
    TERRAIN_COLORS, ROUTE_COLOR, LOG_LEVEL
)
from grid import Grid
from heuristic import HEURISTICS
from planner import PathPlanner, PathError

logger = logging.getLogger(__name__)

# 0 = AIR, 4 = MOUNTAIN; rows are listed top to bottom
DEMO_MAP = [
    [0, 0, 4, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 4, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 4, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 4, 4, 0, 0, 0, 0],
]


def build_demo_grid():
    return Grid.from_rows(DEMO_MAP)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Find a lowest-cost route across a terrain grid.")
    parser.add_argument("--start", nargs=2, type=int, metavar=("COL", "ROW"), default=START_CELL)
    parser.add_argument("--goal", nargs=2, type=int, metavar=("COL", "ROW"), default=GOAL_CELL)
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default=DEFAULT_HEURISTIC)
    parser.add_argument("--cumulative", action="store_true",
                        help="accumulate step distance + terrain cost from the start")
    parser.add_argument("--random", type=int, metavar="SEED", default=None,
                        help="use Perlin-noise terrain instead of the demo map")
    parser.add_argument("--size", type=int, default=GRID_SIZE, help="grid side for --random")
    parser.add_argument("--output", default=PLOT_OUTPUT)
    parser.add_argument("--no-show", action="store_true", help="save the figure without opening a window")
    return parser.parse_args(argv)


def plot_route(grid, route, state, title, ax):
    """Terrain tiles, the route on top, and each reached cell's F value."""
    cmap = ListedColormap(TERRAIN_COLORS)
    ax.imshow(grid.terrain_map, cmap=cmap, vmin=0, vmax=len(TERRAIN_COLORS) - 1,
              origin="upper", interpolation="nearest")
    if route:
        cols = [c.col for c in route]
        rows = [c.row for c in route]
        ax.plot(cols, rows, "-o", color=ROUTE_COLOR, linewidth=2, markersize=5)
        ax.plot(cols[0], rows[0], "s", color="darkblue", markersize=10)
        ax.plot(cols[-1], rows[-1], "s", color="skyblue", markersize=10)

    if state is not None and grid.size <= 20:
        f_map = state.f_map()
        for row, col in np.argwhere(f_map > 0):
            ax.text(col, row, f"{f_map[row, col]:.1f}", ha="center", va="center",
                    fontsize=6, color="maroon")
    ax.set_xticks(range(grid.size))
    ax.set_yticks(range(grid.size))
    ax.set_title(title)


def run_simulation(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.random is not None:
        try:
            grid = Grid.generate(args.size, seed=args.random)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
        logger.info("Generated %dx%d terrain with seed %d", grid.size, grid.size, args.random)
    else:
        grid = build_demo_grid()

    planner = PathPlanner(grid, heuristic=args.heuristic, cumulative=args.cumulative)
    start, goal = tuple(args.start), tuple(args.goal)

    # Route for every heuristic, selected one first
    names = [args.heuristic] + [h for h in sorted(HEURISTICS) if h != args.heuristic]
    results = {}
    for name in names:
        t0 = time.time()
        try:
            route = planner.find_path(start, goal, heuristic=name)
        except PathError as exc:
            print(f"Error: {exc}")
            return 1
        results[name] = (route, planner.last_state, time.time() - t0)

    print("\n=== Route Summary ===")
    print(f"Grid: {grid.size}x{grid.size}  Start: {start}  Goal: {goal}  "
          f"Cost mode: {'cumulative' if args.cumulative else 'step'}")
    cost_map = grid.cost_map()
    for name, (route, state, elapsed) in results.items():
        terrain_cost = sum(cost_map[c.row, c.col] for c in route[1:])
        print(f"\n{name}:")
        print(f"  Route ({len(route)} cells): {' '.join(f'({c.col},{c.row})' for c in route)}")
        print(f"  Terrain cost along route: {terrain_cost:g}")
        print(f"  Cells expanded: {state.expanded}")
        print(f"  Search time: {elapsed * 1000:.2f}ms")

    fig, axes = plt.subplots(1, len(results), figsize=(8 * len(results), 8))
    for ax, (name, (route, state, _)) in zip(np.atleast_1d(axes), results.items()):
        plot_route(grid, route, state, f"{name} ({len(route)} cells)", ax)
    plt.tight_layout()
    plt.savefig(args.output)
    logger.info("Saved figure to %s", args.output)
    if not args.no_show:
        plt.show()
    plt.close(fig)
    return 0


if __name__ == "__main__":
    sys.exit(run_simulation())
