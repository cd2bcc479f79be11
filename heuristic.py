# heuristic.py

from math import sqrt


def axis_sum(a, b):
    """Sum of axis deltas; cheap and grid-aligned."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a, b):
    """Straight-line distance."""
    dc = a[0] - b[0]
    dr = a[1] - b[1]
    return sqrt(dc * dc + dr * dr)


HEURISTICS = {
    "axis-sum": axis_sum,
    "euclidean": euclidean,
}


def get_heuristic(heuristic):
    if callable(heuristic):
        return heuristic
    try:
        return HEURISTICS[heuristic]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {heuristic!r}; expected one of {sorted(HEURISTICS)}"
        ) from None


def heuristic_name(heuristic):
    """Cache key for a heuristic: its table name, or the function object itself for custom callables."""
    for name, fn in HEURISTICS.items():
        if heuristic == name or heuristic is fn:
            return name
    return heuristic
