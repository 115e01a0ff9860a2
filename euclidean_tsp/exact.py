"""
Exhaustive search over every tour that starts and ends at vertex 0.

The running time grows as (n-1)!, so this solver is meant for small point
sets only. Bounding n is left to the caller (see config.MAX_EXACT_VERTICES);
nothing here refuses a large graph.
"""
from typing import Optional

from .graph import WeightedGraph
from .tour import TourResult, degenerate_result, tour_distance

SOLVER_NAME = "optimal"


def next_permutation(path: list) -> bool:
    """
    Advance path[1:-1] in place to its next permutation in lexicographic order.

    The leading and trailing vertex 0 stay fixed. Returns False (leaving
    the path untouched) once the last permutation has been reached.
    """
    last = len(path) - 2
    i = last
    while i >= 2 and path[i - 1] >= path[i]:
        i -= 1
    if i < 2:
        return False

    pivot = i - 1
    j = last
    while path[j] <= path[pivot]:
        j -= 1
    path[pivot], path[j] = path[j], path[pivot]
    path[i:last + 1] = reversed(path[i:last + 1])
    return True


def solve_optimal(
    graph: WeightedGraph, scratch=None, trace: Optional[list] = None
) -> Optional[TourResult]:
    """
    Shortest tour by enumerating every permutation of vertices 1..n-1.

    Ties keep the permutation found first. When `trace` is a list, every
    enumerated (path, distance) pair is appended to it.
    Returns None for an empty graph.
    """
    n = graph.n
    if n <= 0:
        return None
    if n == 1:
        return degenerate_result(SOLVER_NAME, permutations=1)

    weights = graph.weights
    current = list(range(n)) + [0]
    best_path = None
    best_distance = None
    count = 0

    while True:
        distance = tour_distance(weights, current)
        count += 1
        if trace is not None:
            trace.append((tuple(current), distance))
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_path = tuple(current)
        if not next_permutation(current):
            break

    extras = {"permutations": count}
    if trace is not None:
        extras["trace"] = tuple(trace)
    return TourResult(SOLVER_NAME, best_path, best_distance, extras)
