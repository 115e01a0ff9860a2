"""
Shortest bitonic tour by dynamic programming.

With the points sorted by x, a bitonic tour runs from the leftmost point to
the rightmost one strictly left-to-right and comes back strictly
right-to-left. L[i][j] (i < j) is the length of the shortest pair of
disjoint x-monotone paths from point 0, one ending at i and one at j,
together covering points 0..j; N[i][j] is the point preceding j on its
path. O(n^2) time and space; optimal among bitonic tours only.
"""
import math
from typing import Optional

import numpy as np

from .geometry import round_distance
from .graph import WeightedGraph
from .tour import TourResult, degenerate_result, tour_distance

SOLVER_NAME = "bitonic"


def sort_by_x(graph: WeightedGraph) -> list:
    """Vertex identities ordered by x; equal x keeps the original order."""
    return sorted(range(graph.n), key=lambda v: graph.points[v].x)


def fill_tables(graph: WeightedGraph, order: list):
    """Return the (L, N) tables over the x-sorted vertices `order`."""
    n = len(order)

    def dist(a, b):
        return graph.weight(order[a], order[b])

    l_table = np.zeros((n, n), dtype=float)
    n_table = np.full((n, n), -1, dtype=int)

    for j in range(1, n):
        for i in range(j):
            if i == 0 and j == 1:
                l_table[i, j] = dist(0, 1)
                n_table[i, j] = 0
            elif j > i + 1:
                l_table[i, j] = round_distance(l_table[i, j - 1] + dist(j - 1, j))
                n_table[i, j] = j - 1
            else:
                best = math.inf
                for k in range(i):
                    q = round_distance(l_table[k, i] + dist(k, j))
                    if q < best:
                        best = q
                        n_table[i, j] = k
                l_table[i, j] = best
    return l_table, n_table


def split_chains(n_table: np.ndarray) -> list:
    """
    Walk the predecessors back from (n-2, n-1) and flag, per sorted index,
    whether the vertex lies on the upper chain (the one holding n-1).
    Both x-extremes are flagged as upper.
    """
    n = len(n_table)
    upper = [False] * n
    upper[0] = upper[n - 1] = True

    i, j = n - 2, n - 1
    j_upper = True
    while not (i == 0 and j == 1):
        k = int(n_table[i, j])
        if j > i + 1:
            upper[j - 1] = j_upper
            j -= 1
        else:
            # k precedes j, so the chain of j continues at k and the pair becomes (k, i)
            if k > 0:
                upper[k] = j_upper
            i, j, j_upper = k, i, not j_upper
    return upper


def solve_bitonic(graph: WeightedGraph, scratch=None) -> Optional[TourResult]:
    """
    Optimal bitonic tour, reported starting from vertex 0.

    `scratch` is accepted for a uniform solver signature; the tables hold
    all the state this solver needs.
    """
    n = graph.n
    if n <= 0:
        return None
    if n == 1:
        return degenerate_result(SOLVER_NAME, sorted_order=(0,))

    order = sort_by_x(graph)
    l_table, n_table = fill_tables(graph, order)
    length = float(round_distance(l_table[n - 2, n - 1] + graph.weight(order[n - 2], order[n - 1])))

    upper = split_chains(n_table)
    upper_chain = [s for s in range(n) if upper[s]]
    lower_chain = [0] + [s for s in range(1, n - 1) if not upper[s]] + [n - 1]
    cycle = upper_chain + lower_chain[-2:0:-1]

    ids = [order[s] for s in cycle]
    start = ids.index(0)
    tour = ids[start:] + ids[:start] + [0]

    extras = {
        "sorted_order": tuple(order),
        "l_table": l_table,
        "n_table": n_table,
        "upper_chain": tuple(order[s] for s in upper_chain),
        "lower_chain": tuple(order[s] for s in lower_chain),
        "bitonic_length": length,
        "tour_length": tour_distance(graph.weights, tour),
    }
    return TourResult(SOLVER_NAME, tuple(tour), length, extras)
