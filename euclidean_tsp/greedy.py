"""
Greedy edge heuristic: take the cheapest edges first, refusing any edge that
would give a vertex a third neighbour or close a cycle before all vertices
are on one path. The last admitted edge joins the two ends of that path.
"""
from typing import Optional

import numpy as np

from .errors import TourReconstructionError
from .geometry import normalize_seed
from .graph import WeightedGraph, edge_sort_key
from .tour import TourResult, degenerate_result, tour_distance
from .union_find import find_root, is_root
from .vertex import VertexScratch

SOLVER_NAME = "greedy"


# -------------------------
# EDGE ORDER
# -------------------------
def sort_edges(edges, rng: Optional[np.random.Generator] = None) -> list:
    """
    Shuffle the edges, then sort them by (weight, row, col).

    The sort key is a total order, so the shuffle never changes the final
    order; it only randomizes the input handed to the sort.
    """
    if rng is None:
        rng = np.random.default_rng()
    edges = list(edges)
    shuffled = [edges[i] for i in rng.permutation(len(edges))]
    return sorted(shuffled, key=edge_sort_key)


# -------------------------
# EDGE SELECTION
# -------------------------
def _merge_components(parent: list, u: int, v: int):
    """Link the sets of u and v, which must currently be different."""
    if is_root(parent, u) and is_root(parent, v):
        parent[u] = v
    elif is_root(parent, u):
        parent[u] = find_root(parent, v)
    elif is_root(parent, v):
        parent[v] = find_root(parent, u)
    else:
        parent[find_root(parent, u)] = find_root(parent, v)


def select_edges(sorted_edges, n: int, scratch: VertexScratch) -> list:
    """
    Walk the sorted edges and admit edge (u, v) when both ends still have
    degree < 2 and either
      - fewer than n-1 edges are chosen and u, v lie in different sets, or
      - exactly n-1 edges are chosen and u, v lie in the same set
        (the edge closing the Hamiltonian path into a cycle).
    """
    parent = scratch.parent
    degree = [0] * n
    chosen = []
    for edge in sorted_edges:
        if len(chosen) == n:
            break
        u, v = edge.row, edge.col
        if degree[u] >= 2 or degree[v] >= 2:
            continue

        root_u = find_root(parent, u)
        root_v = find_root(parent, v)
        if len(chosen) < n - 1 and root_u != root_v:
            _merge_components(parent, u, v)
        elif not (len(chosen) == n - 1 and root_u == root_v):
            continue

        chosen.append(edge)
        degree[u] += 1
        degree[v] += 1
    return chosen


# -------------------------
# TOUR RECONSTRUCTION
# -------------------------
def follow_cycle(graph: WeightedGraph, chosen, scratch: VertexScratch) -> list:
    """
    Walk the chosen edges from vertex 0 until vertex 0 is reached again.

    Each step follows the first unused chosen edge in the adjacency order
    of the current vertex; the reached vertex records where it came from
    in `scratch.parent`.
    """
    n = graph.n
    chosen = set(chosen)
    used = set()
    scratch.reset()

    tour = [0]
    current = 0
    for _ in range(n):
        step = next(
            (e for e in graph.incident_edges(current) if e in chosen and e not in used),
            None,
        )
        if step is None:
            raise TourReconstructionError(f"greedy edges leave vertex {current} without an exit")
        used.add(step)
        current = step.follow(current, scratch)
        tour.append(current)
        if current == 0:
            break

    if len(tour) != n + 1 or current != 0:
        raise TourReconstructionError(f"greedy edges do not form a single cycle: walk was {tour}")
    return tour


def solve_greedy(
    graph: WeightedGraph,
    scratch: Optional[VertexScratch] = None,
    seed: Optional[int] = None,
) -> Optional[TourResult]:
    """Greedy-edge tour. `seed` fixes the pre-sort shuffle."""
    n = graph.n
    if n <= 0:
        return None
    if n == 1:
        return degenerate_result(SOLVER_NAME, edges=())
    if scratch is None:
        scratch = graph.new_scratch()

    rng = np.random.default_rng(None if seed is None else normalize_seed(seed))
    sorted_edges = sort_edges(graph.edges, rng)

    if n == 2:
        # the only edge is travelled there and back
        edge = sorted_edges[0]
        tour = [0, edge.follow(0, scratch), 0]
        return TourResult(SOLVER_NAME, tuple(tour), tour_distance(graph.weights, tour), {"edges": (edge,)})

    chosen = select_edges(sorted_edges, n, scratch)
    tour = follow_cycle(graph, chosen, scratch)
    return TourResult(SOLVER_NAME, tuple(tour), tour_distance(graph.weights, tour), {"edges": tuple(chosen)})
