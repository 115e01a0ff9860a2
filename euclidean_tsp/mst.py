"""
MST 2-approximation: Prim's algorithm over a binary-heap fringe, then a
pre-order walk of the tree. By the tree-doubling argument the resulting
tour is never longer than twice the optimal one.
"""
from typing import Optional

from .geometry import round_distance
from .graph import WeightedGraph
from .heap import BinaryHeap, TreeNode
from .tour import TourResult, degenerate_result, tour_distance
from .vertex import VertexScratch

SOLVER_NAME = "mst"


# -------------------------
# PRIM
# -------------------------
def _relax(graph: WeightedGraph, scratch: VertexScratch, nodes: dict, u: int):
    """Offer every edge out of the new tree vertex u to the fringe."""
    for edge in graph.incident_edges(u):
        v = edge.follow(u)
        if scratch.is_marked(v):
            continue
        if scratch.improves(v, edge.weight):
            node = nodes[v]
            node.parent = u
            node.weight = edge.weight
            scratch.best_weight[v] = edge.weight


def build_mst(graph: WeightedGraph, scratch: Optional[VertexScratch] = None) -> list:
    """
    Minimum spanning tree rooted at vertex 0.

    Returns the tree nodes in the order they joined the tree; the root
    comes first with weight 0 and no parent. Every non-root vertex starts
    in the fringe with an unset weight. After each extraction all edges of
    the new vertex are relaxed and the whole fringe is re-heapified at once
    (one O(n) pass per extraction rather than a per-entry decrease-key).
    """
    if scratch is None:
        scratch = graph.new_scratch()

    start = TreeNode(0, 0.0, None)
    nodes = {0: start}
    fringe = BinaryHeap(graph.n + 1)
    for v in range(1, graph.n):
        node = TreeNode(v)
        nodes[v] = node
        fringe.insert(node)

    tree = [start]
    scratch.mark(0)
    _relax(graph, scratch, nodes, 0)
    fringe.heapify()

    while not fringe.is_empty():
        node = fringe.extract_min()
        tree.append(node)
        scratch.mark(node.position)
        _relax(graph, scratch, nodes, node.position)
        fringe.heapify()

    return tree


def mst_parents(tree: list) -> tuple:
    """Parent of every vertex, indexed by position; -1 for the root."""
    parents = [-1] * len(tree)
    for node in tree:
        parents[node.position] = -1 if node.parent is None else node.parent
    return tuple(parents)


def mst_weight(tree: list) -> float:
    total = 0.0
    for node in tree[1:]:
        total += node.weight
    return round_distance(total)


# -------------------------
# TOUR EXTRACTION
# -------------------------
def find_tour(parents) -> list:
    """
    Iterative pre-order walk of the tree given as a parent array.

    Children are pushed in descending position order, so the smallest
    child is visited first. The tour ends back at the root.
    """
    n = len(parents)
    children = [[] for _ in range(n)]
    for v in range(n - 1, -1, -1):
        if parents[v] != -1:
            children[parents[v]].append(v)

    seen = [False] * n
    tour = []
    stack = [0]
    while stack:
        v = stack.pop()
        if seen[v]:
            continue
        seen[v] = True
        tour.append(v)
        stack.extend(children[v])
    tour.append(0)
    return tour


def solve_mst(graph: WeightedGraph, scratch: Optional[VertexScratch] = None) -> Optional[TourResult]:
    """MST-based tour. The distance is read from the weight matrix along the tour."""
    n = graph.n
    if n <= 0:
        return None
    if n == 1:
        return degenerate_result(
            SOLVER_NAME, parents=(-1,), mst_weight=0.0, preorder_parents=((0, -1),)
        )

    tree = build_mst(graph, scratch)
    parents = mst_parents(tree)
    tour = find_tour(parents)
    extras = {
        "parents": parents,
        "mst_weight": mst_weight(tree),
        "preorder_parents": tuple((v, parents[v]) for v in tour[:-1]),
    }
    return TourResult(SOLVER_NAME, tuple(tour), tour_distance(graph.weights, tour), extras)
