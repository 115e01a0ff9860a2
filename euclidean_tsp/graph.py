from typing import Sequence

import numpy as np

from .errors import BadVertexError
from .geometry import Point, euclidean_distance, generate_points
from .vertex import VertexScratch


# -------------------------
# EDGES
# -------------------------
class Edge:
    """
    Undirected weighted edge between vertices `row` < `col`.

    `row` and `col` double as the weight-matrix indices and as the
    secondary keys of the total edge ordering (weight, row, col).
    """

    __slots__ = ("row", "col", "weight")

    def __init__(self, row: int, col: int, weight: float):
        self.row = row
        self.col = col
        self.weight = weight

    def __repr__(self):
        return f"Edge({self.row}, {self.col}, weight={self.weight})"

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.row, self.col, self.weight) == (other.row, other.col, other.weight)

    def __hash__(self):
        return hash((self.row, self.col))

    @property
    def vertices(self):
        return self.row, self.col

    @property
    def sort_key(self):
        return self.weight, self.row, self.col

    def is_smaller(self, other: "Edge") -> bool:
        """True if `other` comes before this edge in the (weight, row, col) order."""
        return other.sort_key < self.sort_key

    def can_follow(self, v: int) -> bool:
        return v == self.row or v == self.col

    def other(self, v: int) -> int:
        """The endpoint opposite to v."""
        if v == self.row:
            return self.col
        if v == self.col:
            return self.row
        raise BadVertexError(
            f"Improper vertex {v} given, does not connect to edge ({self.row}, {self.col})"
        )

    def follow(self, v: int, scratch: VertexScratch = None) -> int:
        """
        Walk the edge starting from v and return the vertex reached.

        When a scratch arena is given, the reached vertex records v as its
        parent. Raises BadVertexError if v is not an endpoint.
        """
        target = self.other(v)
        if scratch is not None:
            scratch.parent[target] = v
        return target


def edge_sort_key(edge: Edge):
    return edge.sort_key


# -------------------------
# COMPLETE WEIGHTED GRAPH
# -------------------------
class WeightedGraph:
    """
    Complete graph over a point set with rounded Euclidean weights.

    Holds the symmetric n x n weight matrix (zero diagonal), one Edge per
    unordered pair {i, j} with i < j, and for every vertex the list of its
    incident edges. Nothing changes after construction; the matrix is
    flagged read-only.
    """

    def __init__(self, points: Sequence[Point]):
        for idx, point in enumerate(points):
            assert point.index == idx, (
                f"Point at position {idx} has index {point.index}; points must be numbered 0..n-1"
            )
        self._points = tuple(points)
        n = len(self._points)

        weights = np.zeros((n, n), dtype=float)
        edges = []
        adjacency = [[] for _ in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                distance = euclidean_distance(self._points[i], self._points[j])
                weights[i, j] = distance
                weights[j, i] = distance
                edge = Edge(i, j, distance)
                adjacency[i].append(edge)
                adjacency[j].append(edge)
                edges.append(edge)

        weights.setflags(write=False)
        self._weights = weights
        self._edges = tuple(edges)
        self._adjacency = tuple(tuple(a) for a in adjacency)

    @classmethod
    def from_seed(cls, n: int, seed: int) -> "WeightedGraph":
        """Graph over `generate_points(n, seed)`."""
        return cls(generate_points(n, seed))

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"WeightedGraph({len(self)} vertices, {len(self._edges)} edges)"

    @property
    def n(self) -> int:
        return len(self._points)

    @property
    def points(self):
        return self._points

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def edges(self):
        return self._edges

    def weight(self, i: int, j: int) -> float:
        return float(self._weights[i, j])

    def incident_edges(self, v: int):
        return self._adjacency[v]

    def new_scratch(self) -> VertexScratch:
        """Fresh per-run vertex records for this graph."""
        return VertexScratch(self.n)
