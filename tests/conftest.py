import matplotlib

matplotlib.use("Agg")

import pytest

from euclidean_tsp.geometry import points_from_coordinates
from euclidean_tsp.graph import WeightedGraph

# convex quadrilateral, every side sqrt(10) -> 3.16
CONVEX_QUAD = [(0, 0), (1, 3), (4, 4), (3, 1)]


@pytest.fixture
def quad_graph():
    return WeightedGraph(points_from_coordinates(CONVEX_QUAD))


@pytest.fixture
def small_graph():
    return WeightedGraph.from_seed(7, 11)


@pytest.fixture
def single_graph():
    return WeightedGraph.from_seed(1, 0)
