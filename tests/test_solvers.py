import pytest

from euclidean_tsp.config import validate_arguments
from euclidean_tsp.errors import ConfigurationError
from euclidean_tsp.graph import WeightedGraph
from euclidean_tsp.solvers import solve, solver_registry_dict
from euclidean_tsp.tour import is_valid_tour
from euclidean_tsp.utils import ratios_to_reference, solvers_for_size


@pytest.mark.parametrize("name", list(solver_registry_dict))
def test_single_point_gives_degenerate_tour(name, single_graph):
    result = solve(single_graph, name)
    assert result.tour == (0,)
    assert result.distance == 0.0
    assert is_valid_tour(result.tour, 1)


@pytest.mark.parametrize("name", list(solver_registry_dict))
def test_empty_graph_gives_no_result(name):
    assert solve(WeightedGraph([]), name) is None


@pytest.mark.parametrize("n", [2, 3, 5, 8])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_optimal_is_never_beaten(n, seed):
    graph = WeightedGraph.from_seed(n, seed)
    results = {name: solve(graph, name) for name in solver_registry_dict}
    for name, result in results.items():
        assert is_valid_tour(result.tour, n), name
        assert results["optimal"].distance <= result.distance + 1e-9, name


def test_repeated_runs_do_not_share_state(small_graph):
    first = {name: solve(small_graph, name) for name in solver_registry_dict}
    second = {name: solve(small_graph, name) for name in solver_registry_dict}
    assert first == second


def test_unknown_solver_is_a_configuration_error(small_graph):
    with pytest.raises(ConfigurationError):
        solve(small_graph, "christofides")


def test_validate_arguments():
    assert validate_arguments("5", "7", "mst") == (5, 7)
    assert validate_arguments(200, -1, "greedy") == (200, -1)
    with pytest.raises(ConfigurationError):
        validate_arguments("five", 1)
    with pytest.raises(ConfigurationError):
        validate_arguments(0, 1, "mst")
    with pytest.raises(ConfigurationError):
        validate_arguments(14, 1, "optimal")
    with pytest.raises(ConfigurationError):
        validate_arguments(14, 1, "all")
    with pytest.raises(ConfigurationError):
        validate_arguments(4, 1, "nearest")
    assert validate_arguments(13, 1, "optimal") == (13, 1)


def test_solver_selection_and_ratios():
    assert "optimal" in solvers_for_size(13)
    assert "optimal" not in solvers_for_size(14)
    ratios = ratios_to_reference({"optimal": 10.0, "mst": 15.0})
    assert ratios == {"optimal": 1.0, "mst": 1.5}
    assert ratios_to_reference({"mst": 4.0, "greedy": 2.0})["mst"] == 2.0
    assert ratios_to_reference({"optimal": 0.0, "mst": 0.0}) == {"optimal": 1.0, "mst": 1.0}
