import matplotlib.pyplot as plt

import euclidean_tsp

from euclidean_tsp.plotting import plot_greedy_edges, plot_mst, plot_solutions, plot_tour
from euclidean_tsp.report import format_matrix, format_report, greedy_matrix
from euclidean_tsp.solvers import solve, solver_registry_dict


def test_matrix_layout(quad_graph):
    text = format_matrix(quad_graph.weights)
    lines = text.splitlines()
    assert lines[0] == "Adjacency matrix of graph weights:"
    assert lines[2] == "      0      1      2      3"
    assert lines[4] == "0   0.00   3.16   5.66   3.16"


def test_report_sections(quad_graph):
    mst = solve(quad_graph, "mst")
    text = format_report(quad_graph, mst, runtime_ms=1.0)
    assert text.startswith("X-Y Coordinates:\nv0: (0,0) v1: (1,3) ")
    assert "Total weight of mst: 9.15" in text
    assert "Parent of 0 is -1" in text
    assert text.endswith("Runtime for mst TSP   : 1 milliseconds")

    short = format_report(quad_graph, mst, detail_limit=3)
    assert short == str(mst)


def test_greedy_matrix_holds_only_chosen_edges(quad_graph):
    result = solve(quad_graph, "greedy", seed=1)
    matrix = greedy_matrix(result.extras["edges"], quad_graph.n)
    assert matrix[1, 3] == matrix[3, 1] == 2.83
    assert matrix[1, 2] == 0.0
    assert (matrix > 0).sum() == 8


def test_plots_render(small_graph):
    results = {name: solve(small_graph, name) for name in solver_registry_dict}
    fig, ax = plot_solutions(small_graph.points, results, title="seed 11", show=False)
    assert len(ax.get_lines()) == 4
    plt.close(fig)

    ax, line = plot_tour(small_graph.points, results["bitonic"].tour, label="bitonic")
    assert len(line.get_xdata()) == small_graph.n + 1
    plot_mst(small_graph.points, results["mst"].extras["parents"], ax=ax)
    plot_greedy_edges(small_graph.points, results["greedy"].extras["edges"], ax=ax)
    plt.close("all")


def test_optimal_report_lists_traced_paths(quad_graph):
    traced = solve(quad_graph, "optimal", trace=[])
    text = format_report(quad_graph, traced, include_graph=False)
    paths = [line for line in text.splitlines() if line.startswith("Path: ")]
    assert len(paths) == 6
    assert paths[0] == "Path: 0 1 2 3 0  distance = 12.64"

    untraced = solve(quad_graph, "optimal")
    assert format_report(quad_graph, untraced, include_graph=False) == str(untraced)


def test_plotting_helpers_are_exported():
    assert euclidean_tsp.plot_solutions is plot_solutions
    assert euclidean_tsp.plot_tour is plot_tour
