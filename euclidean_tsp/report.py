"""Console text for a solver run: coordinates, weight matrices and per-solver details."""
import numpy as np

from .config import PRINT_DETAIL_LIMIT


# -------------------------
# GENERIC BLOCKS
# -------------------------
def format_coordinates(points) -> str:
    return "X-Y Coordinates:\n" + "".join(f"v{p.index}: {p}" for p in points)


def format_matrix(matrix, title="Adjacency matrix of graph weights:") -> str:
    """Square matrix with a column header row and 2-decimal entries."""
    matrix = np.asarray(matrix)
    n = len(matrix)
    lines = [title, "", "".join(f"      {i}" for i in range(n))]
    for i in range(n):
        lines.append("")
        lines.append(f"{i}" + "".join(f"   {matrix[i, j]:.2f}" for j in range(n)))
    return "\n".join(lines)


def format_summary(result, runtime_ms=None) -> str:
    text = str(result)
    if runtime_ms is not None:
        text += f"\nRuntime for {result.solver} TSP   : {runtime_ms:.0f} milliseconds"
    return text


# -------------------------
# SOLVER DETAILS
# -------------------------
def _tree_matrix(parents, weights) -> np.ndarray:
    n = len(parents)
    matrix = np.zeros((n, n))
    for v, p in enumerate(parents):
        if p != -1:
            matrix[v, p] = matrix[p, v] = weights[v][p]
    return matrix


def format_optimal_details(result, graph) -> str:
    """Every enumerated path with its distance, when the run was traced."""
    trace = result.extras.get("trace", ())
    return "\n".join(
        "Path: " + " ".join(str(v) for v in path) + f"  distance = {distance:.2f}" for path, distance in trace
    )


def format_mst_details(result, graph) -> str:
    parents = result.extras["parents"]
    lines = [
        "Minimum Spanning Tree:",
        format_matrix(_tree_matrix(parents, graph.weights)),
        f"\nTotal weight of mst: {result.extras['mst_weight']:.2f}",
        "\nPre-order traversal:",
    ]
    lines += [f"Parent of {v} is {p}" for v, p in result.extras["preorder_parents"]]
    return "\n".join(lines)


def greedy_matrix(edges, n) -> np.ndarray:
    """Weight matrix holding only the selected edges, zero elsewhere."""
    matrix = np.zeros((n, n))
    for edge in edges:
        matrix[edge.row, edge.col] = matrix[edge.col, edge.row] = edge.weight
    return matrix


def format_greedy_details(result, graph) -> str:
    edges = result.extras["edges"]
    lines = [
        "Greedy  graph:",
        format_matrix(greedy_matrix(edges, graph.n)),
        "\nEdges of tour from greedy graph:",
    ]
    lines += [f"{e.row} {e.col} weight = {e.weight:.2f}" for e in edges]
    return "\n".join(lines)


def format_bitonic_details(result, graph) -> str:
    order = result.extras["sorted_order"]
    lines = ["Sorted X-Y Coordinates:", "".join(f"v{v}: {graph.points[v]}" for v in order)]
    if "l_table" in result.extras:
        lines.append("\nL-Table:")
        for row in result.extras["l_table"]:
            lines.append("  ".join(f"{value:.2f}" for value in row))
        lines.append("\nN-Table:")
        for row in result.extras["n_table"]:
            lines.append(" ".join(f"{int(value):2d}" for value in row))
    return "\n".join(lines)


_details = {
    "optimal": format_optimal_details,
    "mst": format_mst_details,
    "greedy": format_greedy_details,
    "bitonic": format_bitonic_details,
}


def format_report(graph, result, runtime_ms=None, detail_limit=PRINT_DETAIL_LIMIT, include_graph=True) -> str:
    """
    Full console report of one run. Coordinates, matrices and solver
    details are included only for graphs of at most `detail_limit` points.
    """
    blocks = []
    if graph.n <= detail_limit:
        if include_graph:
            blocks.append(format_coordinates(graph.points))
            blocks.append(format_matrix(graph.weights))
        if result.solver in _details and graph.n > 1:
            details = _details[result.solver](result, graph)
            if details:
                blocks.append(details)
    blocks.append(format_summary(result, runtime_ms))
    return "\n\n".join(blocks)
