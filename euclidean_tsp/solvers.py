from typing import Optional

from .bitonic import solve_bitonic
from .errors import ConfigurationError
from .exact import solve_optimal
from .graph import WeightedGraph
from .greedy import solve_greedy
from .mst import solve_mst
from .tour import TourResult

# === Accessible solvers ===
solver_registry_dict = {
    "optimal": solve_optimal,
    "mst": solve_mst,
    "greedy": solve_greedy,
    "bitonic": solve_bitonic,
}


def solve(graph: WeightedGraph, name: str, **kwargs) -> Optional[TourResult]:
    """
    Run the solver registered under `name` on `graph` with a fresh scratch
    arena, so no vertex state carries over from an earlier run.
    """
    try:
        solver = solver_registry_dict[name]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown solver {name!r}, expected one of {', '.join(solver_registry_dict)}"
        ) from exc
    return solver(graph, graph.new_scratch(), **kwargs)
