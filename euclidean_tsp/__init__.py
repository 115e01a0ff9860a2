# Re-export convenient entry points for external use

from .errors import (
    TSPError,
    BadVertexError,
    EmptyHeapError,
    ConfigurationError,
    TourReconstructionError,
)

from .geometry import (
    Point,
    round_distance,
    euclidean_distance,
    generate_points,
    points_from_coordinates,
)

from .graph import (
    Edge,
    WeightedGraph,
)

from .tour import (
    TourResult,
    tour_distance,
    is_valid_tour,
)

from .exact import solve_optimal
from .mst import solve_mst, build_mst
from .greedy import solve_greedy
from .bitonic import solve_bitonic

from .solvers import (
    solver_registry_dict,
    solve,
)

from .experiment import (
    compare_solvers,
    save_result_to_file,
    load_result_from_file,
    run_experiments,
)

from .plotting import (
    plot_points,
    plot_tour,
    plot_mst,
    plot_greedy_edges,
    plot_solutions,
)
