from .errors import ConfigurationError

# -------------------------
# GLOBAL SETTINGS
# -------------------------
DISTANCE_PRECISION = 2
"""decimals kept for every distance and every accumulated tour length"""

MAX_EXACT_VERTICES = 13
"""practical bound for the exhaustive solver; only checked by the callers"""

PRINT_DETAIL_LIMIT = 10
"""above this many points the console report skips coordinates and matrices"""

TRACE_PRINT_LIMIT = 5
"""up to this many points the exhaustive solver lists every path it enumerates"""

DEFAULT_RESULTS_FOLDER = "results"

SOLVER_NAMES = ("optimal", "mst", "greedy", "bitonic")


# -------------------------
# ARGUMENT VALIDATION
# -------------------------
def validate_arguments(n, seed, solver: str = "all"):
    """
    Convert raw (n, seed) values to integers and check them against the
    chosen solver. Returns the tuple (n, seed).

    Raises ConfigurationError on non-numeric values, n < 1, an unknown
    solver name, or n above MAX_EXACT_VERTICES when the exhaustive solver
    is part of the run.
    """
    try:
        n = int(n)
        seed = int(seed)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("Command line args must be integers") from exc

    if solver != "all" and solver not in SOLVER_NAMES:
        raise ConfigurationError(
            f"Unknown solver {solver!r}, expected one of {', '.join(SOLVER_NAMES)} or 'all'"
        )
    if n < 1:
        raise ConfigurationError("Number of vertices must be greater than 0")
    if solver in ("optimal", "all") and n > MAX_EXACT_VERTICES:
        raise ConfigurationError(
            f"Number of vertices must be between 1 and {MAX_EXACT_VERTICES} for the optimal solver"
        )
    return n, seed
